"""Show command for previewing a trashed entry without restoring it."""

import asyncio
from typing import Annotated

import typer
from rich.markup import escape
from rich.table import Table

from trashctl.cli.common import load_manager, require_settings, resolve_entries
from trashctl.trash.entries import TrashEntry, TrashFile, TrashFolder
from trashctl.trash.filetypes import TEXT_CATEGORIES
from trashctl.utils.formatting import console, format_age, format_size, print_error, print_info


def show(
    ctx: typer.Context,
    path: Annotated[str, typer.Argument(help="Trash path or original path of the entry.")],
) -> None:
    """Preview a trashed file, or summarize a trashed folder."""
    settings = require_settings()
    manager = load_manager(ctx, settings)
    entry = resolve_entries(manager, [path])[0]

    console.print(_create_details_table(entry))

    if isinstance(entry, TrashFile):
        _preview_file(entry)
    elif isinstance(entry, TrashFolder):
        _list_folder(entry)


def _create_details_table(entry: TrashEntry) -> Table:
    table = Table(
        title=escape(entry.name),
        show_header=False,
        border_style="border",
    )
    table.add_column("Field", style="muted")
    table.add_column("Value")
    table.add_row("Original path", escape(entry.original_path))
    table.add_row("Size", format_size(entry.size))
    table.add_row("Deleted", format_age(entry.mtime))
    return table


def _preview_file(entry: TrashFile) -> None:
    """Print text content verbatim; other file types are only described."""
    if entry.category not in TEXT_CATEGORIES and entry.extension not in ("txt", ""):
        print_info(f"No text preview for .{entry.extension} files.")
        return

    content = asyncio.run(entry.read())
    if content is None:
        print_error(f"Unable to read {entry.path}")
        raise typer.Exit(code=1)

    console.print(content, markup=False, highlight=False)


def _list_folder(entry: TrashFolder) -> None:
    if not entry.children:
        print_info("Folder is empty.")
        return
    for child in entry.children:
        suffix = "/" if isinstance(child, TrashFolder) else ""
        console.print(f"  {escape(child.name)}{suffix}  [dim]{format_size(child.size)}[/dim]")
