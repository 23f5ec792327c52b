"""List command for browsing the recycle bin.

Shows trashed entries with their original location, size and age,
sorted and filtered the same way the settings configure the default
listing.
"""

import json
from enum import Enum
from typing import Annotated

import typer
from rich.markup import escape

from trashctl.cli.common import load_manager, require_settings
from trashctl.trash.entries import TrashEntry, TrashFile
from trashctl.trash.filetypes import FOLDER_ICON, get_icon
from trashctl.trash.manager import now_ms
from trashctl.trash.ordering import SortKey, SortOrder
from trashctl.utils.formatting import (
    age_style,
    console,
    create_entry_table,
    format_age,
    format_size,
    print_info,
    print_success,
)


class OutputFormat(str, Enum):
    """Output format options for listing."""

    TABLE = "table"
    JSON = "json"


def list_entries(
    ctx: typer.Context,
    sort_by: Annotated[
        SortKey | None,
        typer.Option("--sort", help="Sort field (default from settings).", case_sensitive=False),
    ] = None,
    order: Annotated[
        SortOrder | None,
        typer.Option("--order", help="Sort order (default from settings).", case_sensitive=False),
    ] = None,
    search: Annotated[
        str | None,
        typer.Option("--search", "-s", help="Only show entries whose name contains this text."),
    ] = None,
    flat: Annotated[
        bool,
        typer.Option("--flat", help="Include entries inside trashed folders."),
    ] = False,
    output_format: Annotated[
        OutputFormat,
        typer.Option("--format", "-f", help="Output format.", case_sensitive=False),
    ] = OutputFormat.TABLE,
) -> None:
    """List the contents of the recycle bin.

    Examples:
        trashctl ls                       # Top-level entries, newest first
        trashctl ls --sort name --order asc
        trashctl ls -s report             # Search all depths by name
        trashctl ls --flat --format json
    """
    settings = require_settings()
    manager = load_manager(ctx, settings)

    if manager.is_empty:
        print_success("Recycle bin is empty.")
        return

    # Searching always spans every depth
    entries = manager.flatten() if flat or search else list(manager.items)
    if search:
        entries = manager.filter(search, entries)
    entries = manager.sort(sort_by or settings.sort_by, order or settings.sort_order, entries)

    if output_format == OutputFormat.JSON:
        console.print_json(json.dumps([_entry_to_dict(e) for e in entries]))
        return

    if not entries:
        print_info(f"No entries match '{search}'.")
        return

    table = create_entry_table()
    now = now_ms()
    for entry in entries:
        table.add_row(*_format_entry_row(entry, settings.auto_purge_days, now))
    console.print(table)

    console.print(
        f"\n[dim]{manager.total_count} items, {format_size(manager.total_size)} total[/dim]"
    )


def _format_entry_row(
    entry: TrashEntry, purge_days: int, now: int
) -> tuple[str, str, str, str, str]:
    """Format an entry as a table row with Rich markup.

    The age is colored by how close the entry is to being purged.
    """
    if isinstance(entry, TrashFile):
        icon = get_icon(entry.extension)
        name = f"[file]{escape(entry.name)}[/]"
    else:
        icon = FOLDER_ICON
        name = f"[folder]{escape(entry.name)}/[/]"
    style = age_style(entry.age_days(now), purge_days)
    age = f"[{style}]{format_age(entry.mtime, now)}[/]"
    return (icon, name, escape(entry.original_path), format_size(entry.size), age)


def _entry_to_dict(entry: TrashEntry) -> dict[str, object]:
    data: dict[str, object] = {
        "name": entry.name,
        "kind": entry.kind.value,
        "path": entry.path,
        "original_path": entry.original_path,
        "size": entry.size,
        "mtime": entry.mtime,
    }
    if isinstance(entry, TrashFile):
        data["extension"] = entry.extension
    return data
