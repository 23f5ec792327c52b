"""Restore command for moving trashed entries back to their original paths.

Entries are never restored over an existing file or folder; such
entries are reported as failed and stay in the recycle bin.
"""

import asyncio
from typing import Annotated

import typer

from trashctl.cli.common import load_manager, require_settings, resolve_entries
from trashctl.cli.display import EntryResult, create_results_table, print_results_summary
from trashctl.trash.entries import TrashEntry
from trashctl.utils.formatting import console, print_error, print_info


def restore(
    ctx: typer.Context,
    paths: Annotated[
        list[str] | None,
        typer.Argument(help="Trash paths or original paths to restore."),
    ] = None,
    restore_all: Annotated[
        bool,
        typer.Option("--all", "-a", help="Restore every top-level entry."),
    ] = False,
) -> None:
    """Restore entries from the recycle bin.

    Examples:
        trashctl restore notes/todo.md
        trashctl restore .trash/projects
        trashctl restore --all
    """
    if not paths and not restore_all:
        print_error("Give at least one path, or use --all.")
        raise typer.Exit(code=1)

    settings = require_settings()
    manager = load_manager(ctx, settings)

    if restore_all:
        entries = list(manager.items)
        if not entries:
            print_info("Recycle bin is empty.")
            return
    else:
        entries = resolve_entries(manager, paths or [])

    results = asyncio.run(_restore_entries(entries))

    console.print(create_results_table(results, "Restore"))
    print_results_summary(results, "restored")

    if any(not r.success for r in results):
        raise typer.Exit(code=1)


async def _restore_entries(entries: list[TrashEntry]) -> list[EntryResult]:
    results: list[EntryResult] = []
    for entry in entries:
        results.append(EntryResult(entry=entry, success=await entry.restore()))
    return results
