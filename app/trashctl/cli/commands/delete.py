"""Delete command for permanently removing trashed entries."""

import asyncio
from typing import Annotated

import typer

from trashctl.cli.common import load_manager, require_settings, resolve_entries
from trashctl.cli.display import (
    EntryResult,
    create_plan_table,
    create_results_table,
    print_results_summary,
)
from trashctl.trash.entries import TrashEntry
from trashctl.utils.formatting import console, print_info


def delete(
    ctx: typer.Context,
    paths: Annotated[
        list[str],
        typer.Argument(help="Trash paths or original paths to delete."),
    ],
    yes: Annotated[
        bool,
        typer.Option("--yes", "-y", help="Skip confirmation prompt."),
    ] = False,
) -> None:
    """Permanently delete entries from the recycle bin.

    Folders are deleted with everything inside them. This cannot be undone.
    """
    settings = require_settings()
    manager = load_manager(ctx, settings)
    entries = resolve_entries(manager, paths)

    if settings.show_confirmations and not yes:
        console.print(create_plan_table(entries, "Permanent Deletion"))
        confirmed = typer.confirm(
            f"\nPermanently delete {len(entries)} item(s)? This cannot be undone.",
            default=False,
        )
        if not confirmed:
            print_info("Aborted.")
            raise typer.Exit(code=0)

    results = asyncio.run(_delete_entries(entries))

    console.print(create_results_table(results, "Delete"))
    print_results_summary(results, "deleted")

    if any(not r.success for r in results):
        raise typer.Exit(code=1)


async def _delete_entries(entries: list[TrashEntry]) -> list[EntryResult]:
    results: list[EntryResult] = []
    for entry in entries:
        results.append(EntryResult(entry=entry, success=await entry.delete()))
    return results
