"""Empty command for permanently deleting everything in the recycle bin."""

import asyncio
from typing import Annotated

import typer

from trashctl.cli.common import load_manager, require_settings
from trashctl.utils.formatting import format_size, print_error, print_info, print_success


def empty(
    ctx: typer.Context,
    yes: Annotated[
        bool,
        typer.Option("--yes", "-y", help="Skip confirmation prompt."),
    ] = False,
) -> None:
    """Permanently delete ALL entries in the recycle bin."""
    settings = require_settings()
    manager = load_manager(ctx, settings)

    if manager.is_empty:
        print_info("Recycle bin is already empty.")
        return

    count = manager.total_count
    size = format_size(manager.total_size)

    if settings.show_confirmations and not yes:
        confirmed = typer.confirm(
            f"Permanently delete ALL {count} item(s) ({size}) in the recycle bin? "
            "This cannot be undone!",
            default=False,
        )
        if not confirmed:
            print_info("Aborted.")
            raise typer.Exit(code=0)

    failed = asyncio.run(manager.empty())

    if failed:
        for entry in failed:
            print_error(f"Could not delete {entry.path}")
        raise typer.Exit(code=1)

    print_success(f"Recycle bin emptied ({count} items, {size}).")
