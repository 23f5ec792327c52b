"""Purge command for removing entries older than a number of days.

Old folders are removed as a whole; only folders that are themselves
younger than the threshold are searched for old entries.
"""

import asyncio
from typing import Annotated

import typer

from trashctl.cli.common import load_manager, require_settings
from trashctl.utils.formatting import print_info, print_success


def purge(
    ctx: typer.Context,
    days: Annotated[
        int | None,
        typer.Option(
            "--days",
            "-d",
            min=0,
            help="Age threshold in days (default: auto_purge_days setting).",
        ),
    ] = None,
    auto: Annotated[
        bool,
        typer.Option("--auto", help="Only purge when auto purge is enabled in settings."),
    ] = False,
    yes: Annotated[
        bool,
        typer.Option("--yes", "-y", help="Skip confirmation prompt."),
    ] = False,
) -> None:
    """Permanently delete entries older than a number of days.

    Examples:
        trashctl purge --days 30
        trashctl purge --auto       # Suitable for a login hook or timer
    """
    settings = require_settings()

    if auto and not settings.auto_purge_enabled:
        print_info("Auto purge is disabled in settings.")
        return

    threshold = settings.auto_purge_days if days is None else days
    manager = load_manager(ctx, settings)

    if manager.is_empty:
        print_info("Recycle bin is empty.")
        return

    if settings.show_confirmations and not (yes or auto):
        confirmed = typer.confirm(
            f"Permanently delete entries older than {threshold} day(s)?",
            default=False,
        )
        if not confirmed:
            print_info("Aborted.")
            raise typer.Exit(code=0)

    purged = asyncio.run(manager.purge_older_than(threshold))

    if purged:
        print_success(f"Purged {purged} old item(s) from the recycle bin.")
    else:
        print_info(f"No entries older than {threshold} day(s).")
