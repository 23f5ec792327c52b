"""Config commands for viewing and changing trashctl settings.

Settings are stored in ~/.config/trashctl/config.toml.
"""

from typing import Annotated

import typer
from rich.markup import escape
from rich.table import Table

from trashctl.cli.common import require_settings
from trashctl.core.paths import get_settings_path
from trashctl.core.settings import (
    SettingsError,
    TrashSettings,
    save_settings,
    update_setting,
)
from trashctl.utils.formatting import console, print_error, print_info, print_success

app = typer.Typer(
    help="View and change settings.",
    invoke_without_command=True,
    no_args_is_help=True,
)


@app.command("show")
def show_settings() -> None:
    """Show current settings."""
    settings = require_settings()

    table = Table(
        title="Settings",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Setting", style="bold")
    table.add_column("Value", style="info")
    table.add_column("Description", style="muted")

    for name, field in TrashSettings.model_fields.items():
        value = settings.model_dump(mode="json")[name]
        table.add_row(name, escape(str(value)), field.description or "")

    console.print(table)
    console.print(f"\n[dim]Config file: {escape(str(get_settings_path()))}[/dim]")


@app.command("set")
def set_setting(
    key: Annotated[str, typer.Argument(help="Setting name.")],
    value: Annotated[str, typer.Argument(help="New value.")],
) -> None:
    """Change a single setting.

    Examples:
        trashctl config set auto_purge_enabled true
        trashctl config set auto_purge_days 30
        trashctl config set sort_by name
    """
    settings = require_settings()
    try:
        updated = update_setting(settings, key, value)
        path = save_settings(updated)
    except SettingsError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_success(f"{key} = {updated.model_dump(mode='json')[key]}")
    print_info(f"Saved to {path}")


@app.command("reset")
def reset_settings(
    yes: Annotated[
        bool,
        typer.Option("--yes", "-y", help="Skip confirmation prompt."),
    ] = False,
) -> None:
    """Reset all settings to their defaults."""
    if not yes and not typer.confirm("Reset all settings to defaults?", default=False):
        print_info("Aborted.")
        raise typer.Exit(code=0)

    try:
        path = save_settings(TrashSettings())
    except SettingsError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_success(f"Settings reset ({path}).")
