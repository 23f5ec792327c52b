"""Main CLI application entry point.

Defines the Typer application and global options.
"""

import locale
import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.logging import RichHandler

from trashctl import __version__
from trashctl.cli.commands import config, delete, empty, ls, purge, restore, show
from trashctl.utils.formatting import err_console

logger = logging.getLogger(__name__)

# Create main Typer app
app = typer.Typer(
    name="trashctl",
    help="Browse, restore and purge a document vault's recycle bin.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"trashctl version {__version__}")
        raise typer.Exit()


def configure_locale() -> None:
    """Collate entry names with the locale from the environment."""
    try:
        locale.setlocale(locale.LC_COLLATE, "")
    except locale.Error as e:
        logger.debug("Keeping C collation: %s", e)


def configure_logging(verbose: bool) -> None:
    """Route log records through Rich on stderr.

    Args:
        verbose: Log at DEBUG instead of WARNING.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=verbose)],
        force=True,
    )


@app.callback()
def main(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    vault: Annotated[
        Path | None,
        typer.Option(
            "--vault",
            "-C",
            envvar="TRASHCTL_VAULT",
            help="Vault root directory (default: current directory).",
        ),
    ] = None,
    trash_folder: Annotated[
        str | None,
        typer.Option(
            "--trash-folder",
            help="Trash folder inside the vault (default: trash_folder setting).",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable verbose output.",
        ),
    ] = False,
) -> None:
    """trashctl - a recycle bin for document vaults.

    Lists what sits in the vault's trash folder, restores entries to where
    they came from, and deletes or purges them for good.
    """
    configure_logging(verbose)
    configure_locale()

    # Store options in context for subcommands
    ctx.ensure_object(dict)
    ctx.obj["vault"] = vault
    ctx.obj["trash_folder"] = trash_folder
    ctx.obj["verbose"] = verbose


# Register commands
app.command(name="ls")(ls.list_entries)
app.command(name="show")(show.show)
app.command(name="restore")(restore.restore)
app.command(name="delete")(delete.delete)
app.command(name="empty")(empty.empty)
app.command(name="purge")(purge.purge)
app.add_typer(config.app, name="config")


if __name__ == "__main__":
    app()
