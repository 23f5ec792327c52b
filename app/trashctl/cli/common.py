"""Shared helpers for CLI commands.

Commands read the vault location from the Typer context, load user
settings, and build a refreshed TrashManager through these helpers so
error reporting stays identical across commands.
"""

from __future__ import annotations

import asyncio
from pathlib import Path

import typer

from trashctl.core.settings import SettingsError, TrashSettings, load_settings, update_setting
from trashctl.storage.local import LocalStorage
from trashctl.trash.entries import TrashEntry, TrashFolder
from trashctl.trash.manager import TrashManager
from trashctl.utils.formatting import print_error


def require_settings() -> TrashSettings:
    """Load settings, exiting with code 1 if they are invalid."""
    try:
        return load_settings()
    except SettingsError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e


def get_vault(ctx: typer.Context) -> Path:
    """Vault root selected on the command line (defaults to the cwd)."""
    obj = ctx.obj or {}
    vault = obj.get("vault")
    return Path(vault) if vault is not None else Path.cwd()


def build_manager(ctx: typer.Context, settings: TrashSettings) -> TrashManager:
    """Create a TrashManager for the selected vault.

    The ``--trash-folder`` option overrides the configured trash folder and
    is validated the same way as the setting.

    Raises:
        typer.Exit: If the vault directory does not exist or the trash
            folder override is invalid.
    """
    vault = get_vault(ctx)
    if not vault.is_dir():
        print_error(f"Vault directory not found: {vault}")
        raise typer.Exit(code=1)

    override = (ctx.obj or {}).get("trash_folder")
    if override is not None:
        try:
            settings = update_setting(settings, "trash_folder", override)
        except SettingsError as e:
            print_error(f"Invalid --trash-folder: {override!r}")
            raise typer.Exit(code=1) from e
    return TrashManager(LocalStorage(vault), settings.trash_folder)


def load_manager(ctx: typer.Context, settings: TrashSettings) -> TrashManager:
    """Create a TrashManager and populate it from storage."""
    manager = build_manager(ctx, settings)
    asyncio.run(manager.refresh())
    return manager


def resolve_entries(manager: TrashManager, paths: list[str]) -> list[TrashEntry]:
    """Look up entries by trash path or original path.

    Duplicates, and entries inside a folder that is itself selected, are
    dropped so each item is operated on once.

    Raises:
        typer.Exit: If any path is not in the trash.
    """
    entries: list[TrashEntry] = []
    missing: list[str] = []
    for path in paths:
        entry = manager.find(path)
        if entry is None:
            missing.append(path)
        else:
            entries.append(entry)

    if missing:
        for path in missing:
            print_error(f"Not in recycle bin: {path}")
        raise typer.Exit(code=1)

    return _drop_nested(entries)


def _drop_nested(entries: list[TrashEntry]) -> list[TrashEntry]:
    folders = [e.path for e in entries if isinstance(e, TrashFolder)]
    result: list[TrashEntry] = []
    for entry in entries:
        if any(entry.path.startswith(f"{folder}/") for folder in folders):
            continue
        if any(kept is entry for kept in result):
            continue
        result.append(entry)
    return result
