"""User settings for trashctl.

Settings control where the trash folder lives, whether old entries are
purged automatically, confirmation prompts, and the default listing
order. They are stored in ~/.config/trashctl/config.toml.
"""

import logging
import os
import tomllib
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Annotated, Any

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from trashctl.core.paths import get_settings_path
from trashctl.trash.manager import DEFAULT_TRASH_FOLDER
from trashctl.trash.ordering import SortKey, SortOrder
from trashctl.trash.safety import is_safe_restore_path

logger = logging.getLogger(__name__)


class TrashSettings(BaseModel):
    """Persisted trashctl settings.

    Attributes:
        trash_folder: Vault-relative trash folder.
        auto_purge_enabled: Purge old entries when ``auto-purge`` runs.
        auto_purge_days: Age threshold in days for purging.
        show_confirmations: Ask before destructive operations.
        sort_by: Default listing sort field.
        sort_order: Default listing sort direction.
    """

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    trash_folder: Annotated[str, Field(description="Vault-relative trash folder")] = (
        DEFAULT_TRASH_FOLDER
    )
    auto_purge_enabled: Annotated[bool, Field(description="Enable age-based auto purge")] = False
    auto_purge_days: Annotated[
        int,
        Field(ge=0, description="Purge entries at least this many days old"),
    ] = 90
    show_confirmations: Annotated[bool, Field(description="Confirm destructive actions")] = True
    sort_by: Annotated[SortKey, Field(description="Default sort field")] = SortKey.DATE
    sort_order: Annotated[SortOrder, Field(description="Default sort order")] = SortOrder.DESC

    @field_validator("trash_folder")
    @classmethod
    def validate_trash_folder(cls, v: str) -> str:
        """Trash folder must be a non-empty path inside the vault."""
        folder = v.strip().strip("/")
        segments = folder.split("/")
        if not is_safe_restore_path(folder) or any(s in ("", ".") for s in segments):
            msg = f"trash_folder must be a vault-relative path, got {v!r}"
            raise ValueError(msg)
        return folder


class SettingsError(Exception):
    """Base exception for settings errors."""


class SettingsParseError(SettingsError):
    """Raised when the settings file cannot be parsed."""


def load_settings(path: Path | None = None) -> TrashSettings:
    """Load settings from a TOML file.

    A missing file yields the default settings.

    Args:
        path: Path to the settings file. If None, uses the default path.

    Returns:
        Validated TrashSettings object.

    Raises:
        SettingsParseError: If the TOML syntax is invalid.
        SettingsError: If the file cannot be read or the content is invalid.
    """
    settings_path = path or get_settings_path()

    if not settings_path.exists():
        logger.debug("No settings file at %s, using defaults", settings_path)
        return TrashSettings()

    try:
        with open(settings_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise SettingsParseError(f"Invalid TOML syntax: {e}") from e
    except OSError as e:
        raise SettingsError(f"Failed to read settings: {e}") from e

    try:
        return TrashSettings.model_validate(data)
    except ValidationError as e:
        raise SettingsError(f"Invalid settings content: {e}") from e


def save_settings(settings: TrashSettings, path: Path | None = None) -> Path:
    """Save settings to a TOML file.

    Only values that differ from the defaults are written. The file is
    replaced atomically via a temporary file and os.replace().

    Args:
        settings: Settings to save.
        path: Destination path. If None, uses the default path.

    Returns:
        Path where the settings were saved.

    Raises:
        SettingsError: If the file cannot be written.
    """
    settings_path = path or get_settings_path()
    data = _settings_to_dict(settings)

    tmp_path: Path | None = None
    try:
        settings_path.parent.mkdir(parents=True, exist_ok=True)
        with NamedTemporaryFile(
            mode="wb",
            dir=settings_path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            tomli_w.dump(data, f)
        os.replace(str(tmp_path), str(settings_path))
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise SettingsError(f"Failed to write settings: {e}") from e

    return settings_path


def update_setting(settings: TrashSettings, key: str, value: str) -> TrashSettings:
    """Return a copy of ``settings`` with one field set from a string value.

    Args:
        settings: Current settings.
        key: Field name.
        value: New value as typed on the command line.

    Raises:
        SettingsError: If the key is unknown or the value is invalid.
    """
    if key not in TrashSettings.model_fields:
        valid = ", ".join(TrashSettings.model_fields)
        raise SettingsError(f"Unknown setting '{key}'. Valid settings: {valid}")

    data = settings.model_dump(mode="json")
    data[key] = value
    try:
        return TrashSettings.model_validate(data, strict=False)
    except ValidationError as e:
        raise SettingsError(f"Invalid value for {key}: {value!r}") from e


def _settings_to_dict(settings: TrashSettings) -> dict[str, Any]:
    defaults = TrashSettings().model_dump(mode="json")
    current = settings.model_dump(mode="json")
    return {key: value for key, value in current.items() if value != defaults[key]}
