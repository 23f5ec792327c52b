"""Unit tests for user settings.

Tests for defaults, validation, TOML load/save and single-key updates.
"""

from pathlib import Path

import pytest
from pydantic import ValidationError
from trashctl.core.paths import get_settings_path
from trashctl.core.settings import (
    SettingsError,
    SettingsParseError,
    TrashSettings,
    load_settings,
    save_settings,
    update_setting,
)
from trashctl.trash.ordering import SortKey, SortOrder


class TestTrashSettings:
    """Tests for TrashSettings model."""

    def test_defaults(self) -> None:
        """Defaults match the documented behavior."""
        settings = TrashSettings()
        assert settings.trash_folder == ".trash"
        assert settings.auto_purge_enabled is False
        assert settings.auto_purge_days == 90
        assert settings.show_confirmations is True
        assert settings.sort_by == SortKey.DATE
        assert settings.sort_order == SortOrder.DESC

    def test_trash_folder_is_normalized(self) -> None:
        """Surrounding whitespace and slashes are stripped."""
        assert TrashSettings(trash_folder=" /_bin/ ").trash_folder == "_bin"

    @pytest.mark.parametrize(
        "folder", ["", "  ", "/", ".", "a/./b", "..", "../outside", "file://x"]
    )
    def test_unsafe_trash_folder_rejected(self, folder: str) -> None:
        """The trash folder must stay inside the vault."""
        with pytest.raises(ValidationError, match="vault-relative"):
            TrashSettings(trash_folder=folder)

    def test_negative_days_rejected(self) -> None:
        """Purge threshold cannot be negative."""
        with pytest.raises(ValidationError):
            TrashSettings(auto_purge_days=-1)

    def test_unknown_field_rejected(self) -> None:
        """Extra keys are forbidden."""
        with pytest.raises(ValidationError):
            TrashSettings(colour="red")  # type: ignore[call-arg]


class TestLoadSettings:
    """Tests for load_settings function."""

    def test_missing_file_gives_defaults(self, tmp_path: Path) -> None:
        """A missing settings file yields defaults."""
        assert load_settings(tmp_path / "config.toml") == TrashSettings()

    def test_loads_values(self, tmp_path: Path) -> None:
        """Values from the file override defaults."""
        path = tmp_path / "config.toml"
        path.write_text('auto_purge_enabled = true\nauto_purge_days = 7\nsort_by = "name"\n')

        settings = load_settings(path)

        assert settings.auto_purge_enabled is True
        assert settings.auto_purge_days == 7
        assert settings.sort_by == SortKey.NAME
        assert settings.show_confirmations is True

    def test_invalid_toml(self, tmp_path: Path) -> None:
        """Malformed TOML raises SettingsParseError."""
        path = tmp_path / "config.toml"
        path.write_text("auto_purge_days = [")
        with pytest.raises(SettingsParseError, match="Invalid TOML"):
            load_settings(path)

    def test_invalid_content(self, tmp_path: Path) -> None:
        """Schema violations raise SettingsError."""
        path = tmp_path / "config.toml"
        path.write_text('sort_by = "colour"\n')
        with pytest.raises(SettingsError, match="Invalid settings content"):
            load_settings(path)

    def test_uses_default_path(self) -> None:
        """Without a path the XDG settings file is used."""
        path = get_settings_path()
        path.parent.mkdir(parents=True)
        path.write_text("show_confirmations = false\n")

        assert load_settings().show_confirmations is False


class TestSaveSettings:
    """Tests for save_settings function."""

    def test_round_trip(self, tmp_path: Path) -> None:
        """Saved settings load back unchanged."""
        path = tmp_path / "nested" / "config.toml"
        settings = TrashSettings(auto_purge_days=30, sort_order=SortOrder.ASC)

        assert save_settings(settings, path) == path
        assert load_settings(path) == settings

    def test_only_non_defaults_written(self, tmp_path: Path) -> None:
        """Default values are left out of the file."""
        path = tmp_path / "config.toml"
        save_settings(TrashSettings(trash_folder="_bin"), path)
        assert path.read_text().strip() == 'trash_folder = "_bin"'

    def test_no_temp_files_left(self, tmp_path: Path) -> None:
        """The atomic write leaves only the settings file."""
        path = tmp_path / "cfg" / "config.toml"
        save_settings(TrashSettings(auto_purge_enabled=True), path)
        assert [p.name for p in path.parent.iterdir()] == ["config.toml"]


class TestUpdateSetting:
    """Tests for update_setting function."""

    @pytest.mark.parametrize(
        ("key", "value", "expected"),
        [
            ("auto_purge_enabled", "true", True),
            ("auto_purge_days", "14", 14),
            ("show_confirmations", "false", False),
            ("sort_by", "size", SortKey.SIZE),
            ("sort_order", "asc", SortOrder.ASC),
            ("trash_folder", "_bin", "_bin"),
        ],
    )
    def test_updates_from_string(self, key: str, value: str, expected: object) -> None:
        """String values are coerced to the field type."""
        updated = update_setting(TrashSettings(), key, value)
        assert getattr(updated, key) == expected

    def test_original_unchanged(self) -> None:
        """update_setting returns a new object."""
        settings = TrashSettings()
        update_setting(settings, "auto_purge_days", "1")
        assert settings.auto_purge_days == 90

    def test_unknown_key(self) -> None:
        """Unknown keys raise SettingsError listing the valid keys."""
        with pytest.raises(SettingsError, match="Unknown setting 'colour'"):
            update_setting(TrashSettings(), "colour", "red")

    @pytest.mark.parametrize(
        ("key", "value"),
        [
            ("auto_purge_days", "-3"),
            ("auto_purge_days", "soon"),
            ("sort_by", "colour"),
            ("trash_folder", "../up"),
        ],
    )
    def test_invalid_value(self, key: str, value: str) -> None:
        """Invalid values raise SettingsError."""
        with pytest.raises(SettingsError, match=f"Invalid value for {key}"):
            update_setting(TrashSettings(), key, value)
