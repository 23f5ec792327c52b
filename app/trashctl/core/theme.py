"""Color theme for trashctl output.

The bundled ``data/theme.toml`` defines every color; a ``theme.toml`` in the
user config directory may override any subset of them.
"""

import logging
import tomllib
from importlib import resources
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator
from rich.theme import Theme

from trashctl.core.paths import get_user_theme_path

logger = logging.getLogger(__name__)

# Rich style name -> (color field, style prefix)
STYLE_MAP: dict[str, tuple[str, str]] = {
    "text": ("text", ""),
    "muted": ("muted", ""),
    "dim": ("muted", ""),
    "header": ("header", ""),
    "bold_header": ("header", "bold"),
    "border": ("border", ""),
    "success": ("success", ""),
    "warning": ("warning", ""),
    "error": ("error", "bold"),
    "info": ("info", ""),
    "folder": ("folder", "bold"),
    "file": ("file", ""),
    "original_path": ("original_path", ""),
    "age_recent": ("age_recent", ""),
    "age_old": ("age_old", ""),
    "age_expired": ("age_expired", ""),
}


def _check_hex(field: str, value: object) -> str:
    if not isinstance(value, str):
        msg = f"{field}: color must be a string"
        raise ValueError(msg)
    color = value.strip()
    if not color.startswith("#"):
        msg = f"{field}: color must start with '#'"
        raise ValueError(msg)
    digits = color[1:]
    if len(digits) not in (3, 6):
        msg = f"{field}: color must be #RGB or #RRGGBB format"
        raise ValueError(msg)
    try:
        int(digits, 16)
    except ValueError:
        msg = f"{field}: invalid hex color '{color}'"
        raise ValueError(msg) from None
    return color


class ThemeColors(BaseModel):
    """Hex colors used by trashctl listings and messages."""

    model_config = ConfigDict(extra="forbid")

    text: str = "#ffffff"
    muted: str = "#b2bec3"
    header: str = "#69B9A1"
    border: str = "#29526d"

    success: str = "#03b971"
    warning: str = "#f5b332"
    error: str = "#f53263"
    info: str = "#0ec1c8"

    folder: str = "#0e8ac8"
    file: str = "#ffffff"
    original_path: str = "#b2bec3"

    # Entry age buckets
    age_recent: str = "#03b971"
    age_old: str = "#faf870"
    age_expired: str = "#d44ebc"

    @field_validator("*", mode="before")
    @classmethod
    def validate_hex_color(cls, v: object, info: Any) -> str:
        return _check_hex(info.field_name, v)


def get_bundled_theme_path() -> Path:
    """Path of the theme shipped inside the package."""
    return resources.files("trashctl.data").joinpath("theme.toml")  # type: ignore[return-value]


def _load_toml_colors(path: Path) -> dict[str, str] | None:
    """Read the ``[colors]`` table of a theme file.

    Non-string values are ignored.

    Returns:
        Color name to value, or None if the file is missing or unreadable.
    """
    try:
        data = tomllib.loads(Path(path).read_text(encoding="utf-8"))
    except FileNotFoundError:
        return None
    except (tomllib.TOMLDecodeError, OSError, UnicodeDecodeError) as e:
        logger.warning("Ignoring theme file %s: %s", path, e)
        return None

    section = data.get("colors", {})
    if not isinstance(section, dict):
        logger.warning("Ignoring theme file %s: 'colors' is not a table", path)
        return None
    return {name: value for name, value in section.items() if isinstance(value, str)}


def load_theme() -> ThemeColors:
    """Load bundled colors with user overrides applied.

    An invalid merged theme falls back to the built-in defaults.
    """
    colors = _load_toml_colors(get_bundled_theme_path()) or {}
    if not colors:
        logger.error("Bundled theme is missing or empty, using built-in colors")

    user_path = get_user_theme_path()
    overrides = _load_toml_colors(user_path)
    if overrides:
        logger.debug("Applying %d theme override(s) from %s", len(overrides), user_path)
        colors.update(overrides)

    try:
        return ThemeColors(**colors)
    except ValidationError as e:
        logger.warning("Invalid theme configuration, using defaults: %s", e)
        return ThemeColors()


def get_rich_theme(colors: ThemeColors | None = None) -> Theme:
    """Build the Rich theme for ``colors`` (loaded from disk when omitted)."""
    if colors is None:
        colors = load_theme()

    styles: dict[str, str] = {}
    for style, (field, prefix) in STYLE_MAP.items():
        color = getattr(colors, field)
        styles[style] = f"{prefix} {color}" if prefix else color
    return Theme(styles)


_cached_theme: Theme | None = None


def get_theme() -> Theme:
    """Get the Rich theme, loading and caching it on first use."""
    global _cached_theme
    if _cached_theme is None:
        _cached_theme = get_rich_theme()
    return _cached_theme
