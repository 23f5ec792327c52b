"""Rich console formatting utilities.

Provides consistent formatting for CLI output using Rich.
"""

from __future__ import annotations

import sys
from datetime import datetime

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from trashctl.core.theme import get_theme
from trashctl.trash.entries import MS_PER_DAY


def _detect_color_system() -> str | None:
    """Return "truecolor" for interactive terminals, None to let Rich auto-detect."""
    if sys.stdout.isatty():
        return "truecolor"
    return None


# Shared console instances (theme loaded once at import)
console = Console(theme=get_theme(), color_system=_detect_color_system())
err_console = Console(theme=get_theme(), stderr=True, color_system=_detect_color_system())


def format_size(size_bytes: int | None) -> str:
    """Format byte count as human-readable string.

    Args:
        size_bytes: Size in bytes.

    Returns:
        "0 B" for zero, "? B" when unknown, otherwise B/KB/MB/GB with one decimal.
    """
    if size_bytes == 0:
        return "0 B"
    if size_bytes is None or size_bytes < 0:
        return "? B"
    size = float(size_bytes)
    for unit in ("B", "KB", "MB"):
        if size < 1024:
            return f"{int(size)} B" if unit == "B" else f"{size:.1f} {unit}"
        size /= 1024
    return f"{size:.1f} GB"


def format_age(mtime: int | None, now: int | None = None) -> str:
    """Format an epoch-ms timestamp relative to today.

    Args:
        mtime: Timestamp in epoch milliseconds.
        now: Reference time in epoch milliseconds (defaults to now).

    Returns:
        "Today", "Yesterday", "N days ago", or "Unknown".
    """
    if not mtime:
        return "Unknown"

    reference = datetime.now() if now is None else datetime.fromtimestamp(now / 1000)
    today = reference.replace(hour=0, minute=0, second=0, microsecond=0)
    today_ms = int(today.timestamp() * 1000)

    if mtime >= today_ms:
        return "Today"
    if mtime >= today_ms - MS_PER_DAY:
        return "Yesterday"
    days = (today_ms - mtime) // MS_PER_DAY
    return f"{days} days ago"


def age_style(age_days: int, purge_days: int) -> str:
    """Theme style for an entry age measured against the purge threshold.

    Entries at or past the threshold are expired; entries past half of it
    are old.
    """
    if age_days >= purge_days:
        return "age_expired"
    if age_days * 2 >= purge_days:
        return "age_old"
    return "age_recent"


def create_entry_table(title: str = "Recycle Bin") -> Table:
    """Create a pre-configured table for displaying trash entries.

    Args:
        title: Table title.

    Returns:
        Rich Table with icon, name, original path, size and age columns.
    """
    table = Table(
        title=title,
        show_header=True,
        header_style="bold_header",
        border_style="border",
        row_styles=["", "on grey7"],
    )
    table.add_column("", width=2, justify="center")
    table.add_column("Name", no_wrap=True)
    table.add_column("Original Path", style="original_path", overflow="ellipsis")
    table.add_column("Size", style="info", justify="right")
    table.add_column("Deleted", style="muted", justify="right")
    return table


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[info]{escape(message)}[/]")


def print_warning(message: str) -> None:
    """Print a warning message."""
    err_console.print(f"[warning]Warning:[/] {escape(message)}")


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"[error]Error:[/] {escape(message)}")


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[success]{escape(message)}[/]")
