"""Shared Rich display functions for entry operations.

Provides the plan and results tables used by the restore, delete,
empty and purge commands.
"""

from dataclasses import dataclass

from rich.markup import escape
from rich.table import Table

from trashctl.trash.entries import TrashEntry
from trashctl.utils.formatting import console, format_size, print_success, print_warning


@dataclass(frozen=True, slots=True)
class EntryResult:
    """Outcome of a single restore or delete.

    Attributes:
        entry: Entry that was operated on.
        success: Whether the operation succeeded.
    """

    entry: TrashEntry
    success: bool


def create_plan_table(entries: list[TrashEntry], title: str) -> Table:
    """Create a table listing entries an operation is about to touch.

    Args:
        entries: Entries to list.
        title: Table title.

    Returns:
        Rich Table with path, original path and size columns.
    """
    table = Table(
        title=title,
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Path", style="bold", no_wrap=True)
    table.add_column("Original Path", style="original_path")
    table.add_column("Size", style="info", justify="right")

    for entry in entries:
        table.add_row(escape(entry.path), escape(entry.original_path), format_size(entry.size))

    return table


def create_results_table(results: list[EntryResult], action: str) -> Table:
    """Create a table with one OK/FAIL row per result.

    Args:
        results: Operation results.
        action: Verb shown in the title (e.g. "Restore").

    Returns:
        Rich Table configured for results display.
    """
    table = Table(
        title=f"{action} Results",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Status", width=8, justify="center")
    table.add_column("Path", no_wrap=True)
    table.add_column("Original Path", style="original_path")

    for result in results:
        status = "[success]OK[/success]" if result.success else "[error]FAIL[/error]"
        table.add_row(status, escape(result.entry.path), escape(result.entry.original_path))

    return table


def print_results_summary(results: list[EntryResult], verb: str) -> None:
    """Print a one-line summary of operation results.

    Args:
        results: Operation results.
        verb: Past-tense verb (e.g. "restored").
    """
    success_count = sum(1 for r in results if r.success)
    fail_count = len(results) - success_count

    if fail_count == 0:
        print_success(f"All {success_count} item(s) {verb}.")
    else:
        print_warning(f"{success_count} {verb}, {fail_count} failed")
    if fail_count:
        console.print("[dim]Failed items stay in the recycle bin.[/dim]")
