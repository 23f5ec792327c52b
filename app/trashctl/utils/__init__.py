"""Utility modules for trashctl.

This module exports commonly used utility functions.
"""

from trashctl.utils.formatting import (
    age_style,
    console,
    create_entry_table,
    err_console,
    format_age,
    format_size,
    print_error,
    print_info,
    print_success,
    print_warning,
)

__all__ = [
    "age_style",
    "console",
    "create_entry_table",
    "err_console",
    "format_age",
    "format_size",
    "print_error",
    "print_info",
    "print_success",
    "print_warning",
]
