"""CLI commands for trashctl.

This package contains all subcommand implementations.
"""

from trashctl.cli.commands import config, delete, empty, ls, purge, restore, show

__all__ = ["config", "delete", "empty", "ls", "purge", "restore", "show"]
