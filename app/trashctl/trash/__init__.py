"""Trash tree module.

This module provides the trash entry model, restore-path validation,
entry ordering, and the manager that owns the trash tree.
"""

from trashctl.trash.entries import MS_PER_DAY, EntryKind, TrashEntry, TrashFile, TrashFolder
from trashctl.trash.manager import DEFAULT_TRASH_FOLDER, TrashManager
from trashctl.trash.ordering import SortKey, SortOrder, name_key
from trashctl.trash.safety import is_safe_restore_path

__all__ = [
    "DEFAULT_TRASH_FOLDER",
    "MS_PER_DAY",
    "EntryKind",
    "SortKey",
    "SortOrder",
    "TrashEntry",
    "TrashFile",
    "TrashFolder",
    "TrashManager",
    "is_safe_restore_path",
    "name_key",
]
