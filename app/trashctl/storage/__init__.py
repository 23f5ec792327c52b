"""Storage adapters for the trash core.

This module provides the async adapter protocol the trash tree is
built on, plus a local directory implementation.
"""

from trashctl.storage.base import FileStat, Listing, StorageAdapter, StorageError
from trashctl.storage.local import LocalStorage

__all__ = [
    "FileStat",
    "Listing",
    "LocalStorage",
    "StorageAdapter",
    "StorageError",
]
