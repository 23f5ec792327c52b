"""Trash tree manager.

The TrashManager owns the root folder that mirrors the trash directory,
rebuilds it from storage on refresh, and implements the bulk operations
every consumer uses: empty, age-based purge, sort, filter and flatten.

Operations are coroutines and assume a single caller at a time: run at
most one mutating operation against a manager, and never interleave
two refreshes.
"""

from __future__ import annotations

import logging
import time

from trashctl.storage.base import StorageAdapter, StorageError
from trashctl.trash.entries import TrashEntry, TrashFile, TrashFolder
from trashctl.trash.ordering import SortKey, SortOrder, entry_sort_key, name_key

logger = logging.getLogger(__name__)

DEFAULT_TRASH_FOLDER = ".trash"


def now_ms() -> int:
    """Current time in epoch milliseconds."""
    return int(time.time() * 1000)


class TrashManager:
    """Manages the in-memory tree of trashed entries.

    Attributes:
        trash_root: Store path of the trash folder.
        root: Folder entry representing the trash folder itself.
    """

    def __init__(self, storage: StorageAdapter, trash_root: str = DEFAULT_TRASH_FOLDER) -> None:
        """Initialize the TrashManager.

        Args:
            storage: Adapter used for every listing and mutation.
            trash_root: Store path of the trash folder.

        Raises:
            ValueError: If trash_root names the store root itself.
        """
        root = trash_root.strip("/")
        if root in ("", "."):
            msg = f"Trash root must be a folder inside the store, got {trash_root!r}"
            raise ValueError(msg)
        self._storage = storage
        self.trash_root = root
        self.root = TrashFolder(storage, self.trash_root, self.trash_root)

    @property
    def items(self) -> list[TrashEntry]:
        """Top-level entries of the trash."""
        return self.root.children

    @property
    def is_empty(self) -> bool:
        return not self.root.children

    @property
    def total_count(self) -> int:
        """Number of entries at all depths, folders and files both counted."""
        return self.root.count()

    @property
    def total_size(self) -> int:
        return self.root.size

    async def refresh(self) -> None:
        """Rebuild the tree from storage.

        The new tree is assembled off to the side and only installed once
        the whole listing succeeded. On a storage error the previous tree
        is kept. Entries held from before a refresh are stale afterwards.
        """
        try:
            if not await self._storage.exists(self.trash_root):
                root = TrashFolder(self._storage, self.trash_root, self.trash_root)
            else:
                root = await self._build_folder(self.trash_root, None)
        except StorageError as e:
            logger.error(
                "Failed to refresh trash %s, keeping previous state: %s", self.trash_root, e
            )
            return

        self.root = root
        logger.debug("Refreshed trash: %d entries", self.total_count)

    async def _build_folder(self, path: str, parent: TrashFolder | None) -> TrashFolder:
        folder = TrashFolder(self._storage, path, self.trash_root, parent)
        listing = await self._storage.list(path)

        for folder_path in sorted(listing.folders, key=name_key):
            if folder_path.strip("/") == self.trash_root:
                continue
            child = await self._build_folder(folder_path, folder)
            folder.add_child(child)

        for file_path in sorted(listing.files, key=name_key):
            stat = await self._storage.stat(file_path)
            folder.add_child(TrashFile(self._storage, file_path, self.trash_root, stat, folder))

        return folder

    async def empty(self) -> list[TrashEntry]:
        """Permanently delete every top-level entry, then forget the tree.

        Deletion is best effort: the tree is cleared even when individual
        deletes fail.

        Returns:
            Entries whose deletion failed (empty on full success).
        """
        failed: list[TrashEntry] = []
        for entry in list(self.root.children):
            if not await entry.delete():
                failed.append(entry)

        self.root.children = []
        if failed:
            logger.warning("Emptied trash with %d failed deletion(s)", len(failed))
        return failed

    async def purge_older_than(self, threshold_days: int, now: int | None = None) -> int:
        """Delete entries whose age is at least ``threshold_days``.

        An old entry is purged as a unit, without descending into it. Only
        folders younger than the threshold are descended so their children
        can be evaluated individually.

        Args:
            threshold_days: Minimum age in whole days.
            now: Reference time in epoch ms (defaults to the current time).

        Returns:
            Number of entries purged directly (a folder counts once).

        Raises:
            ValueError: If threshold_days is negative.
        """
        if threshold_days < 0:
            msg = f"Purge threshold must be non-negative, got {threshold_days}"
            raise ValueError(msg)

        reference = now_ms() if now is None else now
        purged = await self._purge_children(self.root, threshold_days, reference)
        if purged:
            logger.info("Purged %d entries older than %d days", purged, threshold_days)
        return purged

    async def _purge_children(self, folder: TrashFolder, threshold_days: int, now: int) -> int:
        count = 0
        for entry in list(folder.children):
            if entry.age_days(now) >= threshold_days:
                if await entry.delete():
                    count += 1
            elif isinstance(entry, TrashFolder):
                count += await self._purge_children(entry, threshold_days, now)
        return count

    def sort(
        self,
        by: SortKey = SortKey.DATE,
        order: SortOrder = SortOrder.DESC,
        items: list[TrashEntry] | None = None,
    ) -> list[TrashEntry]:
        """Sort entries by name, date or size.

        Without ``items`` the top-level children are reordered in place.
        With ``items`` a new sorted list is returned and the tree is left
        untouched. Equal keys keep their relative order.

        Returns:
            The sorted entries.
        """
        key = entry_sort_key(SortKey(by))
        reverse = SortOrder(order) == SortOrder.DESC
        if items is None:
            self.root.children.sort(key=key, reverse=reverse)
            return self.root.children
        return sorted(items, key=key, reverse=reverse)

    def filter(self, query: str, items: list[TrashEntry] | None = None) -> list[TrashEntry]:
        """Return entries whose name contains ``query`` (case-insensitive).

        A blank query returns the unfiltered entries. The result is always
        a new list.
        """
        source = self.root.children if items is None else items
        if not query or not query.strip():
            return list(source)

        needle = query.casefold()
        return [entry for entry in source if needle in entry.name.casefold()]

    def flatten(self) -> list[TrashEntry]:
        """All entries in depth-first pre-order."""
        result: list[TrashEntry] = []
        self._flatten_into(self.root, result)
        return result

    def _flatten_into(self, folder: TrashFolder, result: list[TrashEntry]) -> None:
        for entry in folder.children:
            result.append(entry)
            if isinstance(entry, TrashFolder):
                self._flatten_into(entry, result)

    def find(self, path: str) -> TrashEntry | None:
        """Find an entry by its trash path or its original path."""
        wanted = path.replace("\\", "/").strip("/")
        for entry in self.flatten():
            if wanted in (entry.path, entry.original_path):
                return entry
        return None
