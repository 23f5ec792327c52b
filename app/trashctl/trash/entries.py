"""Trash tree entries.

A TrashEntry is one node of the trash tree: a TrashFile or a TrashFolder
living under the trash root. Entries translate their trash path back to
the original vault path, expose size and age metadata, and perform the
two terminal operations of their lifecycle: restore and delete.

Parent links are weak references. The owning folder's ``children`` list
is the only thing that keeps an entry in the tree; the back-reference
exists so an entry can remove itself after a successful restore/delete.
"""

from __future__ import annotations

import logging
import math
import weakref
from enum import Enum
from typing import ClassVar

from trashctl.storage.base import FileStat, StorageAdapter, StorageError, base_name, parent_path
from trashctl.trash.filetypes import get_category
from trashctl.trash.safety import is_safe_restore_path

logger = logging.getLogger(__name__)

MS_PER_DAY = 24 * 60 * 60 * 1000


class EntryKind(str, Enum):
    """Kind of trash entry.

    Attributes:
        FILE: A single trashed file.
        FOLDER: A trashed folder with children.
    """

    FILE = "file"
    FOLDER = "folder"


class TrashEntry:
    """Base class for entries in the trash tree.

    Attributes:
        path: Full store path under the trash root.
        name: Final path segment.
        trash_root: Store path of the trash folder (e.g. ``.trash``).
    """

    kind: ClassVar[EntryKind]

    def __init__(
        self,
        storage: StorageAdapter,
        path: str,
        trash_root: str,
        parent: TrashFolder | None = None,
    ) -> None:
        self._storage = storage
        self.path = path
        self.name = base_name(path)
        self.trash_root = trash_root.strip("/")
        self._parent_ref: weakref.ref[TrashFolder] | None = None
        if parent is not None:
            self._parent_ref = weakref.ref(parent)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.path!r})"

    @property
    def parent(self) -> TrashFolder | None:
        """Folder whose children contain this entry, if it is still alive."""
        if self._parent_ref is None:
            return None
        return self._parent_ref()

    @property
    def original_path(self) -> str:
        """Path the entry is restored to: ``path`` without the trash-root prefix."""
        if self.path == self.trash_root:
            return ""
        prefix = f"{self.trash_root}/"
        if self.path.startswith(prefix):
            return self.path[len(prefix) :]
        return self.path

    @property
    def is_file(self) -> bool:
        return self.kind == EntryKind.FILE

    @property
    def is_folder(self) -> bool:
        return self.kind == EntryKind.FOLDER

    @property
    def size(self) -> int:
        raise NotImplementedError

    @property
    def mtime(self) -> int | None:
        raise NotImplementedError

    def age_days(self, now: int) -> int:
        """Whole days between ``mtime`` and ``now`` (epoch ms).

        Entries without a known mtime are age 0.
        """
        mtime = self.mtime
        if mtime is None:
            return 0
        return math.floor((now - mtime) / MS_PER_DAY)

    async def restore(self) -> bool:
        """Move the entry back to its original path.

        The destination is validated, never overwritten, and its parent
        folder is created when missing. The adapter's atomic rename is used
        when available; otherwise content is copied back and the trash
        source removed. Partial copies are not rolled back.

        Returns:
            True if the entry was restored and detached from the tree.
        """
        target = self.original_path
        if not is_safe_restore_path(target):
            logger.warning("Refusing to restore %s: unsafe destination %r", self.path, target)
            return False

        try:
            if await self._storage.exists(target):
                logger.info("Not restoring %s: %s already exists", self.path, target)
                return False

            target_dir = parent_path(target)
            if target_dir and not await self._storage.exists(target_dir):
                await self._storage.mkdir(target_dir)

            try:
                await self._storage.rename(self.path, target)
            except NotImplementedError:
                if not await self._copy_back(target):
                    return False
        except StorageError as e:
            logger.error("Failed to restore %s: %s", self.path, e)
            return False

        logger.debug("Restored %s -> %s", self.path, target)
        self._detach()
        return True

    async def delete(self) -> bool:
        """Permanently remove the entry from storage.

        Returns:
            True if the entry was removed and detached from the tree.
        """
        try:
            await self._remove()
        except StorageError as e:
            logger.error("Failed to delete %s: %s", self.path, e)
            return False

        logger.debug("Deleted %s", self.path)
        self._detach()
        return True

    def _detach(self) -> None:
        parent = self.parent
        if parent is not None:
            parent.remove_child(self)
        self._parent_ref = None

    async def _copy_back(self, target: str) -> bool:
        raise NotImplementedError

    async def _remove(self) -> None:
        raise NotImplementedError


class TrashFile(TrashEntry):
    """A trashed file with stat-backed size and mtime."""

    kind = EntryKind.FILE

    def __init__(
        self,
        storage: StorageAdapter,
        path: str,
        trash_root: str,
        stat: FileStat | None = None,
        parent: TrashFolder | None = None,
    ) -> None:
        super().__init__(storage, path, trash_root, parent)
        self.stat = stat or FileStat()

    @property
    def size(self) -> int:
        return self.stat.size or 0

    @property
    def mtime(self) -> int | None:
        return self.stat.mtime

    @property
    def extension(self) -> str:
        """Lower-cased text after the last dot of the name, or ""."""
        if "." not in self.name:
            return ""
        return self.name.rsplit(".", 1)[1].lower()

    @property
    def category(self) -> str | None:
        """File type category (markdown, code, image, ...) or None."""
        return get_category(self.extension)

    async def read(self) -> str | None:
        """Read the file content as text for previews.

        Returns:
            File content, or None if it could not be read.
        """
        try:
            return await self._storage.read(self.path)
        except StorageError as e:
            logger.warning("Unable to read %s: %s", self.path, e)
            return None

    async def _copy_back(self, target: str) -> bool:
        data = await self._storage.read_binary(self.path)
        await self._storage.write(target, data)
        await self._storage.remove(self.path)
        return True

    async def _remove(self) -> None:
        await self._storage.remove(self.path)


class TrashFolder(TrashEntry):
    """A trashed folder whose size and mtime derive from its children."""

    kind = EntryKind.FOLDER

    def __init__(
        self,
        storage: StorageAdapter,
        path: str,
        trash_root: str,
        parent: TrashFolder | None = None,
    ) -> None:
        super().__init__(storage, path, trash_root, parent)
        self.children: list[TrashEntry] = []

    @property
    def size(self) -> int:
        return sum(child.size for child in self.children)

    @property
    def mtime(self) -> int | None:
        mtimes = [m for m in (child.mtime for child in self.children) if m is not None]
        return max(mtimes) if mtimes else None

    def add_child(self, child: TrashEntry) -> None:
        """Append a child and point its parent link at this folder.

        Raises:
            ValueError: If the child is the trash root or a name is duplicated.
        """
        if child.path == self.trash_root:
            msg = f"Trash root cannot be a child of {self.path}"
            raise ValueError(msg)
        if any(existing.name == child.name for existing in self.children):
            msg = f"Duplicate entry name in {self.path}: {child.name}"
            raise ValueError(msg)
        child._parent_ref = weakref.ref(self)
        self.children.append(child)

    def remove_child(self, child: TrashEntry) -> None:
        """Remove a child by identity. Unknown children are ignored."""
        for index, existing in enumerate(self.children):
            if existing is child:
                del self.children[index]
                return

    def count(self) -> int:
        """Number of descendants, folders and files both counted."""
        return sum(1 + (c.count() if isinstance(c, TrashFolder) else 0) for c in self.children)

    async def _copy_back(self, target: str) -> bool:
        await self._storage.mkdir(target)
        restored = True
        for child in list(self.children):
            if not await child.restore():
                restored = False
        if not restored:
            logger.error("Could not restore every child of %s; leaving it in trash", self.path)
            return False
        await self._storage.rmdir(self.path, False)
        return True

    async def _remove(self) -> None:
        await self._storage.rmdir(self.path, True)
