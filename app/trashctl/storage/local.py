"""Local directory implementation of the storage adapter.

Store paths are POSIX-style and resolved against a vault root directory.
Blocking filesystem calls run in a worker thread via asyncio.to_thread;
file content is streamed with aiofiles.
"""

from __future__ import annotations

import asyncio
import logging
import os
import shutil
import stat
from pathlib import Path

import aiofiles

from trashctl.storage.base import FileStat, Listing, StorageError

logger = logging.getLogger(__name__)


class LocalStorage:
    """StorageAdapter over a local directory tree.

    Attributes:
        root: Absolute vault root that all store paths are relative to.
    """

    def __init__(self, root: Path | str) -> None:
        """Initialize LocalStorage.

        Args:
            root: Vault root directory. ``~`` is expanded.
        """
        self.root = Path(root).expanduser().resolve()

    def _abs(self, path: str) -> Path:
        """Resolve a store path under the root without following symlinks.

        Raises:
            StorageError: If the path points outside the root.
        """
        rel = str(path).replace("\\", "/").strip("/")
        target = Path(os.path.normpath(self.root / rel)) if rel else self.root
        if not target.is_relative_to(self.root):
            msg = f"Path escapes the vault root: {path}"
            raise StorageError(msg)
        return target

    def _rel(self, target: Path) -> str:
        return target.relative_to(self.root).as_posix()

    async def exists(self, path: str) -> bool:
        target = self._abs(path)
        try:
            return await asyncio.to_thread(target.exists)
        except OSError as e:
            raise StorageError(f"Cannot check {path}: {e}") from e

    async def stat(self, path: str) -> FileStat:
        target = self._abs(path)
        try:
            st = await asyncio.to_thread(target.stat)
        except OSError as e:
            raise StorageError(f"Cannot stat {path}: {e}") from e
        size = 0 if stat.S_ISDIR(st.st_mode) else int(st.st_size)
        return FileStat(size=size, mtime=int(st.st_mtime * 1000))

    async def list(self, path: str) -> Listing:
        target = self._abs(path)

        def _scan() -> Listing:
            files: list[str] = []
            folders: list[str] = []
            for child in target.iterdir():
                if child.is_dir() and not child.is_symlink():
                    folders.append(self._rel(child))
                else:
                    files.append(self._rel(child))
            return Listing(files=files, folders=folders)

        try:
            return await asyncio.to_thread(_scan)
        except OSError as e:
            raise StorageError(f"Cannot list {path}: {e}") from e

    async def read(self, path: str) -> str:
        try:
            async with aiofiles.open(self._abs(path), encoding="utf-8", errors="replace") as f:
                return await f.read()
        except OSError as e:
            raise StorageError(f"Cannot read {path}: {e}") from e

    async def read_binary(self, path: str) -> bytes:
        try:
            async with aiofiles.open(self._abs(path), "rb") as f:
                return await f.read()
        except OSError as e:
            raise StorageError(f"Cannot read {path}: {e}") from e

    async def write(self, path: str, content: str | bytes) -> None:
        data = content.encode("utf-8") if isinstance(content, str) else content
        target = self._abs(path)
        try:
            await asyncio.to_thread(target.parent.mkdir, parents=True, exist_ok=True)
            async with aiofiles.open(target, "wb") as f:
                await f.write(data)
        except OSError as e:
            raise StorageError(f"Cannot write {path}: {e}") from e

    async def mkdir(self, path: str) -> None:
        try:
            await asyncio.to_thread(self._abs(path).mkdir, parents=True, exist_ok=True)
        except OSError as e:
            raise StorageError(f"Cannot create folder {path}: {e}") from e

    async def rename(self, src: str, dst: str) -> None:
        src_p = self._abs(src)
        dst_p = self._abs(dst)
        if await self.exists(dst):
            msg = f"Cannot move {src} to {dst}: destination exists"
            raise StorageError(msg)
        try:
            await asyncio.to_thread(src_p.rename, dst_p)
        except OSError as e:
            raise StorageError(f"Cannot move {src} to {dst}: {e}") from e
        logger.debug("Moved %s -> %s", src, dst)

    async def remove(self, path: str) -> None:
        try:
            await asyncio.to_thread(self._abs(path).unlink)
        except OSError as e:
            raise StorageError(f"Cannot remove {path}: {e}") from e

    async def rmdir(self, path: str, recursive: bool) -> None:
        target = self._abs(path)
        if target == self.root:
            msg = "Refusing to remove the vault root"
            raise StorageError(msg)
        try:
            if recursive:
                await asyncio.to_thread(shutil.rmtree, target)
            else:
                await asyncio.to_thread(target.rmdir)
        except OSError as e:
            raise StorageError(f"Cannot remove folder {path}: {e}") from e
