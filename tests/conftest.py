"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules, including an
in-memory storage adapter for exercising the trash tree without a disk.
"""

from pathlib import Path

import pytest
from trashctl.storage.base import FileStat, Listing, StorageError

MUTATING_CALLS = frozenset({"write", "mkdir", "rename", "remove", "rmdir"})


class MemoryStorage:
    """In-memory StorageAdapter that records every call.

    Attributes:
        files: File path to content.
        stats: File path to FileStat.
        folders: Set of folder paths.
        calls: (method, path) tuples in call order.
        supports_rename: When False, rename raises NotImplementedError.
    """

    def __init__(self) -> None:
        self.files: dict[str, bytes] = {}
        self.stats: dict[str, FileStat] = {}
        self.folders: set[str] = set()
        self.calls: list[tuple[str, str]] = []
        self.supports_rename = True
        self._failures: dict[str, set[str]] = {}

    # --- test helpers ---

    def add_file(
        self,
        path: str,
        content: bytes = b"",
        size: int | None = None,
        mtime: int | None = None,
    ) -> None:
        self.files[path] = content
        self.stats[path] = FileStat(size=len(content) if size is None else size, mtime=mtime)
        self._add_parents(path)

    def add_folder(self, path: str) -> None:
        self.folders.add(path)
        self._add_parents(path)

    def fail(self, method: str, path: str) -> None:
        """Make ``method`` raise StorageError for ``path``."""
        self._failures.setdefault(method, set()).add(path)

    @property
    def mutations(self) -> list[tuple[str, str]]:
        return [call for call in self.calls if call[0] in MUTATING_CALLS]

    def _add_parents(self, path: str) -> None:
        parts = path.split("/")[:-1]
        for i in range(1, len(parts) + 1):
            self.folders.add("/".join(parts[:i]))

    def _record(self, method: str, path: str) -> None:
        self.calls.append((method, path))
        if path in self._failures.get(method, set()):
            raise StorageError(f"{method} failed for {path}")

    def _descendants(self, path: str) -> tuple[list[str], list[str]]:
        prefix = f"{path}/"
        files = [p for p in self.files if p.startswith(prefix)]
        folders = [p for p in self.folders if p.startswith(prefix)]
        return files, folders

    # --- StorageAdapter ---

    async def exists(self, path: str) -> bool:
        self._record("exists", path)
        return path in self.files or path in self.folders

    async def stat(self, path: str) -> FileStat:
        self._record("stat", path)
        if path in self.stats:
            return self.stats[path]
        if path in self.folders:
            return FileStat(size=0, mtime=None)
        raise StorageError(f"No such path: {path}")

    async def list(self, path: str) -> Listing:
        self._record("list", path)
        if path not in self.folders:
            raise StorageError(f"No such folder: {path}")
        prefix = f"{path}/"

        def direct(p: str) -> bool:
            return p.startswith(prefix) and "/" not in p[len(prefix) :]

        return Listing(
            files=[p for p in self.files if direct(p)],
            folders=[p for p in self.folders if direct(p)],
        )

    async def read(self, path: str) -> str:
        return (await self.read_binary(path)).decode("utf-8")

    async def read_binary(self, path: str) -> bytes:
        self._record("read", path)
        if path not in self.files:
            raise StorageError(f"No such file: {path}")
        return self.files[path]

    async def write(self, path: str, content: str | bytes) -> None:
        self._record("write", path)
        data = content.encode("utf-8") if isinstance(content, str) else content
        self.add_file(path, data)

    async def mkdir(self, path: str) -> None:
        self._record("mkdir", path)
        self.add_folder(path)

    async def rename(self, src: str, dst: str) -> None:
        if not self.supports_rename:
            raise NotImplementedError
        self._record("rename", src)
        if src in self.files:
            self.files[dst] = self.files.pop(src)
            self.stats[dst] = self.stats.pop(src)
            self._add_parents(dst)
            return
        if src not in self.folders:
            raise StorageError(f"No such path: {src}")
        files, folders = self._descendants(src)
        for old in files:
            new = dst + old[len(src) :]
            self.files[new] = self.files.pop(old)
            self.stats[new] = self.stats.pop(old)
        for old in folders:
            self.folders.discard(old)
            self.folders.add(dst + old[len(src) :])
        self.folders.discard(src)
        self.add_folder(dst)

    async def remove(self, path: str) -> None:
        self._record("remove", path)
        if path not in self.files:
            raise StorageError(f"No such file: {path}")
        del self.files[path]
        del self.stats[path]

    async def rmdir(self, path: str, recursive: bool) -> None:
        self._record("rmdir", path)
        if path not in self.folders:
            raise StorageError(f"No such folder: {path}")
        files, folders = self._descendants(path)
        if (files or folders) and not recursive:
            raise StorageError(f"Folder not empty: {path}")
        for p in files:
            del self.files[p]
            del self.stats[p]
        for p in folders:
            self.folders.discard(p)
        self.folders.discard(path)


@pytest.fixture
def storage() -> MemoryStorage:
    """Empty in-memory storage."""
    return MemoryStorage()


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point XDG_CONFIG_HOME at a temporary directory for every test."""
    config_home = tmp_path / "xdg-config"
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    return config_home / "trashctl"


@pytest.fixture
def vault(tmp_path: Path) -> Path:
    """Vault directory with an empty ``.trash`` folder."""
    root = tmp_path / "vault"
    (root / ".trash").mkdir(parents=True)
    return root
