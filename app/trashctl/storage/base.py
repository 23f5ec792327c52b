"""Storage adapter protocol for the trash core.

The trash tree never touches the filesystem directly. Every listing,
stat and mutation goes through a StorageAdapter, which lets the same
core run against a local vault directory or any other backend.

Paths are store-relative POSIX strings (``.trash/notes/todo.md``).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol


class StorageError(Exception):
    """Raised by storage adapters when an I/O operation fails."""


@dataclass(frozen=True, slots=True)
class FileStat:
    """Metadata returned by ``StorageAdapter.stat``.

    Attributes:
        size: Size in bytes (None if the backend cannot report it).
        mtime: Last modification time in epoch milliseconds (None if unknown).
    """

    size: int | None = None
    mtime: int | None = None


@dataclass(frozen=True, slots=True)
class Listing:
    """Single-level directory listing.

    Attributes:
        files: Full store paths of the files directly inside the directory.
        folders: Full store paths of the subdirectories.
    """

    files: list[str] = field(default_factory=list)
    folders: list[str] = field(default_factory=list)


class StorageAdapter(Protocol):
    """Async capability set consumed by the trash core."""

    async def exists(self, path: str) -> bool:
        """Check whether a file or folder exists."""
        ...

    async def stat(self, path: str) -> FileStat:
        """Return size and mtime of a file or folder."""
        ...

    async def list(self, path: str) -> Listing:
        """List the direct children of a folder."""
        ...

    async def read(self, path: str) -> str:
        """Read a file as text."""
        ...

    async def read_binary(self, path: str) -> bytes:
        """Read a file as bytes."""
        ...

    async def write(self, path: str, content: str | bytes) -> None:
        """Write a whole file, replacing any previous content."""
        ...

    async def mkdir(self, path: str) -> None:
        """Create a folder and any missing parents."""
        ...

    async def rename(self, src: str, dst: str) -> None:
        """Move a file or folder.

        Adapters without an atomic move raise NotImplementedError; callers
        then fall back to copy-and-remove.
        """
        ...

    async def remove(self, path: str) -> None:
        """Remove a single file."""
        ...

    async def rmdir(self, path: str, recursive: bool) -> None:
        """Remove a folder, with all of its content when recursive."""
        ...


def parent_path(path: str) -> str:
    """Return the parent of a store path, or "" for a top-level path."""
    head, _, _ = path.rstrip("/").rpartition("/")
    return head


def base_name(path: str) -> str:
    """Return the last segment of a store path."""
    return path.rstrip("/").rpartition("/")[2]
