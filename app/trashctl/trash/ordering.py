"""Ordering helpers for trash entries.

Names are compared the way a file browser does: case-insensitive,
accent-insensitive, and collated with the active locale.
"""

from __future__ import annotations

import locale
import unicodedata
from enum import Enum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Callable

    from trashctl.trash.entries import TrashEntry


class SortKey(str, Enum):
    """Field used to order trash entries."""

    NAME = "name"
    DATE = "date"
    SIZE = "size"


class SortOrder(str, Enum):
    """Sort direction."""

    ASC = "asc"
    DESC = "desc"


def name_key(name: str) -> str:
    """Build a locale-aware, case- and accent-insensitive sort key.

    Collation follows ``LC_COLLATE``, which the CLI sets from the
    environment. Without that call Python runs in the C locale and the key
    orders by code point after casefolding.

    Args:
        name: Entry or path name.

    Returns:
        Collation key suitable for ``sorted(key=...)``.
    """
    folded = unicodedata.normalize("NFKD", name.casefold())
    base = "".join(ch for ch in folded if not unicodedata.combining(ch))
    return locale.strxfrm(base)


def entry_sort_key(by: SortKey) -> Callable[[TrashEntry], Any]:
    """Return the key function for sorting entries by the given field.

    Missing modification times sort as 0.
    """
    if by == SortKey.NAME:
        return lambda entry: name_key(entry.name)
    if by == SortKey.SIZE:
        return lambda entry: entry.size
    return lambda entry: entry.mtime or 0
