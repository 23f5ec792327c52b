"""Restore-target validation.

A trashed item is only ever moved back to a path inside the vault.
Paths that could escape the vault or address another protocol handler
are rejected before any storage call is made.
"""

# Substrings and prefixes that make a restore target unsafe.
UNSAFE_SEGMENTS: tuple[str, ...] = ("..", "://")
UNSAFE_PREFIXES: tuple[str, ...] = ("/", "\\")


def is_safe_restore_path(path: str) -> bool:
    """Check if a path is a safe, vault-relative restore destination.

    Rejects empty paths, parent-directory traversal (``..``), absolute
    paths (leading ``/`` or ``\\``) and embedded scheme markers (``://``).

    Args:
        path: Store-relative path an entry would be restored to.

    Returns:
        True if the path may be written to, False otherwise.
    """
    if not path or not isinstance(path, str):
        return False

    if path.startswith(UNSAFE_PREFIXES):
        return False

    return not any(segment in path for segment in UNSAFE_SEGMENTS)
