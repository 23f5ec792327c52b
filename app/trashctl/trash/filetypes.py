"""File type categories and display icons keyed by extension."""

# Extension groups used for previews and listing icons.
FILE_CATEGORIES: dict[str, tuple[str, ...]] = {
    "markdown": ("md", "markdown"),
    "code": (
        "js", "ts", "jsx", "tsx", "css", "scss", "less", "html", "json", "xml",
        "yaml", "yml", "py", "rb", "java", "c", "cpp", "h", "go", "rs", "php",
        "sh", "bash",
    ),
    "image": ("png", "jpg", "jpeg", "gif", "webp", "svg", "bmp", "ico"),
    "document": ("pdf", "doc", "docx", "xls", "xlsx", "ppt", "pptx", "txt"),
    "archive": ("zip", "tar", "gz", "rar", "7z"),
    "audio": ("mp3", "wav", "ogg", "flac", "m4a"),
    "video": ("mp4", "webm", "mov", "avi", "mkv"),
}  # fmt: skip

FILE_ICONS: dict[str, str] = {
    "md": "\U0001f4dd",
    "txt": "\U0001f4c4",
    "pdf": "\U0001f4d5",
    "js": "\U0001f49b",
    "ts": "\U0001f499",
    "css": "\U0001f49c",
    "html": "\U0001f9e1",
    "json": "\U0001f4cb",
    "png": "\U0001f5bc",
    "jpg": "\U0001f5bc",
    "gif": "\U0001f39e",
    "svg": "\U0001f3a8",
    "mp3": "\U0001f3b5",
    "mp4": "\U0001f3ac",
    "zip": "\U0001f4e6",
}

DEFAULT_FILE_ICON = "\U0001f4c4"
FOLDER_ICON = "\U0001f4c1"

# Text-like categories that can be previewed as plain text.
TEXT_CATEGORIES: frozenset[str] = frozenset({"markdown", "code"})


def get_category(extension: str) -> str | None:
    """Return the category an extension belongs to, or None."""
    ext = extension.lower()
    for category, extensions in FILE_CATEGORIES.items():
        if ext in extensions:
            return category
    return None


def get_icon(extension: str) -> str:
    """Return the display icon for an extension."""
    return FILE_ICONS.get(extension.lower(), DEFAULT_FILE_ICON)
