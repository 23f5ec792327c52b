"""trashctl - recycle bin management for document vaults."""

__version__ = "0.1.0"
