"""Ingestion errors: any of these aborts the build"""

from pathlib import Path


class ContentError(ValueError):
    """A source file (or the content root) cannot be turned into valid posts."""

    def __init__(self, message: str, path: Path | str | None = None):
        self.path = path
        super().__init__(f"{path}: {message}" if path is not None else message)


class DuplicateSlugError(ContentError):
    """Two source files map to the same slug."""
