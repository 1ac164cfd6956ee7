"""Exceptions raised by the content layer."""

from __future__ import annotations

from pathlib import Path


class ContentError(Exception):
    """Base exception for content errors."""

    def __init__(self, message: str, path: Path | None = None):
        self.message = message
        self.path = path
        super().__init__(message)


class FrontMatterError(ContentError):
    """A content file exists but its front matter cannot be read or parsed."""
    pass


class ContentNotFoundError(ContentError):
    """Nothing matched the request (e.g. an empty collection to pick from)."""
    pass
