"""Exceptions raised while walking a paginated collection."""

from __future__ import annotations

from typing import Optional


class PaginationError(Exception):
    """Base class for every error raised by pagedlist."""


class InvalidIndexError(PaginationError, ValueError):
    """A negative index, or an inverted range, was requested."""


class PageIndexError(PaginationError, IndexError):
    """An index lies beyond the extent discovered by traversal."""


class PageResolutionError(PaginationError):
    """The resolver could not obtain the bytes for a page locator."""

    def __init__(self, message: str, locator: Optional[str] = None) -> None:
        super().__init__(message)
        self.locator = locator


class PageDecodeError(PaginationError):
    """Raw page bytes could not be turned into a Page."""

    def __init__(self, message: str, locator: Optional[str] = None) -> None:
        super().__init__(message)
        self.locator = locator
