"""Pagination engine: page model, cursor, sized iterator and list facade."""

from pagedlist.pagination.errors import (
    InvalidIndexError,
    PageDecodeError,
    PageIndexError,
    PageResolutionError,
    PaginationError,
)
from pagedlist.pagination.page import UNKNOWN, Page, PageMeta
from pagedlist.pagination.protocols import PageDecoder, PageResolver
from pagedlist.pagination.cursor import PaginatedCursor
from pagedlist.pagination.sized import Characteristics, SizedPageIterator
from pagedlist.pagination.collection import PaginatedList

__all__ = [
    "UNKNOWN",
    "Page",
    "PageMeta",
    "PageResolver",
    "PageDecoder",
    "PaginatedCursor",
    "Characteristics",
    "SizedPageIterator",
    "PaginatedList",
    "PaginationError",
    "InvalidIndexError",
    "PageIndexError",
    "PageResolutionError",
    "PageDecodeError",
]
