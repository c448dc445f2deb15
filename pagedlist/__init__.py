"""Lazily paginated, read-only list views over chains of remote pages."""

from pagedlist.pagination import (
    UNKNOWN,
    Characteristics,
    InvalidIndexError,
    Page,
    PageDecodeError,
    PageDecoder,
    PageIndexError,
    PageMeta,
    PageResolutionError,
    PageResolver,
    PaginatedCursor,
    PaginatedList,
    PaginationError,
    SizedPageIterator,
)
from pagedlist.client import fetch_paginated_list

__all__ = [
    "UNKNOWN",
    "Characteristics",
    "InvalidIndexError",
    "Page",
    "PageDecodeError",
    "PageDecoder",
    "PageIndexError",
    "PageMeta",
    "PageResolutionError",
    "PageResolver",
    "PaginatedCursor",
    "PaginatedList",
    "PaginationError",
    "SizedPageIterator",
    "fetch_paginated_list",
]
