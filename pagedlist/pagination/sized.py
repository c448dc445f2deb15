"""Size-reporting iterator adapter over a PaginatedCursor."""

from __future__ import annotations

import enum
import sys
from typing import Callable, Iterator, Optional, TypeVar

from pagedlist.pagination.cursor import PaginatedCursor
from pagedlist.pagination.page import UNKNOWN, Page

T = TypeVar("T")


class Characteristics(enum.IntFlag):
    """Traits a sized iterator reports about the elements it yields."""

    ORDERED = 0x00000010
    SIZED = 0x00000040
    NONNULL = 0x00000100
    SUBSIZED = 0x00004000


SIZED_CHARACTERISTICS = (
    Characteristics.ORDERED
    | Characteristics.NONNULL
    | Characteristics.SIZED
    | Characteristics.SUBSIZED
)

UNSIZED_CHARACTERISTICS = Characteristics.ORDERED | Characteristics.NONNULL


class SizedPageIterator(Iterator[T]):
    """
    Iterator that reports size information taken from the first page.

    If the first page carries a total the iterator is exact-sized and
    reports that total; otherwise it makes no size claim at all. The
    decision is made once, here, and never revisited mid-traversal.

    The iterator never splits and is never parallel: each page fetch goes
    through a single cursor, so a request for parallel traversal yields
    this same sequential iterator.
    """

    is_parallel = False

    def __init__(self, cursor: PaginatedCursor[T], first_page: Page[T]) -> None:
        self._cursor = cursor
        self._first_page_len = len(first_page)
        self._total: Optional[int] = first_page.total
        if self._total is not None:
            self._characteristics = SIZED_CHARACTERISTICS
        else:
            self._characteristics = UNSIZED_CHARACTERISTICS

    @property
    def characteristics(self) -> Characteristics:
        return self._characteristics

    def has_characteristics(self, flags: Characteristics) -> bool:
        return (self._characteristics & flags) == flags

    @property
    def sized(self) -> bool:
        return self.has_characteristics(Characteristics.SIZED)

    def exact_size_if_known(self) -> int:
        """Return the exact element count, or UNKNOWN when unsized."""
        return self._total if self._total is not None else UNKNOWN

    def estimate_size(self) -> int:
        """Return the size estimate; sys.maxsize means no estimate."""
        return self._total if self._total is not None else sys.maxsize

    def try_split(self) -> None:
        """Splitting is never supported; always returns None."""
        return None

    def try_advance(self, action: Callable[[T], object]) -> bool:
        """Apply *action* to the next element if one exists."""
        if not self._cursor.has_next():
            return False
        action(next(self._cursor))
        return True

    def for_each_remaining(self, action: Callable[[T], object]) -> None:
        for element in self._cursor:
            action(element)

    def __iter__(self) -> "SizedPageIterator[T]":
        return self

    def __next__(self) -> T:
        return next(self._cursor)

    def __length_hint__(self) -> int:
        # Never fetches; the first page length is only a lower bound
        if self._total is not None:
            return self._total
        return self._first_page_len
