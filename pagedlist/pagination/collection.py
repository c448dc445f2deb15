"""
Read-only list facade over a chain of remote pages.

PaginatedList reads like a list but holds only the first page. Every
operation starts a fresh PaginatedCursor from that page and walks as far
as it needs to, so the same instance can be enumerated any number of
times and each enumeration refetches the later pages.

Nothing is cached between calls. Callers that need repeated random access
should call materialize() once and index the returned tuple.

There is no __len__: list(), tuple() and friends ask for a length before
iterating, and answering it would walk the whole chain a second time.
size() counts explicitly; __length_hint__ reports the known total without
fetching.
"""

from __future__ import annotations

import itertools
import logging
from collections.abc import Sequence
from typing import Any, Generic, Iterator, Optional, TypeVar, overload

from pagedlist.pagination.cursor import PaginatedCursor
from pagedlist.pagination.errors import InvalidIndexError, PageIndexError
from pagedlist.pagination.page import UNKNOWN, Page
from pagedlist.pagination.protocols import PageDecoder, PageResolver
from pagedlist.pagination.sized import SizedPageIterator

logger = logging.getLogger(__name__)

T = TypeVar("T")


class PaginatedList(Generic[T]):
    """Lazily paginated, read-only sequence of *element_type* items."""

    __slots__ = ("_first_page", "_resolver", "_decoder", "_element_type")

    def __init__(
        self,
        first_page: Page[T],
        resolver: PageResolver,
        decoder: PageDecoder,
        element_type: type[T],
    ) -> None:
        object.__setattr__(self, "_first_page", first_page)
        object.__setattr__(self, "_resolver", resolver)
        object.__setattr__(self, "_decoder", decoder)
        object.__setattr__(self, "_element_type", element_type)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is read-only")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is read-only")

    # ------------------------------------------------------------------
    # Bound collaborators
    # ------------------------------------------------------------------

    @property
    def first_page(self) -> Page[T]:
        return self._first_page

    @property
    def resolver(self) -> PageResolver:
        return self._resolver

    @property
    def decoder(self) -> PageDecoder:
        return self._decoder

    @property
    def element_type(self) -> type[T]:
        return self._element_type

    # ------------------------------------------------------------------
    # Enumeration
    # ------------------------------------------------------------------

    def cursor(self) -> PaginatedCursor[T]:
        """Start a new, independent walk from the first page."""
        return PaginatedCursor(
            self._first_page, self._resolver, self._decoder, self._element_type
        )

    def __iter__(self) -> Iterator[T]:
        return self.cursor()

    def stream(self) -> SizedPageIterator[T]:
        return self.spliterator()

    def spliterator(self) -> SizedPageIterator[T]:
        """Return a size-reporting iterator over a fresh cursor."""
        return SizedPageIterator(self.cursor(), self._first_page)

    def parallel_stream(self) -> SizedPageIterator[T]:
        """Parallel traversal is unsupported; this is the sequential stream."""
        logger.debug("Parallel traversal requested; falling back to sequential")
        return self.spliterator()

    def __reversed__(self) -> Iterator[T]:
        return reversed(self.materialize())

    # ------------------------------------------------------------------
    # Size
    # ------------------------------------------------------------------

    def total(self) -> int:
        """
        Return the total element count reported by the first page.

        When the first page has no total but is also the last page, its own
        length is the total. Otherwise the total is UNKNOWN.
        """
        if self._first_page.total is not None:
            return self._first_page.total
        if not self._first_page.has_next:
            return len(self._first_page)
        return UNKNOWN

    def per_page(self) -> int:
        return self._first_page.meta.per_page_or_unknown()

    def size(self) -> int:
        """Count every element; walks the whole chain."""
        count = 0
        for _ in self.cursor():
            count += 1
        return count

    def __length_hint__(self) -> int:
        total = self.total()
        return total if total != UNKNOWN else 0

    def is_empty(self) -> bool:
        if not self._first_page.is_empty:
            return False
        if not self._first_page.has_next:
            return True
        # Empty first page with more to come: fetch until an element shows up
        return not self.cursor().has_next()

    def __bool__(self) -> bool:
        return not self.is_empty()

    # ------------------------------------------------------------------
    # Materialisation
    # ------------------------------------------------------------------

    def materialize(self) -> tuple[T, ...]:
        """Fetch every page once and return all elements in order."""
        return tuple(self.cursor())

    def to_array(self, target: Optional[list] = None) -> list:
        """
        Return every element in a list.

        If *target* is given and has room for all elements, they are copied
        into its head, the surplus slots are set to None and *target* itself
        is returned. If it is too small a new list of exact size is returned.
        """
        elements = list(self.cursor())
        if target is None or len(target) < len(elements):
            return elements

        target[: len(elements)] = elements
        for i in range(len(elements), len(target)):
            target[i] = None
        return target

    # ------------------------------------------------------------------
    # Indexed access
    # ------------------------------------------------------------------

    def get(self, index: int) -> T:
        """Return the element at *index*, walking pages until it is reached."""
        if index < 0:
            raise InvalidIndexError(f"Index must be non-negative: {index}")

        for position, element in enumerate(self.cursor()):
            if position == index:
                return element

        raise PageIndexError(f"Index {index} is beyond the end of the collection")

    @overload
    def __getitem__(self, index: int) -> T: ...

    @overload
    def __getitem__(self, index: slice) -> list[T]: ...

    def __getitem__(self, index):
        if isinstance(index, slice):
            start, stop, step = index.start, index.stop, index.step
            if all(v is None or v >= 0 for v in (start, stop)) and (step is None or step > 0):
                # Plain forward slice: stop fetching once stop is reached
                return list(itertools.islice(self.cursor(), start, stop, step))
            return list(self.materialize()[index])
        return self.get(index)

    def sub_list(self, start: int, stop: int) -> list[T]:
        """
        Return elements in the half-open range [start, stop).

        Only the prefix up to *stop* is fetched. A range running past the
        end of the collection raises PageIndexError.
        """
        if start < 0:
            raise PageIndexError(f"Range start must be non-negative: {start}")
        if start > stop:
            raise InvalidIndexError(f"Range start {start} is greater than stop {stop}")

        cursor = self.cursor()
        result: list[T] = []
        position = 0
        while position < stop:
            if not cursor.has_next():
                raise PageIndexError(
                    f"Range stop {stop} is beyond the end of the collection ({position})"
                )
            element = next(cursor)
            if position >= start:
                result.append(element)
            position += 1
        return result

    # ------------------------------------------------------------------
    # Search
    # ------------------------------------------------------------------

    def contains(self, value: object) -> bool:
        return self.index_of(value) != -1

    def __contains__(self, value: object) -> bool:
        return self.contains(value)

    def index_of(self, value: object) -> int:
        """Return the first position of *value*, or -1."""
        for position, element in enumerate(self.cursor()):
            if element == value:
                return position
        return -1

    def last_index_of(self, value: object) -> int:
        """Return the last position of *value*, or -1. Always walks every page."""
        found = -1
        for position, element in enumerate(self.cursor()):
            if element == value:
                found = position
        return found

    def index(self, value: Any, start: int = 0, stop: Optional[int] = None) -> int:
        """First position of *value* in [start, stop), else ValueError."""
        for position, element in enumerate(self.cursor()):
            if stop is not None and position >= stop:
                break
            if position >= start and element == value:
                return position
        raise ValueError(f"{value!r} is not in {type(self).__name__}")

    def count(self, value: Any) -> int:
        return sum(1 for element in self.cursor() if element == value)

    # ------------------------------------------------------------------
    # Comparison
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if isinstance(other, (str, bytes)) or not isinstance(other, (Sequence, PaginatedList)):
            return NotImplemented
        return list(self.cursor()) == list(iter(other))

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(element_type={getattr(self._element_type, '__name__', self._element_type)}, "
            f"total={self.total()}, per_page={self.per_page()})"
        )
