"""Forward-only cursor that walks a chain of pages."""

from __future__ import annotations

import logging
from typing import Iterator, Optional, TypeVar

from pagedlist.pagination.errors import PageDecodeError, PageResolutionError, PaginationError
from pagedlist.pagination.page import Page
from pagedlist.pagination.protocols import PageDecoder, PageResolver

logger = logging.getLogger(__name__)

T = TypeVar("T")


class PaginatedCursor(Iterator[T]):
    """
    Lazily yields the elements of a page chain, fetching pages on demand.

    The cursor starts on a page that is already in hand. When the current
    page runs dry it asks the resolver for the bytes behind next_locator,
    has the decoder turn them into the following page and carries on.
    Empty pages in the middle of the chain are skipped.

    Only the page being drained is held; earlier pages are dropped as
    soon as the next one arrives. A cursor is single-use and not
    thread-safe: start a new one for every enumeration.
    """

    def __init__(
        self,
        first_page: Page[T],
        resolver: PageResolver,
        decoder: PageDecoder,
        element_type: type[T],
    ) -> None:
        self._resolver = resolver
        self._decoder = decoder
        self._element_type = element_type
        self._page = first_page
        self._index = 0
        self._exhausted = False
        self._pages_fetched = 0
        self._expected_total: Optional[int] = first_page.total

    # ------------------------------------------------------------------
    # Iterator protocol
    # ------------------------------------------------------------------

    def __iter__(self) -> "PaginatedCursor[T]":
        return self

    def __next__(self) -> T:
        if not self.has_next():
            raise StopIteration
        element = self._page.elements[self._index]
        self._index += 1
        return element

    next = __next__

    def has_next(self) -> bool:
        """Return True if another element exists, fetching ahead if needed."""
        if self._exhausted:
            return False

        while self._index >= len(self._page.elements):
            if not self._page.has_next:
                self._exhausted = True
                return False
            self._advance_page()

        return True

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def exhausted(self) -> bool:
        return self._exhausted

    @property
    def pages_fetched(self) -> int:
        """Number of pages this cursor has requested from the resolver."""
        return self._pages_fetched

    @property
    def current_page(self) -> Page[T]:
        return self._page

    # ------------------------------------------------------------------
    # Fetching
    # ------------------------------------------------------------------

    def _advance_page(self) -> None:
        locator = self._page.next_locator
        try:
            page = self._fetch(locator)
        except PaginationError:
            self._exhausted = True
            raise

        if (
            self._expected_total is not None
            and page.total is not None
            and page.total != self._expected_total
        ):
            logger.debug(
                "Page %s reports total=%d, keeping first page total=%d",
                locator,
                page.total,
                self._expected_total,
            )

        self._page = page
        self._index = 0

    def _fetch(self, locator: str) -> Page[T]:
        self._pages_fetched += 1
        logger.debug("Fetching page %d: %s", self._pages_fetched, locator)

        try:
            raw = self._resolver.resolve(locator)
        except PaginationError:
            raise
        except Exception as exc:
            raise PageResolutionError(f"Failed to resolve page: {locator}", locator) from exc

        try:
            page = self._decoder.decode(raw, self._element_type)
        except PaginationError:
            raise
        except Exception as exc:
            raise PageDecodeError(f"Failed to decode page: {locator}", locator) from exc

        if not isinstance(page, Page):
            raise PageDecodeError(
                f"Decoder returned {type(page).__name__} instead of a Page: {locator}",
                locator,
            )

        logger.debug(
            "Fetched page %d with %d elements (next=%s)",
            self._pages_fetched,
            len(page),
            page.next_locator,
        )
        return page
