"""
Test doubles and factories shared by the pagedlist test suite.

Provides in-memory stand-ins for the page resolver and decoder so the
pagination engine can be exercised without any network or wire format.
Every fake records its calls so tests can assert how many pages were
fetched.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from pagedlist.pagination.collection import PaginatedList
from pagedlist.pagination.errors import PageResolutionError
from pagedlist.pagination.page import Page, PageMeta


@dataclass(frozen=True)
class Resource:
    """A simple element carrying a string identifier."""

    id: str


def of_ids(*ids: str) -> list[Resource]:
    """Return one Resource per id, in order."""
    return [Resource(i) for i in ids]


def make_page(
    elements: Any = (),
    total: Optional[int] = None,
    per_page: Optional[int] = None,
    next_locator: Optional[str] = None,
) -> Page:
    """Create a Page with sensible defaults."""
    return Page(
        elements=tuple(elements),
        meta=PageMeta(total=total, per_page=per_page),
        next_locator=next_locator,
    )


# ---------------------------------------------------------------------------
# Fake collaborators
# ---------------------------------------------------------------------------


class FakeResolver:
    """Resolves a locator to the bytes registered for it."""

    def __init__(self, pages: Optional[dict[str, bytes]] = None) -> None:
        self._pages = dict(pages or {})
        self.calls: list[str] = []

    def resolve(self, locator: str) -> bytes:
        self.calls.append(locator)
        if locator not in self._pages:
            raise PageResolutionError(f"unknown locator {locator}", locator)
        return self._pages[locator]


class FakeDecoder:
    """Decodes registered byte strings to prepared pages."""

    def __init__(self, pages: Optional[dict[bytes, Page]] = None) -> None:
        self._pages = dict(pages or {})
        self.calls: list[tuple[bytes, type]] = []

    def decode(self, raw: bytes, element_type: type) -> Page:
        self.calls.append((raw, element_type))
        return self._pages[raw]


@dataclass
class Chain:
    """A PaginatedList wired to fakes, plus the fakes for inspection."""

    collection: PaginatedList
    resolver: FakeResolver
    decoder: FakeDecoder


def build_chain(
    *page_elements: Any,
    total: Optional[int] = None,
    per_page: Optional[int] = None,
    later_total: Optional[int] = None,
) -> Chain:
    """
    Build a collection over pages linked "page 2" -> "page 3" -> ...

    Only the first page carries *total* and *per_page*; later pages carry
    *later_total* (default: nothing).
    """
    pages = []
    for number, elements in enumerate(page_elements, start=1):
        is_last = number == len(page_elements)
        pages.append(
            make_page(
                elements,
                total=total if number == 1 else later_total,
                per_page=per_page if number == 1 else None,
                next_locator=None if is_last else f"page {number + 1}",
            )
        )

    resolver = FakeResolver({f"page {n}": f"page {n}".encode() for n in range(2, len(pages) + 1)})
    decoder = FakeDecoder({f"page {n}".encode(): pages[n - 1] for n in range(2, len(pages) + 1)})
    collection = PaginatedList(pages[0], resolver, decoder, Resource)
    return Chain(collection=collection, resolver=resolver, decoder=decoder)
