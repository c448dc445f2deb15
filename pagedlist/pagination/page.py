"""
Page model for the pagination engine.

A Page is one already-fetched batch of elements plus the metadata the
server reported alongside it. These are plain frozen dataclasses; the
decoders build them and the cursor only reads them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Generic, Iterator, Mapping, Optional, Sequence, TypeVar

T = TypeVar("T")

# Reported for total/per-page values the server did not supply
UNKNOWN = -1

DEFAULT_TOTAL_KEYS: tuple[str, ...] = ("total",)
DEFAULT_PER_PAGE_KEYS: tuple[str, ...] = ("per_page", "perPage")


def _coerce_count(value: Any) -> Optional[int]:
    """Turn a raw metadata value into a non-negative int, or None if unusable."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value.lstrip("-").isdigit():
            return None
    elif isinstance(value, float) and not value.is_integer():
        return None
    try:
        count = int(value)
    except (TypeError, ValueError):
        return None
    return count if count >= 0 else None


# ---------------------------------------------------------------------------
# Metadata
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class PageMeta:
    """
    Size metadata for a page.

    None means the server did not report the value. Negative values are
    treated the same as missing ones.
    """

    # Element count across all pages of the collection
    total: Optional[int] = None

    # Element count each page was sized to hold
    per_page: Optional[int] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "total", _coerce_count(self.total))
        object.__setattr__(self, "per_page", _coerce_count(self.per_page))

    @classmethod
    def from_mapping(
        cls,
        mapping: Optional[Mapping[str, Any]],
        total_keys: Sequence[str] = DEFAULT_TOTAL_KEYS,
        per_page_keys: Sequence[str] = DEFAULT_PER_PAGE_KEYS,
    ) -> "PageMeta":
        """Read total/per-page values out of a raw meta mapping."""
        if not mapping:
            return cls()
        return cls(
            total=_first_count(mapping, total_keys),
            per_page=_first_count(mapping, per_page_keys),
        )

    @property
    def total_known(self) -> bool:
        return self.total is not None

    def total_or_unknown(self) -> int:
        return self.total if self.total is not None else UNKNOWN

    def per_page_or_unknown(self) -> int:
        return self.per_page if self.per_page is not None else UNKNOWN


def _first_count(mapping: Mapping[str, Any], keys: Sequence[str]) -> Optional[int]:
    for key in keys:
        count = _coerce_count(mapping.get(key))
        if count is not None:
            return count
    return None


# ---------------------------------------------------------------------------
# Page
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Page(Generic[T]):
    """
    One fetched batch of elements.

    A page without a next_locator is the last page of the chain, whatever
    its meta.total says.
    """

    # Decoded elements, in server order
    elements: tuple[T, ...] = ()

    meta: PageMeta = field(default_factory=PageMeta)

    # Opaque reference to the following page; None on the last page
    next_locator: Optional[str] = None

    def __post_init__(self) -> None:
        if not isinstance(self.elements, tuple):
            object.__setattr__(self, "elements", tuple(self.elements))
        locator = self.next_locator
        if locator is not None and not str(locator).strip():
            object.__setattr__(self, "next_locator", None)

    @property
    def total(self) -> Optional[int]:
        return self.meta.total

    @property
    def per_page(self) -> Optional[int]:
        return self.meta.per_page

    @property
    def has_next(self) -> bool:
        return self.next_locator is not None

    @property
    def is_empty(self) -> bool:
        return not self.elements

    def __len__(self) -> int:
        return len(self.elements)

    def __iter__(self) -> Iterator[T]:
        return iter(self.elements)
