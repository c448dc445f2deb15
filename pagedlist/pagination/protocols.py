"""Collaborator contracts consumed by the pagination engine."""

from __future__ import annotations

from typing import Protocol, TypeVar, runtime_checkable

from pagedlist.pagination.page import Page

T = TypeVar("T")


@runtime_checkable
class PageResolver(Protocol):
    """Turns a next-page locator into raw page bytes."""

    def resolve(self, locator: str) -> bytes:
        """Return the raw bytes for *locator*, or raise PageResolutionError."""
        ...


@runtime_checkable
class PageDecoder(Protocol):
    """Turns raw page bytes into a typed Page."""

    def decode(self, raw: bytes, element_type: type[T]) -> Page[T]:
        """Decode *raw* into a Page of *element_type*, or raise PageDecodeError."""
        ...
