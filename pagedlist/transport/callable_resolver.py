"""In-process page resolvers backed by a mapping or a plain function."""

from __future__ import annotations

from typing import Callable, Mapping, Union

from pagedlist.pagination.errors import PageResolutionError


def _as_bytes(payload: Union[bytes, bytearray, str]) -> bytes:
    if isinstance(payload, str):
        return payload.encode("utf-8")
    return bytes(payload)


class MappingResolver:
    """Resolves locators by looking them up in a locator -> payload mapping."""

    def __init__(self, pages: Mapping[str, Union[bytes, str]]) -> None:
        self._pages = dict(pages)

    def resolve(self, locator: str) -> bytes:
        try:
            payload = self._pages[locator]
        except KeyError:
            raise PageResolutionError(f"No page registered for locator: {locator}", locator) from None
        return _as_bytes(payload)


class CallableResolver:
    """Adapts a ``locator -> bytes`` function to the PageResolver protocol."""

    def __init__(self, func: Callable[[str], Union[bytes, str]]) -> None:
        self._func = func

    def resolve(self, locator: str) -> bytes:
        return _as_bytes(self._func(locator))
