"""Convenience entrypoint for opening a remote paginated collection."""

from __future__ import annotations

import logging
from typing import Optional, TypeVar

from pagedlist.codec.json_decoder import JsonPageDecoder
from pagedlist.pagination.collection import PaginatedList
from pagedlist.pagination.errors import PageDecodeError, PageResolutionError, PaginationError
from pagedlist.pagination.protocols import PageDecoder, PageResolver
from pagedlist.transport.http_resolver import HttpPageResolver

logger = logging.getLogger(__name__)

T = TypeVar("T")


def fetch_paginated_list(
    locator: str,
    element_type: type[T] = dict,
    resolver: Optional[PageResolver] = None,
    decoder: Optional[PageDecoder] = None,
) -> PaginatedList[T]:
    """
    Fetch the first page behind *locator* and wrap it in a PaginatedList.

    This is the only network call made up front; every later page is
    fetched lazily by the list's cursors through the same collaborators.

    Args:
        locator: URL (or other resolver locator) of the first page.
        element_type: Type each data item is decoded into.
        resolver: Page resolver. Defaults to HttpPageResolver.
        decoder: Page decoder. Defaults to JsonPageDecoder.

    Raises:
        PageResolutionError: the first page could not be fetched.
        PageDecodeError: the first page could not be decoded.
    """
    # Relative next links are joined to the first page URL
    resolver = resolver or HttpPageResolver(base_url=locator)
    decoder = decoder or JsonPageDecoder()

    logger.info("Opening paginated collection at %s", locator)

    try:
        raw = resolver.resolve(locator)
    except PaginationError:
        raise
    except Exception as exc:
        raise PageResolutionError(f"Failed to resolve first page: {locator}", locator) from exc

    try:
        first_page = decoder.decode(raw, element_type)
    except PaginationError:
        raise
    except Exception as exc:
        raise PageDecodeError(f"Failed to decode first page: {locator}", locator) from exc

    return PaginatedList(first_page, resolver, decoder, element_type)
