"""HTTP page resolver with retry and backoff."""

from __future__ import annotations

import logging
import time
from typing import Callable, Optional
from urllib.parse import urljoin

import requests

from pagedlist.config.settings import ResolverSettings, get_settings
from pagedlist.pagination.errors import PageResolutionError

logger = logging.getLogger(__name__)


class HttpPageResolver:
    """Fetches page bytes for link locators over HTTP."""

    _RETRYABLE_STATUS_CODES = {429, 500, 502, 503, 504}

    def __init__(
        self,
        base_url: Optional[str] = None,
        settings: Optional[ResolverSettings] = None,
        session: Optional[requests.Session] = None,
        sleep_func: Callable[[float], None] = time.sleep,
    ) -> None:
        self._base_url = base_url
        self._settings = settings or get_settings().resolver
        self._sleep = sleep_func
        self._session = session or requests.Session()
        self._session.headers.update({
            "User-Agent": self._settings.user_agent,
            "Accept": self._settings.accept,
        })

    def resolve(self, locator: str) -> bytes:
        """Fetch *locator* and return the response body bytes."""
        url = urljoin(self._base_url, locator) if self._base_url else locator
        last_error: Optional[Exception] = None

        for attempt in range(self._settings.max_retries + 1):
            try:
                response = self._session.get(url, timeout=self._settings.request_timeout)
            except (
                requests.exceptions.MissingSchema,
                requests.exceptions.InvalidSchema,
                requests.exceptions.InvalidURL,
            ) as exc:
                raise PageResolutionError(f"Invalid page URL {url!r}: {exc}", locator) from exc
            except requests.RequestException as exc:
                last_error = exc
                if attempt >= self._settings.max_retries:
                    break
                logger.warning("Request for %s failed (%s), retrying", url, exc)
                self._sleep_with_backoff(attempt)
                continue

            if response.status_code in self._RETRYABLE_STATUS_CODES:
                last_error = RuntimeError(
                    f"Retryable HTTP status {response.status_code} for URL: {url}"
                )
                if attempt >= self._settings.max_retries:
                    break
                logger.warning("HTTP %d for %s, retrying", response.status_code, url)
                self._sleep_with_backoff(attempt)
                continue

            if response.status_code >= 400:
                raise PageResolutionError(
                    f"HTTP request failed with status {response.status_code} for URL: {url}",
                    locator,
                )

            return response.content

        raise PageResolutionError(
            f"Failed to fetch URL after {self._settings.max_retries + 1} attempts: {url}",
            locator,
        ) from last_error

    def close(self) -> None:
        self._session.close()

    def _sleep_with_backoff(self, attempt: int) -> None:
        backoff = min(
            self._settings.backoff_base * (2 ** attempt),
            self._settings.max_backoff,
        )
        self._sleep(backoff)
