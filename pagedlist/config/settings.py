"""
Central configuration for pagedlist.

All tunables live here. Nothing is hardcoded in module code.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path


def _project_root() -> Path:
    """Walk up from this file to find the project root (where pyproject.toml lives)."""
    current = Path(__file__).resolve().parent
    while current != current.parent:
        if (current / "pyproject.toml").exists():
            return current
        current = current.parent
    # Fallback: two levels up from config/settings.py
    return Path(__file__).resolve().parent.parent.parent


def _env_float(name: str, default: float) -> float:
    value = os.environ.get(name)
    if value is None or not value.strip():
        return default
    try:
        return float(value)
    except ValueError:
        return default


@dataclass(frozen=True)
class ResolverSettings:
    """Settings for the HTTP page resolver."""

    # User-Agent string sent with every request
    user_agent: str = "pagedlist/0.1"

    # Accept header; JSON:API first, plain JSON as fallback
    accept: str = "application/vnd.api+json, application/json"

    # Request timeout (seconds)
    request_timeout: float = 30.0

    # Maximum retries per locator before giving up
    max_retries: int = 3

    # Backoff base for retries (seconds). Actual wait = base * 2^attempt
    backoff_base: float = 1.0

    # Maximum backoff wait (seconds)
    max_backoff: float = 30.0


@dataclass(frozen=True)
class DecoderSettings:
    """Document keys read by the page decoders."""

    data_key: str = "data"
    meta_key: str = "meta"
    links_key: str = "links"

    # Key inside links holding the next-page locator
    next_link_key: str = "next"

    # Meta keys checked in order for the total element count
    total_keys: tuple[str, ...] = ("total", "total_count")

    # Meta keys checked in order for the per-page size
    per_page_keys: tuple[str, ...] = ("per_page", "perPage", "page_size")


@dataclass(frozen=True)
class LoggingSettings:
    """Settings for application logging."""

    level: str = "INFO"
    log_file: str = "pagedlist.log"


@dataclass
class Settings:
    """
    Top-level settings container. Aggregates all subsystem settings.

    Usage:
        settings = get_settings()
        print(settings.resolver.request_timeout)
        print(settings.decoder.next_link_key)
    """

    project_root: Path = field(default_factory=_project_root)
    resolver: ResolverSettings = field(default_factory=ResolverSettings)
    decoder: DecoderSettings = field(default_factory=DecoderSettings)
    logging: LoggingSettings = field(default_factory=LoggingSettings)

    @property
    def logs_dir(self) -> Path:
        """Directory for log files."""
        return self.project_root / "data" / "logs"

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings, applying PAGEDLIST_* environment overrides."""
        resolver = ResolverSettings(
            request_timeout=_env_float(
                "PAGEDLIST_REQUEST_TIMEOUT", ResolverSettings.request_timeout
            ),
        )
        log_settings = LoggingSettings(
            level=os.environ.get("PAGEDLIST_LOG_LEVEL", LoggingSettings.level).upper(),
        )
        return cls(resolver=resolver, logging=log_settings)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Returns the singleton Settings instance.

    Call this instead of constructing Settings() directly so the entire
    application shares one config object.
    """
    return Settings.from_env()
