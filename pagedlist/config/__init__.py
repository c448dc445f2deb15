"""Settings and logging configuration."""

from pagedlist.config.settings import (
    DecoderSettings,
    LoggingSettings,
    ResolverSettings,
    Settings,
    get_settings,
)
from pagedlist.config.logging_config import setup_logging

__all__ = [
    "DecoderSettings",
    "LoggingSettings",
    "ResolverSettings",
    "Settings",
    "get_settings",
    "setup_logging",
]
