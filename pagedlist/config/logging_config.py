"""Handler setup for the ``pagedlist`` logger hierarchy."""

from __future__ import annotations

import logging
import logging.handlers
import sys
from pathlib import Path

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_MAX_LOG_BYTES = 10 * 1024 * 1024
_LOG_BACKUPS = 5


def _parse_level(level: int | str) -> int:
    if isinstance(level, int):
        return level
    parsed = logging.getLevelName(level.upper())
    return parsed if isinstance(parsed, int) else logging.INFO


def setup_logging(
    log_dir: Path | None = None,
    level: int | str = logging.INFO,
    log_file: str = "pagedlist.log",
) -> None:
    """
    Attach stderr and rotating-file handlers to the ``pagedlist`` logger.

    Only the level is updated once handlers are attached. The log
    directory is created on demand; if that fails, logging continues on
    stderr alone.

    Args:
        log_dir: Where ``log_file`` is written. None disables file output.
        level: Threshold as an int or a name such as "DEBUG". Unknown
            names fall back to INFO.
        log_file: File name inside ``log_dir``.
    """
    level = _parse_level(level)
    package_logger = logging.getLogger("pagedlist")
    package_logger.setLevel(level)

    if package_logger.handlers:
        return

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    # stdout carries CLI output
    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setLevel(level)
    stderr_handler.setFormatter(formatter)
    package_logger.addHandler(stderr_handler)

    if log_dir is None:
        return

    try:
        log_dir.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            filename=log_dir / log_file,
            maxBytes=_MAX_LOG_BYTES,
            backupCount=_LOG_BACKUPS,
            encoding="utf-8",
        )
    except OSError as exc:
        package_logger.warning("File logging disabled for %s: %s", log_dir, exc)
        return

    file_handler.setLevel(level)
    file_handler.setFormatter(formatter)
    package_logger.addHandler(file_handler)
