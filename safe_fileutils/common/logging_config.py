"""Central logging configuration utilities for safe_fileutils.

The library only emits records; applications (or the bundled CLI) decide
where they go by calling `configure_logging`.
"""

from __future__ import annotations

import logging
from typing import Optional

from .config import FileUtilsSettings

_LEVEL_MAP = {
    "CRITICAL": logging.CRITICAL,
    "ERROR": logging.ERROR,
    "WARNING": logging.WARNING,
    "INFO": logging.INFO,
    "DEBUG": logging.DEBUG,
    "NOTSET": logging.NOTSET,
}


def configure_logging(level: str | int | None = None, *, force: bool = False) -> None:
    """Configure root logger.

    Order of precedence for level:
    1. Explicit `level` argument if given
    2. Environment variable `SAFE_FILEUTILS_LOG_LEVEL`
    3. Fallback to `INFO`
    """
    if level is None:
        level = FileUtilsSettings.from_env().log_level

    if isinstance(level, str):
        level = _LEVEL_MAP.get(level.upper(), logging.INFO)

    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        force=force,
    )


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get a project logger."""
    return logging.getLogger(name or "safe_fileutils")


__all__ = ["configure_logging", "get_logger"]
