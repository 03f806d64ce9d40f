"""Environment-backed settings for safe_fileutils.

Only two knobs exist:
* `SAFE_FILEUTILS_LOG_LEVEL` - root log level used by `configure_logging`
* `SAFE_FILEUTILS_BUFFER_SIZE` - chunk size for stream copies

Both are read on every call so tests and long-lived callers can change them
through the environment.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .constants import BUFFER_SIZE_ENV, LOG_LEVEL_ENV, MAX_BUFFER_SIZE


def env_int(key: str, default: int, environ: Optional[Mapping[str, str]] = None) -> int:
    value = (os.environ if environ is None else environ).get(key)
    if not value:
        return default
    try:
        return int(value)
    except ValueError:
        return default


@dataclass
class FileUtilsSettings:
    """Typed settings sourced from the environment."""

    log_level: str
    buffer_size: int

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "FileUtilsSettings":
        environ = os.environ if environ is None else environ
        buffer_size = env_int(BUFFER_SIZE_ENV, MAX_BUFFER_SIZE, environ)
        if buffer_size <= 0:
            buffer_size = MAX_BUFFER_SIZE
        return cls(
            log_level=(environ.get(LOG_LEVEL_ENV) or "INFO").upper(),
            buffer_size=buffer_size,
        )


def get_buffer_size() -> int:
    """Return the stream copy chunk size, checking the environment dynamically."""
    return FileUtilsSettings.from_env().buffer_size
