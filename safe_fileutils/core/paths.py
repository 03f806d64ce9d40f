"""Path predicates and name sanitization."""

from __future__ import annotations

import os
import re
from typing import Optional, Union

from ..common.logging_config import get_logger

PathLike = Union[str, "os.PathLike[str]"]

# A dot followed by separators: "./", "../", "..\\".
_DOT_SEPARATOR_PATTERN = re.compile(r"\.[/\\]+")
# A separator followed by two or more dots: "/..", "\\...".
_SEPARATOR_DOTS_PATTERN = re.compile(r"[/\\](\.{2,})")

_log = get_logger(__name__)


def is_readable(path: Optional[PathLike]) -> bool:
    """Return True if `path` is an existing regular file the process may read.

    The file is never opened. Errors raised while probing the path are
    reported as "not readable".
    """
    try:
        if (
            path is None
            or not os.path.exists(path)
            or not os.access(path, os.R_OK)
            or not os.path.isfile(path)
        ):
            _log.warning("File does not exist or doesn't have read permission: %s", path)
            return False
        return True
    except (OSError, ValueError) as exc:
        _log.debug("Failed to check readability of %s (%s)", path, exc)
        return False


def is_writable_directory(path: Optional[PathLike]) -> bool:
    """Return True if `path` is a directory the process may write into."""
    return path is not None and os.path.isdir(path) and os.access(path, os.W_OK)


def remove_relative_path(file_path: str) -> str:
    """Remove the relative part of a file name, flattening it to one component.

    For example `/mydatabase/../../database1` becomes `mydatabase_database1`.
    Distinct inputs may flatten to the same name.
    """
    if not file_path.strip():
        return file_path

    result = _DOT_SEPARATOR_PATTERN.sub(".", file_path)
    result = _SEPARATOR_DOTS_PATTERN.sub("_", result)
    return result.replace("/", "")


__all__ = ["is_readable", "is_writable_directory", "remove_relative_path"]
