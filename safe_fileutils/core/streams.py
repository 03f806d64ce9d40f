"""Streamed file reads and writes."""

from __future__ import annotations

import shutil
from pathlib import Path
from typing import BinaryIO, Optional

from ..common.config import get_buffer_size
from ..common.errors import FileCopyError
from ..common.logging_config import get_logger
from .paths import PathLike, is_readable

_log = get_logger(__name__)


def read_stream_into_file(path: PathLike, input_stream: BinaryIO, append: bool = False) -> bool:
    """Copy the rest of `input_stream` into the file at `path`.

    Args:
        path: Destination file, created if missing
        input_stream: Binary stream to drain
        append: Append to the file instead of truncating it

    Returns:
        True if every byte was written, False otherwise. A failed copy may
        leave a partially written file behind.
    """
    mode = "ab" if append else "wb"
    try:
        with open(path, mode) as output_stream:
            shutil.copyfileobj(input_stream, output_stream, get_buffer_size())
        return True
    except Exception as exc:  # noqa: BLE001 - decoder errors surface from read()
        _log.error("Unexpected exception while attempting to write to file: %s (%s)", path, exc)
        return False


def read_as_string(path: Optional[PathLike]) -> Optional[str]:
    """Read a UTF-8 text file into a single string.

    Line terminators are dropped: the lines are concatenated as-is. Returns
    None if the file is not readable or reading fails.
    """
    if not is_readable(path):
        _log.debug("Failed to read file: %s", path)
        return None

    try:
        with open(path, "r", encoding="utf-8", errors="replace") as handle:
            return "".join(line.rstrip("\r\n") for line in handle)
    except OSError as exc:
        _log.warning("Failed to read %s contents. %s", path, exc)
        return None


def copy_file(src: PathLike, dest: PathLike) -> None:
    """Copy `src` over `dest`, creating the parent directories of `dest`.

    Raises:
        FileCopyError: If `src` is unreadable or the copy fails
    """
    if not is_readable(src):
        raise FileCopyError(f"Source file is not readable: {src}")

    destination = Path(dest)
    try:
        destination.parent.mkdir(parents=True, exist_ok=True)
        shutil.copyfile(src, destination)
    except OSError as exc:
        _log.error("Failed to copy %s to %s: %s", src, dest, exc)
        raise FileCopyError(f"Copy from {src} to {dest} failed: {exc}") from exc
    _log.debug("Copied %s to %s", src, dest)


__all__ = ["read_stream_into_file", "read_as_string", "copy_file"]
