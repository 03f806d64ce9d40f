"""Shared CLI helpers for safe-fileutils commands."""

import sys
from typing import Optional

from safe_fileutils.common.constants import ExitCodes
from safe_fileutils.common.errors import FileCopyError


def exit_with_error(message: str, exit_code: int) -> None:
    """Print an error message and exit with the specified code."""
    print(f"Error: {message}", file=sys.stderr)
    sys.exit(exit_code)


def map_exception_to_exit_code(exc: Exception) -> Optional[int]:
    """Translate known exceptions to safe-fileutils exit codes."""
    if isinstance(exc, FileCopyError):
        return ExitCodes.COPY_FAILED
    return None
