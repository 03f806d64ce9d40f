"""
Custom exception classes for safe_fileutils.

Extraction converts every one of these into a boolean result before it
returns; only `copy_file` lets `FileCopyError` reach the caller.
"""


class FileUtilsError(Exception):
    """Base exception class for safe_fileutils errors."""
    pass


class ArchiveEntryError(FileUtilsError):
    """Raised when the byte stream of an archive entry cannot be opened."""
    pass


class InvalidArchiveError(FileUtilsError):
    """Raised when an archive source yields no first entry."""
    pass


class ExtractionAbortedError(FileUtilsError):
    """Raised for conditions that stop an in-progress extraction outright."""
    pass


class ContainmentViolationError(ExtractionAbortedError):
    """Raised when an entry resolves outside the destination directory."""

    def __init__(self, entry_name: str, target: str) -> None:
        super().__init__(f"Archive entry {entry_name!r} resolves outside the destination: {target}")
        self.entry_name = entry_name
        self.target = target


class ParentDirectoryError(ExtractionAbortedError):
    """Raised when the parent directory of a file entry cannot be created."""
    pass


class FileCopyError(FileUtilsError):
    """Raised when a file cannot be copied."""
    pass
