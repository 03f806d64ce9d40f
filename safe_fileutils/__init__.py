"""safe_fileutils - safe archive extraction and small file-system helpers.

Provides:
* Zip and tar extraction that refuses entries escaping the destination
* Readability / writability predicates that never open the file
* Chunked stream-to-file copies and whole-file text reads
* Flattening of untrusted relative paths into single file names
* Thin CLI wrapper (`safe-fileutils`)

Every operation except `copy_file` reports failure as a return value and a
log record instead of raising.
"""

from ._version import __version__
from .common.logging_config import configure_logging  # noqa: F401
from .core.archive import (  # noqa: F401
    ArchiveEntry,
    extract_entries,
    extract_from_tar,
    extract_from_zip,
    iter_tar_entries,
    iter_zip_entries,
)
from .core.paths import is_readable, is_writable_directory, remove_relative_path  # noqa: F401
from .core.streams import copy_file, read_as_string, read_stream_into_file  # noqa: F401

__all__ = [
	"__version__",
	"configure_logging",
	"ArchiveEntry",
	"extract_entries",
	"extract_from_tar",
	"extract_from_zip",
	"iter_tar_entries",
	"iter_zip_entries",
	"is_readable",
	"is_writable_directory",
	"remove_relative_path",
	"copy_file",
	"read_as_string",
	"read_stream_into_file",
]
