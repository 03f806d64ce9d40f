"""
Constants and exit codes for safe_fileutils.
"""

MAX_BUFFER_SIZE = 4096

LOG_LEVEL_ENV = "SAFE_FILEUTILS_LOG_LEVEL"
BUFFER_SIZE_ENV = "SAFE_FILEUTILS_BUFFER_SIZE"


class ExitCodes:
    """Exit codes for different error conditions."""
    OK = 0
    EXTRACTION_FAILED = 1
    FILE_UNREADABLE = 2
    COPY_FAILED = 3


class ArchiveFormats:
    """Archive formats understood by the extract command."""
    ZIP = "zip"
    TAR = "tar"

    ALL = (ZIP, TAR)
