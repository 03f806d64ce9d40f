"""Archive extraction command handling for the safe-fileutils CLI."""

from pathlib import Path

from safe_fileutils.cli_helpers import exit_with_error
from safe_fileutils.common.constants import ArchiveFormats, ExitCodes
from safe_fileutils.core.archive import extract_from_tar, extract_from_zip


def _guess_format(archive: str) -> str:
    suffixes = [suffix.lower() for suffix in Path(archive).suffixes]
    if ".tar" in suffixes or (suffixes and suffixes[-1] in (".tgz", ".tbz2", ".txz")):
        return ArchiveFormats.TAR
    return ArchiveFormats.ZIP


class ExtractCommand:
    """Handles archive extraction."""

    @staticmethod
    def add_parser(subparsers) -> None:
        """Add extract command parser to subparsers."""
        parser = subparsers.add_parser('extract', help='Safely extract an archive into a directory')
        parser.add_argument('archive', help='Path to the zip or tar archive')
        parser.add_argument('destination', help='Directory to extract into (created if missing)')
        parser.add_argument('--format', dest='archive_format', choices=ArchiveFormats.ALL,
                            help='Archive format (guessed from the file name by default)')
        parser.set_defaults(func=ExtractCommand.execute)

    @staticmethod
    def execute(args) -> None:
        """Extract an archive, exiting non-zero on any failure."""
        archive_format = args.archive_format or _guess_format(args.archive)
        if archive_format == ArchiveFormats.TAR:
            ok = extract_from_tar(args.archive, args.destination)
        else:
            ok = extract_from_zip(args.archive, args.destination)

        if not ok:
            exit_with_error(
                f"Could not extract '{args.archive}' into '{args.destination}'. See the log for details.",
                ExitCodes.EXTRACTION_FAILED,
            )
        print(f"Extracted '{args.archive}' into '{args.destination}'.")
