"""Single-file command handling for the safe-fileutils CLI."""

from safe_fileutils.cli_helpers import exit_with_error, map_exception_to_exit_code
from safe_fileutils.common.constants import ExitCodes
from safe_fileutils.common.errors import FileCopyError
from safe_fileutils.core.paths import is_readable, remove_relative_path
from safe_fileutils.core.streams import copy_file, read_as_string


class ReadCommand:
    """Prints a text file with its line breaks removed."""

    @staticmethod
    def add_parser(subparsers) -> None:
        parser = subparsers.add_parser('read', help='Print the contents of a UTF-8 file')
        parser.add_argument('path', help='File to read')
        parser.set_defaults(func=ReadCommand.execute)

    @staticmethod
    def execute(args) -> None:
        content = read_as_string(args.path)
        if content is None:
            exit_with_error(f"Could not read '{args.path}'.", ExitCodes.FILE_UNREADABLE)
        print(content)


class CheckCommand:
    """Exits zero only if a file is readable."""

    @staticmethod
    def add_parser(subparsers) -> None:
        parser = subparsers.add_parser('check', help='Check that a file exists and is readable')
        parser.add_argument('path', help='File to check')
        parser.set_defaults(func=CheckCommand.execute)

    @staticmethod
    def execute(args) -> None:
        if not is_readable(args.path):
            exit_with_error(f"'{args.path}' is missing or not readable.", ExitCodes.FILE_UNREADABLE)
        print(f"'{args.path}' is readable.")


class SanitizeCommand:
    """Prints a name with its relative path parts removed."""

    @staticmethod
    def add_parser(subparsers) -> None:
        parser = subparsers.add_parser('sanitize', help='Flatten a relative path into a single file name')
        parser.add_argument('name', help='Name to sanitize')
        parser.set_defaults(func=SanitizeCommand.execute)

    @staticmethod
    def execute(args) -> None:
        print(remove_relative_path(args.name))


class CopyCommand:
    """Copies one file over another."""

    @staticmethod
    def add_parser(subparsers) -> None:
        parser = subparsers.add_parser('copy', help='Copy a file, creating parent directories')
        parser.add_argument('source', help='File to copy')
        parser.add_argument('destination', help='Target file (overwritten)')
        parser.set_defaults(func=CopyCommand.execute)

    @staticmethod
    def execute(args) -> None:
        try:
            copy_file(args.source, args.destination)
        except FileCopyError as e:
            exit_with_error(str(e), map_exception_to_exit_code(e) or ExitCodes.COPY_FAILED)
        print(f"Copied '{args.source}' to '{args.destination}'.")
