"""Registry for CLI subcommands."""

from .extract_command import ExtractCommand
from .file_commands import CheckCommand, CopyCommand, ReadCommand, SanitizeCommand

COMMANDS = (
    ExtractCommand,
    ReadCommand,
    CheckCommand,
    SanitizeCommand,
    CopyCommand,
)

__all__ = [
    "COMMANDS",
    "ExtractCommand",
    "ReadCommand",
    "CheckCommand",
    "SanitizeCommand",
    "CopyCommand",
]
