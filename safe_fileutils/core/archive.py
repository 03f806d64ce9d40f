"""Archive extraction that refuses to write outside the destination directory.

Archives are consumed as a sequence of `ArchiveEntry` objects. Adapters are
provided for `zipfile` and `tarfile`; any other decoder can feed
`extract_entries` directly.

Failure policy:
* an entry that resolves outside the destination aborts the whole run
* a file entry whose parent directory cannot be created aborts the whole run
* any other failing entry marks the run as failed, later entries still extract
"""

from __future__ import annotations

import itertools
import os
import tarfile
import zipfile
from dataclasses import dataclass, field
from functools import partial
from pathlib import Path
from typing import BinaryIO, Callable, Iterable, Iterator, Optional, Union

from ..common.errors import (
    ArchiveEntryError,
    ContainmentViolationError,
    ExtractionAbortedError,
    InvalidArchiveError,
    ParentDirectoryError,
)
from ..common.logging_config import get_logger
from .paths import PathLike
from .streams import read_stream_into_file

ArchiveSource = Union[PathLike, BinaryIO]

_log = get_logger(__name__)


@dataclass(frozen=True)
class ArchiveEntry:
    """A single member of an archive.

    `name` is the path stored in the archive and is not trusted. The stream
    returned by `open()` is only valid until the source moves to the next
    entry.
    """

    name: str
    is_directory: bool = False
    opener: Optional[Callable[[], Optional[BinaryIO]]] = field(default=None, repr=False, compare=False)

    def open(self) -> BinaryIO:
        """Open the entry's byte stream."""
        if self.is_directory or self.opener is None:
            raise ArchiveEntryError(f"Archive entry {self.name!r} has no data stream")
        try:
            stream = self.opener()
        except (OSError, RuntimeError, zipfile.BadZipFile, tarfile.TarError) as exc:
            raise ArchiveEntryError(f"Could not open archive entry {self.name!r}: {exc}") from exc
        if stream is None:
            raise ArchiveEntryError(f"Archive entry {self.name!r} has no data stream")
        return stream


def iter_zip_entries(archive: zipfile.ZipFile) -> Iterator[ArchiveEntry]:
    """Yield the members of a zip archive in stored order."""
    for info in archive.infolist():
        if info.is_dir():
            yield ArchiveEntry(info.filename, is_directory=True)
        else:
            yield ArchiveEntry(info.filename, opener=partial(archive.open, info))


def iter_tar_entries(archive: tarfile.TarFile) -> Iterator[ArchiveEntry]:
    """Yield the members of a tar archive in stored order.

    Links and special files are yielded without a stream so they are never
    materialized on disk.
    """
    for member in archive:
        if member.isdir():
            yield ArchiveEntry(member.name, is_directory=True)
        elif member.isfile():
            yield ArchiveEntry(member.name, opener=partial(archive.extractfile, member))
        else:
            _log.warning("Refusing to extract non-regular tar member: %s", member.name)
            yield ArchiveEntry(member.name)


def _ensure_output_directory(output_directory_path: PathLike) -> bool:
    try:
        folder = Path(output_directory_path)
        folder.mkdir(parents=True, exist_ok=True)
    except (OSError, TypeError, ValueError) as exc:
        _log.warning("Could not create the output directory %s (%s)", output_directory_path, exc)
        return False
    if not folder.is_dir():
        _log.warning("Could not create the output directory %s", output_directory_path)
        return False
    return True


def _resolve_entry_target(output_directory_path: PathLike, dest_root: Path, entry: ArchiveEntry) -> Path:
    """Resolve where `entry` would be written, raising if it leaves `dest_root`."""
    candidate = f"{os.fspath(output_directory_path)}{os.sep}{entry.name}"
    target = Path(candidate).resolve()
    if target != dest_root and dest_root not in target.parents:
        raise ContainmentViolationError(entry.name, str(target))
    return target


def _extract_directory(target: Path) -> bool:
    if target.exists():
        return True
    try:
        target.mkdir(parents=True, exist_ok=True)
        return True
    except OSError as exc:
        _log.warning("Could not create directory %s (%s)", target, exc)
        return False


def _extract_file(entry: ArchiveEntry, target: Path) -> bool:
    try:
        stream = entry.open()
    except ArchiveEntryError as exc:
        _log.warning("%s", exc)
        return False

    with stream:
        parent = target.parent
        if not parent.exists():
            try:
                parent.mkdir(parents=True, exist_ok=True)
            except OSError as exc:
                raise ParentDirectoryError(f"Could not extract the file {target}: {exc}") from exc
        return read_stream_into_file(target, stream, append=False)


def _extract_all(entries: Iterable[ArchiveEntry], output_directory_path: PathLike) -> bool:
    dest_root = Path(output_directory_path).resolve()
    iterator = iter(entries)
    first = next(iterator, None)
    if first is None:
        raise InvalidArchiveError("Archive contains no entries")

    extracted_successfully = True
    count = 0
    for entry in itertools.chain([first], iterator):
        target = _resolve_entry_target(output_directory_path, dest_root, entry)
        if entry.is_directory:
            entry_ok = _extract_directory(target)
        else:
            entry_ok = _extract_file(entry, target)

        if entry_ok:
            _log.debug("Extracted %s", entry.name)
        else:
            _log.warning("Failed to extract archive entry %s", entry.name)
        extracted_successfully = extracted_successfully and entry_ok
        count += 1

    _log.info(
        "Processed %d archive entries into %s (%s)",
        count,
        dest_root,
        "ok" if extracted_successfully else "with failures",
    )
    return extracted_successfully


def _run_extraction(entries: Iterable[ArchiveEntry], output_directory_path: PathLike) -> bool:
    try:
        return _extract_all(entries, output_directory_path)
    except ContainmentViolationError as exc:
        _log.error(
            "The archive contained an invalid path. Verify that the archive is formatted "
            "correctly and has not been tampered with. %s",
            exc,
        )
        return False
    except ExtractionAbortedError as exc:
        _log.warning("%s", exc)
        return False
    except InvalidArchiveError as exc:
        _log.warning("Archive was invalid: %s", exc)
        return False
    except Exception as exc:  # noqa: BLE001 - extraction never raises
        _log.error("Extraction failed - %s", exc)
        return False


def extract_entries(entries: Optional[Iterable[ArchiveEntry]], output_directory_path: PathLike) -> bool:
    """Extract a sequence of archive entries under `output_directory_path`.

    Args:
        entries: Archive entries in stored order
        output_directory_path: Destination directory, created if missing

    Returns:
        True if every entry was extracted, False otherwise
    """
    if entries is None:
        return False
    if not _ensure_output_directory(output_directory_path):
        return False
    return _run_extraction(entries, output_directory_path)


def extract_from_zip(zip_file: Optional[ArchiveSource], output_directory_path: PathLike) -> bool:
    """Extract a zip archive (path or binary file object) to a directory."""
    if zip_file is None:
        return False
    if not _ensure_output_directory(output_directory_path):
        return False

    try:
        with zipfile.ZipFile(zip_file) as archive:
            return _run_extraction(iter_zip_entries(archive), output_directory_path)
    except zipfile.BadZipFile as exc:
        _log.warning("Zip file was invalid: %s", exc)
        return False
    except Exception as exc:  # noqa: BLE001 - extraction never raises
        _log.error("Extraction failed - %s", exc)
        return False


def extract_from_tar(tar_file: Optional[ArchiveSource], output_directory_path: PathLike) -> bool:
    """Extract a tar archive (path or binary file object) to a directory.

    Compression is detected by `tarfile`.
    """
    if tar_file is None:
        return False
    if not _ensure_output_directory(output_directory_path):
        return False

    try:
        if hasattr(tar_file, "read"):
            archive = tarfile.open(fileobj=tar_file, mode="r:*")
        else:
            archive = tarfile.open(tar_file, mode="r:*")
        with archive:
            return _run_extraction(iter_tar_entries(archive), output_directory_path)
    except tarfile.TarError as exc:
        _log.warning("Tar file was invalid: %s", exc)
        return False
    except Exception as exc:  # noqa: BLE001 - extraction never raises
        _log.error("Extraction failed - %s", exc)
        return False


__all__ = [
    "ArchiveEntry",
    "extract_entries",
    "extract_from_tar",
    "extract_from_zip",
    "iter_tar_entries",
    "iter_zip_entries",
]
