from __future__ import annotations

import tarfile

import pytest

from safe_fileutils.cli import main as cli_main
from safe_fileutils.cli_commands.extract_command import _guess_format
from safe_fileutils.common.constants import ArchiveFormats, ExitCodes


def _exit_code(args):
    with pytest.raises(SystemExit) as exc_info:
        cli_main(args)
    return exc_info.value.code


def test_no_arguments_prints_help(capsys):
    assert _exit_code([]) == ExitCodes.OK
    assert "safe-fileutils" in capsys.readouterr().out


def test_exit_codes():
    assert ExitCodes.OK == 0
    assert ExitCodes.EXTRACTION_FAILED == 1
    assert ExitCodes.FILE_UNREADABLE == 2
    assert ExitCodes.COPY_FAILED == 3


def test_extract_zip_success(make_zip, destination, capsys):
    archive = make_zip({"dir/file.txt": b"content"})

    cli_main(["extract", str(archive), str(destination)])
    assert (destination / "dir" / "file.txt").read_bytes() == b"content"
    assert "Extracted" in capsys.readouterr().out


def test_extract_traversal_fails(make_zip, destination, capsys):
    archive = make_zip({"../escape.txt": b"pwned"})

    assert _exit_code(["extract", str(archive), str(destination)]) == ExitCodes.EXTRACTION_FAILED
    assert "Could not extract" in capsys.readouterr().err


def test_extract_tar_guessed_from_name(make_tar, destination):
    archive = make_tar([(tarfile.TarInfo("t.txt"), b"tar")], name="bundle.tgz")

    cli_main(["extract", str(archive), str(destination)])
    assert (destination / "t.txt").read_bytes() == b"tar"


def test_guess_format():
    assert _guess_format("a.zip") == ArchiveFormats.ZIP
    assert _guess_format("a.tar.gz") == ArchiveFormats.TAR
    assert _guess_format("a.TGZ") == ArchiveFormats.TAR
    assert _guess_format("noext") == ArchiveFormats.ZIP


def test_read_and_check(tmp_path, capsys):
    target = tmp_path / "notes.txt"
    target.write_text("one\ntwo\n", encoding="utf-8")

    cli_main(["read", str(target)])
    assert capsys.readouterr().out.strip() == "onetwo"

    cli_main(["check", str(target)])
    assert "is readable" in capsys.readouterr().out

    assert _exit_code(["read", str(tmp_path / "missing")]) == ExitCodes.FILE_UNREADABLE
    assert _exit_code(["check", str(tmp_path)]) == ExitCodes.FILE_UNREADABLE


def test_sanitize(capsys):
    cli_main(["sanitize", "/mydatabase/../../database1"])
    assert capsys.readouterr().out.strip() == "mydatabase_database1"


def test_copy(tmp_path, capsys):
    src = tmp_path / "src.bin"
    src.write_bytes(b"bytes")
    dest = tmp_path / "a" / "b" / "dest.bin"

    cli_main(["copy", str(src), str(dest)])
    assert dest.read_bytes() == b"bytes"
    assert "Copied" in capsys.readouterr().out

    assert _exit_code(["copy", str(tmp_path / "missing"), str(dest)]) == ExitCodes.COPY_FAILED
