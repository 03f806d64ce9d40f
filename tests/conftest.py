"""Shared fixtures for building archives on disk."""

from __future__ import annotations

import io
import tarfile
import zipfile
from pathlib import Path
from typing import Dict, Iterable

import pytest


@pytest.fixture
def make_zip(tmp_path):
    """Return a factory writing a zip with the given members.

    Names ending in "/" become directory entries; members are stored
    uncompressed and in the given order.
    """

    def _make(members: Dict[str, bytes], name: str = "archive.zip") -> Path:
        path = tmp_path / name
        with zipfile.ZipFile(path, "w") as archive:
            for member, data in members.items():
                archive.writestr(zipfile.ZipInfo(member), data)
        return path

    return _make


@pytest.fixture
def make_tar(tmp_path):
    """Return a factory writing a gzip tar from prepared `TarInfo`/data pairs."""

    def _make(members: Iterable, name: str = "archive.tar.gz") -> Path:
        path = tmp_path / name
        with tarfile.open(path, "w:gz") as archive:
            for info, data in members:
                if data is None:
                    archive.addfile(info)
                else:
                    info.size = len(data)
                    archive.addfile(info, io.BytesIO(data))
        return path

    return _make


@pytest.fixture
def destination(tmp_path) -> Path:
    return tmp_path / "out"
