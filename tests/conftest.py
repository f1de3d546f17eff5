"""Shared fixtures for retrieval tests."""

import io
import stat
import zipfile
from collections.abc import Callable
from pathlib import Path

import pytest


def _zip_bytes(entries: dict[str, str]) -> bytes:
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w") as archive:
        for name, content in entries.items():
            archive.writestr(name, content)
    return buffer.getvalue()


@pytest.fixture
def make_zip() -> Callable[[dict[str, str]], bytes]:
    """Build zip archive bytes from a mapping of member name to text content."""
    return _zip_bytes


@pytest.fixture
def maven_home(tmp_path: Path) -> Path:
    """A Maven installation directory holding an executable bin/mvn."""
    home = tmp_path / "maven"
    mvn = home / "bin" / "mvn"
    mvn.parent.mkdir(parents=True)
    mvn.write_text("#!/bin/sh\nexit 0\n", encoding="utf-8")
    mvn.chmod(mvn.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return home
