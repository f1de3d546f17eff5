"""Tests for finding the single fetched archive in a directory."""

from pathlib import Path

import pytest

from nexus_retriever.core.artifact_discovery import find_single_artifact, matching_artifacts
from nexus_retriever.errors import AmbiguousArtifactError, ArtifactNotFoundError


def test_single_match_is_returned(tmp_path: Path) -> None:
    archive = tmp_path / "acme-lib-2.3.0.zip"
    archive.write_bytes(b"zip")
    (tmp_path / "README.txt").write_text("unrelated", encoding="utf-8")

    assert find_single_artifact(tmp_path, artifact_id="acme-lib", suffix=".zip") == archive


def test_no_match_raises_not_found(tmp_path: Path) -> None:
    (tmp_path / "other-lib-1.0.zip").write_bytes(b"zip")
    (tmp_path / "acme-lib-2.3.0.jar").write_bytes(b"jar")

    with pytest.raises(ArtifactNotFoundError, match="acme-lib") as exc_info:
        find_single_artifact(tmp_path, artifact_id="acme-lib", suffix=".zip")

    assert exc_info.value.directory == tmp_path


def test_missing_directory_raises_not_found(tmp_path: Path) -> None:
    with pytest.raises(ArtifactNotFoundError):
        find_single_artifact(tmp_path / "missing", artifact_id="acme-lib", suffix=".zip")


def test_multiple_matches_raise_ambiguous(tmp_path: Path) -> None:
    (tmp_path / "acme-lib-2.3.0.zip").write_bytes(b"zip")
    (tmp_path / "acme-lib-2.3.0-tests.zip").write_bytes(b"zip")

    with pytest.raises(AmbiguousArtifactError, match="acme-lib") as exc_info:
        find_single_artifact(tmp_path, artifact_id="acme-lib", suffix=".zip")

    assert len(exc_info.value.candidates) == 2
    assert "acme-lib-2.3.0-tests.zip" in str(exc_info.value)


def test_subdirectories_are_not_searched(tmp_path: Path) -> None:
    nested = tmp_path / "nested"
    nested.mkdir()
    (nested / "acme-lib-2.3.0.zip").write_bytes(b"zip")
    archive = tmp_path / "acme-lib-2.3.0.zip"
    archive.write_bytes(b"zip")

    assert find_single_artifact(tmp_path, artifact_id="acme-lib", suffix=".zip") == archive


def test_directories_matching_the_pattern_are_ignored(tmp_path: Path) -> None:
    (tmp_path / "acme-lib-extracted.zip").mkdir()

    assert matching_artifacts(tmp_path, artifact_id="acme-lib", suffix=".zip") == []
