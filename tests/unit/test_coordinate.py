"""Tests for version placeholder substitution and coordinate parsing."""

import pytest

from nexus_retriever.coordinate import ArtifactCoordinate, resolve_version, version_placeholder
from nexus_retriever.errors import ConfigurationError


def test_resolve_version_replaces_placeholder() -> None:
    result = resolve_version("com.x:acme-lib:${library.acme-lib.version}:zip", "acme-lib", "2.3.0")

    assert result == "com.x:acme-lib:2.3.0:zip"


def test_resolve_version_replaces_every_occurrence() -> None:
    coordinate = "com.x:acme-lib:${library.acme-lib.version}:zip:${library.acme-lib.version}"

    result = resolve_version(coordinate, "acme-lib", "1.0")

    assert result == "com.x:acme-lib:1.0:zip:1.0"
    assert version_placeholder("acme-lib") not in result


def test_resolve_version_without_placeholder_is_identity() -> None:
    """A hard-coded version is left alone."""
    coordinate = "com.x:acme-lib:9.9.9:zip"

    assert resolve_version(coordinate, "acme-lib", "2.3.0") == coordinate


def test_resolve_version_ignores_placeholder_for_other_library() -> None:
    coordinate = "com.x:acme-lib:${library.other-lib.version}:zip"

    assert resolve_version(coordinate, "acme-lib", "2.3.0") == coordinate


def test_resolve_version_inserts_version_literally() -> None:
    """Backslashes and group references in the version are not interpreted."""
    coordinate = "g:a:${library.a.version}"

    assert resolve_version(coordinate, "a", r"1.0-\1-\g<0>-$0") == r"g:a:1.0-\1-\g<0>-$0"


def test_resolve_version_treats_library_name_literally() -> None:
    """Regex metacharacters in the library name only match themselves."""
    coordinate = "g:a:${library.a+b.version}"

    assert resolve_version(coordinate, "a+b", "3") == "g:a:3"
    assert resolve_version("g:a:${library.aab.version}", "a+b", "3") == "g:a:${library.aab.version}"


def test_parse_full_coordinate() -> None:
    coordinate = ArtifactCoordinate.parse("com.x:acme-lib:2.3.0:zip:sources")

    assert coordinate == ArtifactCoordinate(
        group_id="com.x",
        artifact_id="acme-lib",
        version="2.3.0",
        packaging="zip",
        classifier="sources",
    )


def test_parse_minimal_coordinate() -> None:
    coordinate = ArtifactCoordinate.parse("com.x:acme-lib:2.3.0")

    assert coordinate.artifact_id == "acme-lib"
    assert coordinate.packaging is None
    assert coordinate.classifier is None


@pytest.mark.parametrize(
    "text",
    ["com.x:acme-lib", "com.x", "com.x::2.3.0", "a:b:c:d:e:f"],
)
def test_parse_rejects_malformed_coordinates(text: str) -> None:
    with pytest.raises(ConfigurationError, match="Invalid artifact coordinate"):
        ArtifactCoordinate.parse(text)
