"""Artifact coordinates and library version placeholders.

A coordinate is the colon-delimited Maven form
``groupId:artifactId:version[:packaging[:classifier]]``. Administrators may put
``${library.<name>.version}`` in the version segment so that the version
requested by a build is substituted at retrieval time.
"""

import re
from dataclasses import dataclass

from nexus_retriever.errors import ConfigurationError

MIN_SEGMENTS = 3
MAX_SEGMENTS = 5


def version_placeholder(library_name: str) -> str:
    """Return the literal placeholder token for a library."""
    return "${library." + library_name + ".version}"


def resolve_version(coordinate: str, library_name: str, version: str) -> str:
    """Replace every version placeholder for ``library_name`` with ``version``.

    The version is inserted verbatim. A coordinate without the placeholder is
    returned unchanged, since the version may be hard-coded.
    """
    pattern = re.compile(re.escape(version_placeholder(library_name)))
    if pattern.search(coordinate) is None:
        return coordinate
    # A callable replacement keeps backslashes and group references literal
    return pattern.sub(lambda _match: version, coordinate)


@dataclass(frozen=True)
class ArtifactCoordinate:
    """Parsed form of a colon-delimited artifact coordinate."""

    group_id: str
    artifact_id: str
    version: str
    packaging: str | None
    classifier: str | None

    @staticmethod
    def parse(text: str) -> "ArtifactCoordinate":
        """Parse ``groupId:artifactId:version[:packaging[:classifier]]``.

        Raises:
            ConfigurationError: If fewer than three or more than five segments
                are present, or a required segment is empty
        """
        parts = text.strip().split(":")
        if len(parts) < MIN_SEGMENTS or len(parts) > MAX_SEGMENTS:
            msg = (
                f"Invalid artifact coordinate '{text}': expected "
                "groupId:artifactId:version[:packaging[:classifier]]"
            )
            raise ConfigurationError(msg)
        if not all(parts[:MIN_SEGMENTS]):
            msg = (
                f"Invalid artifact coordinate '{text}': "
                "groupId, artifactId and version are required"
            )
            raise ConfigurationError(msg)

        packaging = parts[3] if len(parts) > 3 and parts[3] else None
        classifier = parts[4] if len(parts) > 4 and parts[4] else None
        return ArtifactCoordinate(
            group_id=parts[0],
            artifact_id=parts[1],
            version=parts[2],
            packaging=packaging,
            classifier=classifier,
        )

