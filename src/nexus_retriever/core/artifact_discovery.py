"""Find the archive the fetch tool left in the destination directory.

Maven names copied artifacts using its own conventions for versions and
classifiers, so the file is matched by artifactId prefix and archive suffix
rather than by an exact name.
"""

from pathlib import Path

from nexus_retriever.errors import AmbiguousArtifactError, ArtifactNotFoundError


def matching_artifacts(directory: Path, *, artifact_id: str, suffix: str) -> list[Path]:
    """List regular files directly inside directory matching the artifact pattern.

    Subdirectories are not searched. A missing directory has no matches.
    """
    if not directory.is_dir():
        return []
    return sorted(
        entry
        for entry in directory.iterdir()
        if entry.is_file() and entry.name.startswith(artifact_id) and entry.name.endswith(suffix)
    )


def find_single_artifact(directory: Path, *, artifact_id: str, suffix: str) -> Path:
    """Return the one archive in directory produced for artifact_id.

    Raises:
        ArtifactNotFoundError: If no file matches
        AmbiguousArtifactError: If more than one file matches
    """
    matches = matching_artifacts(directory, artifact_id=artifact_id, suffix=suffix)
    if not matches:
        raise ArtifactNotFoundError(artifact_id=artifact_id, directory=directory)
    if len(matches) > 1:
        raise AmbiguousArtifactError(
            artifact_id=artifact_id, directory=directory, candidates=matches
        )
    return matches[0]
