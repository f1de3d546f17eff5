"""Error taxonomy for library retrieval.

Every failure in the retrieval pipeline is reported once as a subclass of
RetrievalError. Nothing in the pipeline retries; the caller decides whether
the whole retrieval should be attempted again.
"""

from pathlib import Path


class RetrievalError(Exception):
    """Base class for all retrieval failures."""


class ConfigurationError(RetrievalError):
    """Missing coordinate, malformed configuration, or no usable fetch executable."""


class ProcessError(RetrievalError):
    """The fetch subprocess exited with a non-zero status."""

    def __init__(self, message: str, *, exit_code: int, output: str) -> None:
        super().__init__(message)
        self.exit_code = exit_code
        self.output = output


class ProcessLaunchError(RetrievalError):
    """The subprocess could not be started at all."""


class ProcessOutputError(RetrievalError):
    """Reading the subprocess output stream failed."""


class ProcessTimeoutError(RetrievalError):
    """The subprocess exceeded its deadline and was killed."""

    def __init__(self, message: str, *, timeout_seconds: float) -> None:
        super().__init__(message)
        self.timeout_seconds = timeout_seconds


class ArtifactNotFoundError(RetrievalError):
    """No file in the destination directory matched the artifact pattern."""

    def __init__(self, *, artifact_id: str, directory: Path) -> None:
        super().__init__(f"Unable to find library {artifact_id} in {directory}")
        self.artifact_id = artifact_id
        self.directory = directory


class AmbiguousArtifactError(RetrievalError):
    """More than one file in the destination directory matched the artifact pattern."""

    def __init__(self, *, artifact_id: str, directory: Path, candidates: list[Path]) -> None:
        names = ", ".join(sorted(p.name for p in candidates))
        super().__init__(
            f"Found {len(candidates)} candidate archives for library {artifact_id} "
            f"in {directory}: {names}"
        )
        self.artifact_id = artifact_id
        self.directory = directory
        self.candidates = candidates


class ExtractionError(RetrievalError):
    """The archive could not be unpacked into the destination directory."""


class UnsafeArchiveEntryError(ExtractionError):
    """An archive member would be written outside the destination directory."""

    def __init__(self, *, archive_path: Path, entry: str) -> None:
        super().__init__(f"Archive {archive_path} contains unsafe entry '{entry}'")
        self.archive_path = archive_path
        self.entry = entry


class ArchiveMissingError(RetrievalError):
    """The located archive disappeared before it could be extracted."""

    def __init__(self, archive_path: Path) -> None:
        super().__init__(f"File {archive_path} does not exist")
        self.archive_path = archive_path
