"""Retrieve a shared library by delegating the download to Maven.

The pipeline is linear and fails fast:

1. substitute the requested version into the artifact coordinate
2. locate the mvn executable
3. run ``mvn dependency:copy`` into the destination directory
4. find the single archive Maven produced
5. unpack it in place and delete the archive

Each stage's output is a precondition for the next. Nothing is retried.
"""

import logging
import sys
from pathlib import Path

from nexus_retriever.coordinate import ArtifactCoordinate, resolve_version
from nexus_retriever.core.artifact_discovery import find_single_artifact
from nexus_retriever.core.executable import (
    DEFAULT_TOOL_NAME,
    ExecutableNotFound,
    locate_executable,
)
from nexus_retriever.core.request import RetrievalRequest, RetrievalResult
from nexus_retriever.errors import ArchiveMissingError, ConfigurationError, ProcessError
from nexus_retriever.gateway.archive.abc import ArchiveExtractor
from nexus_retriever.gateway.feedback.abc import UserFeedback
from nexus_retriever.gateway.process.abc import ProcessRunner

logger = logging.getLogger(__name__)

DEFAULT_ARCHIVE_SUFFIX = ".zip"
FETCH_GOAL = "dependency:copy"


def build_fetch_command(executable: Path, *, coordinate: str, destination_dir: Path) -> list[str]:
    """Argument vector that copies one artifact into destination_dir."""
    return [
        str(executable),
        FETCH_GOAL,
        "--update-snapshots",
        f"-Dartifact={coordinate}",
        f"-DoutputDirectory={destination_dir}",
    ]


def not_found_message(result: ExecutableNotFound) -> str:
    msg = (
        f"Unable to find {result.tool_name} executable, set MAVEN_HOME in the "
        f"retriever configuration or add {result.tool_name} to the PATH"
    )
    if result.rejected_home is not None:
        msg += f" (no runnable bin/{result.tool_name} under {result.rejected_home})"
    return msg


class LibraryRetriever:
    """Retrieves shared libraries published as zip archives in a Maven repository.

    Takes ABC gateways as constructor args, so the pipeline can be exercised
    without Maven or a real archive. Raises RetrievalError subclasses instead
    of printing and exiting. Holds no per-request state: concurrent calls are
    safe as long as each uses its own destination directory.
    """

    def __init__(
        self,
        artifact_details: str | None,
        maven_home: str | None,
        *,
        process_runner: ProcessRunner,
        archive_extractor: ArchiveExtractor,
        feedback: UserFeedback,
        tool_name: str = DEFAULT_TOOL_NAME,
        archive_suffix: str = DEFAULT_ARCHIVE_SUFFIX,
        platform: str = sys.platform,
    ) -> None:
        """Create a retriever for one configured library coordinate.

        Args:
            artifact_details: Coordinate, optionally holding a
                ``${library.<name>.version}`` placeholder
            maven_home: Maven installation directory, or None to use the PATH
            process_runner: Runs the lookup and fetch commands
            archive_extractor: Unpacks and removes the fetched archive
            feedback: Receives progress lines
            tool_name: Executable name under ``<maven_home>/bin`` and on the PATH
            archive_suffix: File suffix of the fetched archive
            platform: sys.platform value selecting the executable lookup command
        """
        self.artifact_details = artifact_details
        self.maven_home = maven_home
        self._process_runner = process_runner
        self._archive_extractor = archive_extractor
        self._feedback = feedback
        self._tool_name = tool_name
        self._archive_suffix = archive_suffix
        self._platform = platform

    def resolve_coordinate(self, library_name: str, library_version: str) -> str:
        """Substitute the library version into the configured coordinate.

        Raises:
            ConfigurationError: If no coordinate is configured
        """
        if not self.artifact_details or not self.artifact_details.strip():
            msg = (
                "No artifact details specified for shared library: "
                f"{library_name}:{library_version}"
            )
            raise ConfigurationError(msg)

        return resolve_version(self.artifact_details.strip(), library_name, library_version)

    def locate_executable(self) -> Path:
        """Find the Maven executable for this retrieval.

        Raises:
            ConfigurationError: If neither maven_home nor the PATH provides one
        """
        result = locate_executable(
            self.maven_home,
            tool_name=self._tool_name,
            process_runner=self._process_runner,
            feedback=self._feedback,
            platform=self._platform,
        )
        if isinstance(result, ExecutableNotFound):
            raise ConfigurationError(not_found_message(result))
        return result

    def retrieve(self, request: RetrievalRequest) -> RetrievalResult:
        """Download the library and unpack it into request.destination_dir.

        Raises:
            ConfigurationError: Missing coordinate or no Maven executable
            ProcessError: Maven exited non-zero
            ArtifactNotFoundError: Maven produced no matching archive
            AmbiguousArtifactError: Several archives match the artifactId
            ArchiveMissingError: The archive vanished before extraction
            ExtractionError: The archive could not be unpacked
        """
        coordinate_text = self.resolve_coordinate(request.library_name, request.library_version)
        coordinate = ArtifactCoordinate.parse(coordinate_text)
        destination_dir = request.destination_dir
        self._feedback.line(f"=> Library directory for build: '{destination_dir}'")

        executable = self.locate_executable()
        self._feedback.line(f"=> Using {executable} for downloading library")

        cmd = build_fetch_command(
            executable, coordinate=coordinate_text, destination_dir=destination_dir
        )
        self._feedback.line(f"=> Executing {' '.join(cmd)}")
        result = self._process_runner.run(cmd)

        self._feedback.line("=> Downloading library from Nexus")
        self._feedback.block(result.output)

        if result.exit_code != 0:
            msg = f"Error downloading artifact {coordinate_text} (exit code {result.exit_code})"
            if result.output.strip():
                msg += f"\n{result.output.rstrip()}"
            raise ProcessError(msg, exit_code=result.exit_code, output=result.output)

        artifact_id = coordinate.artifact_id
        self._feedback.line(f"=> Looking for artifact id: {artifact_id}")
        archive_path = find_single_artifact(
            destination_dir, artifact_id=artifact_id, suffix=self._archive_suffix
        )
        self._feedback.line("=> File found")

        if not archive_path.exists():
            raise ArchiveMissingError(archive_path)

        self._feedback.line(f"=> About to unzip {archive_path}")
        extracted = self._archive_extractor.extract(archive_path, destination_dir)
        logger.debug("Removed archive %s after extracting %d entries", archive_path, len(extracted))
        self._feedback.line(f"=> Retrieved ({coordinate_text})")

        return RetrievalResult(
            coordinate=coordinate_text,
            destination_dir=destination_dir,
            archive_name=archive_path.name,
            executable=executable,
            extracted=extracted,
        )
