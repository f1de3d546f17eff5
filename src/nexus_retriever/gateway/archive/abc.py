"""Abstract base class for archive extraction.

Extraction is a mutation: it writes the archive's tree into the destination
and then removes the archive itself.
"""

from abc import ABC, abstractmethod
from pathlib import Path


class ArchiveExtractor(ABC):
    """Abstract interface for unpacking a downloaded library archive."""

    @abstractmethod
    def extract(self, archive_path: Path, destination_dir: Path) -> list[Path]:
        """Unpack an archive into a directory, then delete the archive.

        Relative paths recorded in the archive are preserved. The archive is
        deleted only after every member has been written; on failure it is
        left in place.

        Args:
            archive_path: Archive to unpack
            destination_dir: Directory receiving the archive's tree

        Returns:
            Paths written under destination_dir, in archive order

        Raises:
            ExtractionError: If the archive is corrupt, contains entries that
                escape destination_dir, or cannot be written
        """
        ...
