"""Fake ArchiveExtractor implementation for testing.

FakeArchiveExtractor writes configured file contents instead of reading a
real archive, and tracks every extraction for assertions.
"""

from pathlib import Path

from nexus_retriever.errors import ExtractionError
from nexus_retriever.gateway.archive.abc import ArchiveExtractor


class FakeArchiveExtractor(ArchiveExtractor):
    """In-memory fake implementation of archive extraction.

    Constructor Injection:
    ---------------------
    - entries: Relative path to file content, written on every extraction
    - fail_with: Error message; when set, extraction raises ExtractionError
      and leaves the archive in place

    Mutation Tracking:
    -----------------
    - extractions: List of (archive_path, destination_dir) tuples
    """

    def __init__(
        self,
        *,
        entries: dict[str, str] | None = None,
        fail_with: str | None = None,
    ) -> None:
        self._entries = entries if entries is not None else {}
        self._fail_with = fail_with
        self._extractions: list[tuple[Path, Path]] = []

    def extract(self, archive_path: Path, destination_dir: Path) -> list[Path]:
        self._extractions.append((archive_path, destination_dir))
        if self._fail_with is not None:
            raise ExtractionError(self._fail_with)

        written: list[Path] = []
        for relative, content in self._entries.items():
            target = destination_dir / relative
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(content, encoding="utf-8")
            written.append(target)
        archive_path.unlink(missing_ok=True)
        return written

    @property
    def extractions(self) -> list[tuple[Path, Path]]:
        """Get list of extractions performed during test.

        This property is for test assertions only.
        """
        return self._extractions.copy()
