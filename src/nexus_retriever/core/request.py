"""Inputs and outputs of a single library retrieval."""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class LibraryRef:
    """A library as requested by a build: its logical name and version."""

    name: str
    version: str


@dataclass(frozen=True)
class RetrievalRequest:
    """Everything one retrieval needs from its caller."""

    library_name: str
    library_version: str
    destination_dir: Path


@dataclass(frozen=True)
class RetrievalResult:
    """Outcome of a successful retrieval."""

    coordinate: str
    destination_dir: Path
    archive_name: str
    executable: Path
    extracted: list[Path]
