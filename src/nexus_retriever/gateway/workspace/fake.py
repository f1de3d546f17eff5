"""Fake WorkspaceResolver implementation for testing."""

from pathlib import Path

from nexus_retriever.core.request import LibraryRef
from nexus_retriever.gateway.workspace.abc import WorkspaceResolver


class FakeWorkspaceResolver(WorkspaceResolver):
    """Test double returning one configured directory for every request.

    This class has NO public setup methods. All state is provided via constructor.
    """

    def __init__(self, *, directory: Path) -> None:
        self._directory = directory
        self._resolved: list[LibraryRef] = []

    def resolve_directory(self, library: LibraryRef) -> Path:
        self._resolved.append(library)
        return self._directory

    @property
    def resolved(self) -> list[LibraryRef]:
        return list(self._resolved)
