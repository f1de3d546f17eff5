"""Workspace resolution abstraction.

The host decides where a library is checked out for a build. Resolving that
location is injected per call so the retrieval pipeline never consults
global host state.
"""

from abc import ABC, abstractmethod
from pathlib import Path

from nexus_retriever.core.request import LibraryRef


class WorkspaceResolver(ABC):
    """Abstract interface mapping a library request to its directory."""

    @abstractmethod
    def resolve_directory(self, library: LibraryRef) -> Path:
        """Get the directory a library should be retrieved into.

        Args:
            library: Name and version of the requested library

        Returns:
            Directory that is unique to this library and version
        """
        ...
