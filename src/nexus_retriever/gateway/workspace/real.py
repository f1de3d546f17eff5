"""Real workspace resolver rooted at a configured directory."""

import re
from pathlib import Path

from nexus_retriever.core.request import LibraryRef
from nexus_retriever.gateway.workspace.abc import WorkspaceResolver

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9._@+-]")


def library_dir_name(library: LibraryRef) -> str:
    """Directory name for a library checkout, e.g. 'acme-lib@2.3.0'."""
    return _UNSAFE_CHARS.sub("_", f"{library.name}@{library.version}")


class RealWorkspaceResolver(WorkspaceResolver):
    """Production implementation placing each library under a root directory."""

    def __init__(self, root: Path) -> None:
        self._root = root

    def resolve_directory(self, library: LibraryRef) -> Path:
        return self._root.expanduser() / library_dir_name(library)
