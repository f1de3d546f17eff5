"""Progress output abstraction.

Retrieval reports what it is doing (library directory, executable, command
line, tool output) as lines of text. Where those lines go is up to the host.
"""

from abc import ABC, abstractmethod


class UserFeedback(ABC):
    """Abstract sink for human-readable progress lines."""

    @abstractmethod
    def line(self, text: str) -> None:
        """Emit one progress line."""
        ...

    @abstractmethod
    def block(self, text: str) -> None:
        """Emit multi-line text verbatim, such as captured tool output."""
        ...
