"""Process execution abstraction for testing.

This module provides an ABC for running an external command to completion and
capturing its output, so retrieval logic can be tested without spawning
Maven.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class ProcessResult:
    """Exit status and combined stdout/stderr text of a finished process."""

    exit_code: int
    output: str

    @property
    def succeeded(self) -> bool:
        return self.exit_code == 0


class ProcessRunner(ABC):
    """Abstract process execution for dependency injection."""

    @abstractmethod
    def run(self, cmd: Sequence[str]) -> ProcessResult:
        """Run a command to completion and capture its output.

        The command is an argument vector and is never passed through a shell.

        Args:
            cmd: Executable followed by its arguments

        Returns:
            ProcessResult with the exit code and captured output

        Raises:
            ProcessLaunchError: If the executable cannot be started
            ProcessOutputError: If reading the output stream fails
            ProcessTimeoutError: If the implementation enforces a deadline and it expires
        """
        ...
