"""Locate the package-manager executable used to fetch libraries.

A configured tool home wins when it holds a runnable ``bin/<tool>``; otherwise
the tool is looked up on the search path with ``which`` (``where`` on Windows).
"""

import logging
import os
import sys
from dataclasses import dataclass
from pathlib import Path

from nexus_retriever.errors import ProcessLaunchError
from nexus_retriever.gateway.feedback.abc import UserFeedback
from nexus_retriever.gateway.process.abc import ProcessRunner

logger = logging.getLogger(__name__)

DEFAULT_TOOL_NAME = "mvn"


@dataclass(frozen=True)
class ExecutableNotFound:
    """Result when no usable executable could be found."""

    tool_name: str
    rejected_home: Path | None  # configured home whose bin/<tool> was unusable
    lookup_exit_code: int | None  # None when the lookup command could not start


def lookup_command(tool_name: str, *, platform: str) -> list[str]:
    """Command that prints the path of tool_name on the search path."""
    if platform.startswith("win"):
        return ["where", tool_name]
    return ["which", tool_name]


def is_runnable(path: Path) -> bool:
    """Check that path is an existing regular file this process may execute."""
    return path.is_file() and os.access(path, os.X_OK)


def locate_executable(
    configured_home: str | None,
    *,
    tool_name: str,
    process_runner: ProcessRunner,
    feedback: UserFeedback,
    platform: str = sys.platform,
) -> Path | ExecutableNotFound:
    """Find a runnable executable for tool_name.

    Args:
        configured_home: Tool installation directory, or None/empty to skip
        tool_name: Bare executable name, e.g. 'mvn'
        process_runner: Runs the system lookup command
        feedback: Receives a line when the configured home is rejected
        platform: sys.platform value selecting the lookup command

    Returns:
        Path to the executable, or ExecutableNotFound with context
    """
    rejected_home: Path | None = None
    if configured_home:
        candidate = Path(configured_home) / "bin" / tool_name
        logger.debug("Probing configured executable %s", candidate)
        if is_runnable(candidate):
            return candidate
        rejected_home = Path(configured_home)
        feedback.line("=> Incorrect MAVEN_HOME specified, trying system Maven...")

    cmd = lookup_command(tool_name, platform=platform)
    try:
        result = process_runner.run(cmd)
    except ProcessLaunchError as e:
        logger.debug("Lookup command unavailable: %s", e)
        return ExecutableNotFound(
            tool_name=tool_name, rejected_home=rejected_home, lookup_exit_code=None
        )

    if result.exit_code != 0:
        return ExecutableNotFound(
            tool_name=tool_name, rejected_home=rejected_home, lookup_exit_code=result.exit_code
        )

    # 'where' may list several matches; the first one is what the shell would run
    for line in result.output.strip().splitlines():
        if line.strip():
            return Path(line.strip())

    return ExecutableNotFound(tool_name=tool_name, rejected_home=rejected_home, lookup_exit_code=0)
