"""Dependencies threaded through CLI commands.

RetrieverContext is created once at the CLI entry point and passed via
Click's context object. Tests build their own with fakes and hand it to
CliRunner through ``obj=``.
"""

from dataclasses import dataclass

from nexus_retriever.config import RetrieverConfig
from nexus_retriever.gateway.archive.abc import ArchiveExtractor
from nexus_retriever.gateway.archive.real import RealArchiveExtractor
from nexus_retriever.gateway.feedback.abc import UserFeedback
from nexus_retriever.gateway.feedback.real import InteractiveFeedback
from nexus_retriever.gateway.process.abc import ProcessRunner
from nexus_retriever.gateway.process.real import RealProcessRunner
from nexus_retriever.gateway.workspace.abc import WorkspaceResolver
from nexus_retriever.gateway.workspace.real import RealWorkspaceResolver


@dataclass(frozen=True)
class RetrieverContext:
    """Immutable bundle of configuration and gateways."""

    config: RetrieverConfig
    process_runner: ProcessRunner
    archive_extractor: ArchiveExtractor
    workspace: WorkspaceResolver
    feedback: UserFeedback


def create_context(config: RetrieverConfig) -> RetrieverContext:
    """Build the production context from loaded configuration."""
    return RetrieverContext(
        config=config,
        process_runner=RealProcessRunner(timeout_seconds=config.timeout_seconds),
        archive_extractor=RealArchiveExtractor(),
        workspace=RealWorkspaceResolver(config.workspace_root),
        feedback=InteractiveFeedback(),
    )
