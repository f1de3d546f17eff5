"""Fixtures for CLI command tests."""

from collections.abc import Callable
from pathlib import Path

import pytest

from nexus_retriever.config import RetrieverConfig
from nexus_retriever.context import RetrieverContext
from nexus_retriever.gateway.archive.abc import ArchiveExtractor
from nexus_retriever.gateway.archive.fake import FakeArchiveExtractor
from nexus_retriever.gateway.feedback.fake import FakeUserFeedback
from nexus_retriever.gateway.process.abc import ProcessRunner
from nexus_retriever.gateway.workspace.fake import FakeWorkspaceResolver

ContextBuilder = Callable[..., RetrieverContext]


@pytest.fixture
def build_context(tmp_path: Path) -> ContextBuilder:
    """Build a RetrieverContext from fakes, overriding only what a test needs."""

    def _build(
        *,
        process_runner: ProcessRunner,
        archive_extractor: ArchiveExtractor | None = None,
        artifact: str | None = None,
        maven_home: str | None = None,
        workspace_dir: Path | None = None,
        feedback: FakeUserFeedback | None = None,
    ) -> RetrieverContext:
        defaults = RetrieverConfig.defaults()
        config = RetrieverConfig(
            artifact=artifact,
            maven_home=maven_home,
            tool=defaults.tool,
            archive_suffix=defaults.archive_suffix,
            timeout_seconds=None,
            workspace_root=tmp_path / "workspace",
        )
        return RetrieverContext(
            config=config,
            process_runner=process_runner,
            archive_extractor=archive_extractor if archive_extractor is not None else FakeArchiveExtractor(),
            workspace=FakeWorkspaceResolver(
                directory=workspace_dir if workspace_dir is not None else tmp_path / "workspace" / "lib"
            ),
            feedback=feedback if feedback is not None else FakeUserFeedback(),
        )

    return _build
