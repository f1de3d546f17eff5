"""Destination directory resolution for retrieval requests."""

from nexus_retriever.gateway.workspace.abc import WorkspaceResolver as WorkspaceResolver
from nexus_retriever.gateway.workspace.fake import FakeWorkspaceResolver as FakeWorkspaceResolver
from nexus_retriever.gateway.workspace.real import RealWorkspaceResolver as RealWorkspaceResolver
