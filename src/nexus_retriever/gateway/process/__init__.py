"""Subprocess execution with captured output."""

from nexus_retriever.gateway.process.abc import ProcessResult as ProcessResult
from nexus_retriever.gateway.process.abc import ProcessRunner as ProcessRunner
from nexus_retriever.gateway.process.fake import FakeProcessRunner as FakeProcessRunner
from nexus_retriever.gateway.process.real import RealProcessRunner as RealProcessRunner
