"""Archive extraction with cleanup of the source archive."""

from nexus_retriever.gateway.archive.abc import ArchiveExtractor as ArchiveExtractor
from nexus_retriever.gateway.archive.fake import FakeArchiveExtractor as FakeArchiveExtractor
from nexus_retriever.gateway.archive.real import RealArchiveExtractor as RealArchiveExtractor
