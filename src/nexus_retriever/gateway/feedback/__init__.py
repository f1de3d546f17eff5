"""User-facing progress output with mode awareness."""

from nexus_retriever.gateway.feedback.abc import UserFeedback as UserFeedback
from nexus_retriever.gateway.feedback.fake import FakeUserFeedback as FakeUserFeedback
from nexus_retriever.gateway.feedback.real import InteractiveFeedback as InteractiveFeedback
from nexus_retriever.gateway.feedback.real import SuppressedFeedback as SuppressedFeedback
