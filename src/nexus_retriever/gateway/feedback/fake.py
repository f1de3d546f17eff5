"""Fake UserFeedback implementation for testing."""

from nexus_retriever.gateway.feedback.abc import UserFeedback


class FakeUserFeedback(UserFeedback):
    """Records every emitted line for assertions."""

    def __init__(self) -> None:
        self._lines: list[str] = []

    def line(self, text: str) -> None:
        self._lines.append(text)

    def block(self, text: str) -> None:
        self._lines.extend(text.splitlines())

    @property
    def lines(self) -> list[str]:
        return list(self._lines)

    @property
    def text(self) -> str:
        return "\n".join(self._lines)
