"""Real UserFeedback implementations writing through click."""

import click

from nexus_retriever.gateway.feedback.abc import UserFeedback


class InteractiveFeedback(UserFeedback):
    """Writes progress to stderr so stdout stays usable for results."""

    def line(self, text: str) -> None:
        click.echo(text, err=True)

    def block(self, text: str) -> None:
        if text:
            click.echo(text, err=True, nl=not text.endswith("\n"))


class SuppressedFeedback(UserFeedback):
    """Discards progress output, for --quiet runs."""

    def line(self, text: str) -> None:
        pass

    def block(self, text: str) -> None:
        pass
