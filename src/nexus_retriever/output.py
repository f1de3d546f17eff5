"""User-facing output helpers for the CLI."""

import click


def user_output(message: str) -> None:
    """Write a message for the user to stderr."""
    click.echo(message, err=True)


def user_error(message: str) -> None:
    """Write an error message with a red 'Error: ' prefix to stderr."""
    user_output(click.style("Error: ", fg="red") + message)
