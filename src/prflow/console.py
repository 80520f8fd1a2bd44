"""Colored console output shared by the prflow commands."""

import click


def notice(message: str) -> None:
    """Print a yellow notice (directory changes, nothing-to-do exits)."""
    click.secho(message, fg="yellow")


def progress(message: str) -> None:
    """Print a green progress step."""
    click.secho(message, fg="green")


def highlight(message: str) -> None:
    """Print blue text for names and paths."""
    click.secho(message, fg="blue")


def labelled(label: str, value: str) -> None:
    click.echo(f"  {label} " + click.style(value, fg="blue"))


def error(message: str) -> None:
    """Print a red ``Error:`` line to stderr."""
    click.secho(f"Error: {message}", fg="red", err=True)


def hint(message: str) -> None:
    """Print a yellow follow-up line to stderr after an error."""
    click.secho(message, fg="yellow", err=True)
