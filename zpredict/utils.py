"""Output helpers shared by the predictor and the CLI."""

import click

from .config import get_verbosity


def log_error(message: str) -> None:
    """Always shown, on stderr."""
    click.echo(click.style(message, fg="red"), err=True)


def log_info(message: str) -> None:
    """Standard output (verbosity >= 1)."""
    if get_verbosity() >= 1:
        click.echo(message)


def log_verbose(message: str) -> None:
    """Detailed output (verbosity >= 2), on stderr."""
    if get_verbosity() >= 2:
        click.echo(click.style(message, dim=True), err=True)


def log_debug(message: str) -> None:
    """Internals (verbosity >= 3), on stderr."""
    if get_verbosity() >= 3:
        click.echo(click.style(f"[debug] {message}", fg="cyan", dim=True), err=True)
