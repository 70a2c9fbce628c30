"""Output helpers shared by commands and the search engine."""

from pathlib import Path

import click

from .config import get_verbosity

# Resolved on first use; the CLI may override it for one invocation
_verbosity: int | None = None


def current_verbosity() -> int:
    global _verbosity
    if _verbosity is None:
        _verbosity = get_verbosity()
    return _verbosity


def set_session_verbosity(level: int | None) -> None:
    """Override the configured verbosity for this process (None resets)."""
    global _verbosity
    _verbosity = level


def log_info(message: str) -> None:
    """Standard output, shown at verbosity >= 1."""
    if current_verbosity() >= 1:
        click.echo(message)


def log_verbose(message: str) -> None:
    """Detailed output, shown at verbosity >= 2."""
    if current_verbosity() >= 2:
        click.echo(message)


def log_debug(message: str) -> None:
    """Internals, shown at verbosity >= 3."""
    if current_verbosity() >= 3:
        click.echo(click.style(f"[debug] {message}", dim=True), err=True)


def open_in_editor(path: Path) -> None:
    """Open a file in $VISUAL / $EDITOR and wait for it to close."""
    click.edit(filename=str(path))
