"""Aide commands: named notes that collect timestamped entries."""

from pathlib import Path

import click
from rapidfuzz import fuzz

from ..completions import complete_aide_name
from ..schema import DEFAULT_AIDE_TYPE, VALID_AIDE_TYPES
from ..search import EntityType
from ..session import Session
from ..store import Aide, split_entry, timestamp
from ..utils import log_info, log_verbose, open_in_editor

SEARCH_MIN_SCORE = 80


@click.command()
@click.argument("name")
@click.option("--type", "-t", "aide_type", type=click.Choice(VALID_AIDE_TYPES),
              default=DEFAULT_AIDE_TYPE, show_default=True,
              help="'file' aides also append entries to a text file")
@click.pass_obj
def create(session: Session, name: str, aide_type: str):
    """Create a new aide.

    Examples:
        aide create commands
        aide create journal --type file
    """
    if not name.strip():
        raise click.ClickException("Aide name cannot be empty.")
    if session.store.get_aide(name) is not None:
        raise click.ClickException(f"Aide '{name}' already exists.")

    session.store.put_aide(Aide(name=name, aide_type=aide_type))
    session.indexes.created(EntityType.AIDE, name)
    log_info(click.style(f"Aide '{name}' of type '{aide_type}' created.", fg="green"))


@click.command()
@click.argument("name", shell_complete=complete_aide_name)
@click.argument("data", required=False)
@click.option("--path", "-p", "path", type=click.Path(exists=True, dir_okay=False, path_type=Path),
              help="Read the entry from a file instead of DATA")
@click.pass_obj
def add(session: Session, name: str, data: str | None, path: Path | None):
    """Add an entry to an aide.

    Examples:
        aide add commands "git log --oneline --graph"
        aide add journal -p today.txt
    """
    if data is not None and path is not None:
        raise click.ClickException("Cannot specify both DATA and --path.")
    if data is None and path is None:
        raise click.ClickException("Provide either DATA or --path.")

    actual = session.resolve(EntityType.AIDE, name)

    if path is not None:
        log_verbose(f"Reading content from file: {path}")
        try:
            content = path.read_text(encoding="utf-8").strip()
        except (OSError, UnicodeDecodeError) as e:
            raise click.ClickException(f"Error reading file '{path}': {e}")
    else:
        content = data

    aide = session.store.get_aide(actual)
    stamp = timestamp()
    aide.entries.append(f"[{stamp}] {content}")
    session.store.put_aide(aide)

    if aide.aide_type == "file":
        file_path = session.store.append_aide_file(actual, stamp, content)
        log_verbose(f"Data appended to file: {file_path}")

    log_info(f"Data added to aide '{actual}'")


@click.command("aide-show")
@click.argument("name", shell_complete=complete_aide_name)
@click.pass_obj
def aide_show(session: Session, name: str):
    """Show the entries of an aide."""
    actual = session.resolve(EntityType.AIDE, name)
    aide = session.store.get_aide(actual)

    log_info(click.style(f"{aide.name} ({aide.aide_type})", bold=True))
    if not aide.entries:
        log_info("  (no entries)")
    for entry in aide.entries:
        log_info(f"  {entry}")


@click.command("aide-delete")
@click.argument("name", shell_complete=complete_aide_name)
@click.option("--force", "-f", is_flag=True, help="Delete without confirmation")
@click.pass_obj
def aide_delete(session: Session, name: str, force: bool):
    """Delete an aide and its entries."""
    actual = session.resolve(EntityType.AIDE, name)
    if not force and not click.confirm(f"Delete aide '{actual}'?"):
        log_info("Cancelled.")
        return

    session.store.delete_aide(actual)
    session.indexes.deleted(EntityType.AIDE, actual)
    log_info(f"Deleted aide '{actual}'")


@click.command()
@click.argument("name", shell_complete=complete_aide_name)
@click.pass_obj
def write(session: Session, name: str):
    """Open an aide's text file in your editor.

    The file is created from the stored entries if it does not exist yet.
    """
    actual = session.resolve(EntityType.AIDE, name)
    file_path = session.store.write_aide_file(session.store.get_aide(actual))
    log_verbose(f"Opening {file_path}")
    open_in_editor(file_path)


@click.command("aide-list")
@click.pass_obj
def aide_list(session: Session):
    """List aides with their type and number of entries."""
    aides = session.store.list_aides()
    if not aides:
        log_info("No aides yet. Create one with: aide create <name>")
        return

    log_info(f"{'Aide':<30} {'Type':<6} {'Entries':<7}")
    log_info("-" * 45)
    for a in aides:
        log_info(f"{a.name:<30} {a.aide_type:<6} {len(a.entries):<7}")


@click.command()
@click.argument("text")
@click.pass_obj
def search(session: Session, text: str):
    """Search aide entries for TEXT (fuzzy, case-insensitive).

    Only the entry content is searched, not its timestamp.
    """
    needle = text.lower()
    hits = []
    for aide in session.store.list_aides():
        for entry in aide.entries:
            _, content = split_entry(entry)
            score = fuzz.partial_ratio(needle, content.lower())
            if score >= SEARCH_MIN_SCORE:
                hits.append((score, aide.name, entry))

    if not hits:
        log_info(f"No entries matching '{text}'.")
        return

    hits.sort(key=lambda h: (-h[0], h[1], h[2]))
    for score, aide_name, entry in hits:
        log_info(f"{aide_name}: {entry}")
        log_verbose(click.style(f"  score {score:.0f}", dim=True))
