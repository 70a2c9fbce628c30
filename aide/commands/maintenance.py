"""Index maintenance and settings commands."""

from pathlib import Path

import click
from click.shell_completion import get_completion_class

from ..config import get_data_dir, get_verbosity, set_data_dir, set_verbosity
from ..search import ACCEPTANCE_THRESHOLD, EntityType, Matcher
from ..session import Session
from ..utils import log_info, log_verbose

KINDS = click.Choice([k.value for k in EntityType])


@click.command()
@click.option("--kind", "-k", type=KINDS, help="Only rebuild this index")
@click.pass_obj
def reindex(session: Session, kind: str | None):
    """Recompute cached TF-IDF vectors from current document frequencies.

    Inserting and deleting names keeps the vocabulary exact but leaves other
    names' vectors as they were when indexed; this refreshes all of them.
    Indexes are built fresh for each invocation, so a standalone run reports
    no stale vectors; staleness only accumulates within a long-lived session
    after inserts and deletes.
    """
    kinds = [EntityType(kind)] if kind else list(EntityType)
    for k in kinds:
        index = session.indexes.get(k)
        stale = index.stale_names()
        session.indexes.rebuild(k)
        log_info(f"{k.value}: {len(index)} names, {len(stale)} stale vectors refreshed")
        for name in stale:
            log_verbose(f"  {name}")


@click.command()
@click.argument("kind", type=KINDS)
@click.argument("text")
@click.option("--limit", "-n", default=10, show_default=True, help="Candidates to show")
@click.pass_obj
def match(session: Session, kind: str, text: str, limit: int):
    """Show how TEXT scores against every stored name of KIND.

    Examples:
        aide match config databse_url
        aide match task cmds -n 3
    """
    index = session.indexes.get(EntityType(kind))
    exact = index.exact(text)
    if exact is not None:
        log_info(f"Exact match: {exact}")
        return

    candidates = Matcher(index).query(text)
    if not candidates:
        log_info(f"No {kind} names indexed.")
        return

    log_info(f"{'Name':<30} {'Combined':>8} {'TF-IDF':>8} {'String':>8}")
    log_info("-" * 57)
    for c in candidates[:limit]:
        line = f"{c.name:<30} {c.combined_score:>8.4f} {c.tfidf_score:>8.4f} {c.string_score:>8.4f}"
        log_info(line if c.acceptable else click.style(line, dim=True))
    if not candidates[0].acceptable:
        log_info(f"No candidate reaches the threshold ({ACCEPTANCE_THRESHOLD}).")


@click.command()
@click.option("--force", "-f", is_flag=True, help="Clear without confirmation")
@click.pass_obj
def clear(session: Session, force: bool):
    """Delete all tasks, aides and configuration values."""
    if not force and not click.confirm("Delete ALL tasks, aides and config values?"):
        log_info("Cancelled.")
        return
    session.store.clear()
    session.indexes.discard()
    log_info("All data cleared.")


@click.command()
@click.argument("level", type=click.IntRange(0, 3), required=False)
def verbosity(level: int | None):
    """Show or set the output verbosity (0-3)."""
    if level is None:
        click.echo(get_verbosity())
        return
    try:
        set_verbosity(level)
    except ValueError as e:
        raise click.ClickException(str(e))
    click.echo(f"Verbosity set to {level}")


@click.command("data-dir")
@click.argument("path", type=click.Path(file_okay=False, path_type=Path), required=False)
def data_dir(path: Path | None):
    """Show or set where aide.yaml is stored."""
    if path is None:
        click.echo(get_data_dir())
        return
    set_data_dir(path)
    click.echo(f"Data directory set to {path.resolve()}")


@click.command()
@click.argument("shell", type=click.Choice(["bash", "zsh", "fish"]))
@click.pass_context
def completions(ctx, shell: str):
    """Print the shell completion script for SHELL.

    Examples:
        eval "$(aide completions bash)"
        aide completions fish > ~/.config/fish/completions/aide.fish
    """
    comp_cls = get_completion_class(shell)
    if comp_cls is None:
        raise click.ClickException(f"Unsupported shell: {shell}")
    comp = comp_cls(ctx.find_root().command, {}, "aide", "_AIDE_COMPLETE")
    click.echo(comp.source())
