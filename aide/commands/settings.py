"""Key-value configuration commands (set, get, config-list, config-delete)."""

import click

from ..completions import complete_config_key
from ..search import EntityType, Resolved, Suggested
from ..session import Session
from ..utils import log_info


@click.command("set")
@click.argument("key", shell_complete=complete_config_key)
@click.argument("value")
@click.pass_obj
def set_value(session: Session, key: str, value: str):
    """Set a configuration value.

    If KEY is close to an existing key you are asked whether you meant it;
    answering no stores KEY as a new key.
    """
    if not key.strip():
        raise click.ClickException("Config key cannot be empty.")

    result = session.lookup(EntityType.CONFIG, key)
    target = key
    if isinstance(result, Resolved):
        target = result.name
    elif isinstance(result, Suggested) and session.confirm_suggestion(key, result.name):
        target = result.name

    if session.store.set_value(target, value):
        session.indexes.created(EntityType.CONFIG, target)
    log_info(f"{target} = {value}")


@click.command("get")
@click.argument("key", shell_complete=complete_config_key)
@click.pass_obj
def get_value(session: Session, key: str):
    """Print a configuration value."""
    actual = session.resolve(EntityType.CONFIG, key)
    click.echo(session.store.get_value(actual))


@click.command("config-list")
@click.pass_obj
def config_list(session: Session):
    """List all configuration keys and values."""
    keys = session.store.config_keys()
    if not keys:
        log_info("No configuration values. Add one with: aide set <key> <value>")
        return
    for key in keys:
        log_info(f"{key} = {session.store.get_value(key)}")


@click.command("config-delete")
@click.argument("key", shell_complete=complete_config_key)
@click.pass_obj
def config_delete(session: Session, key: str):
    """Delete a configuration key."""
    actual = session.resolve(EntityType.CONFIG, key)
    session.store.delete_value(actual)
    session.indexes.deleted(EntityType.CONFIG, actual)
    log_info(f"Deleted config key '{actual}'")
