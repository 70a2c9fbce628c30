"""Command-line entry point for aide."""

import click

from . import __version__
from .commands import (
    add,
    aide_delete,
    aide_list,
    aide_show,
    clear,
    completions,
    config_delete,
    config_list,
    create,
    data_dir,
    get_value,
    match,
    reindex,
    search,
    set_value,
    task,
    task_delete,
    task_edit,
    task_list,
    task_log,
    task_priority,
    task_show,
    task_status,
    verbosity,
    write,
)
from .config import get_data_dir
from .session import Session
from .store import Store, StoreError
from .utils import current_verbosity, set_session_verbosity


@click.group()
@click.option("--yes", "-y", is_flag=True, help="Accept 'did you mean' suggestions without asking")
@click.option("--verbose", "-v", count=True, help="More output (repeat for debug)")
@click.version_option(__version__, prog_name="aide")
@click.pass_context
def cli(ctx, yes: bool, verbose: int):
    """Personal tasks, aides and configuration values.

    Every command that takes a name accepts an approximate one: if it does
    not match exactly, the closest stored name is offered instead.
    """
    if verbose:
        set_session_verbosity(max(current_verbosity(), min(3, 1 + verbose)))

    store = Store(get_data_dir())
    try:
        store.load()
    except StoreError as e:
        raise click.ClickException(str(e))
    ctx.obj = Session(store, assume_yes=yes)


for command in (
    task, task_status, task_priority, task_log, task_show, task_edit, task_delete, task_list,
    create, add, aide_show, aide_delete, write, aide_list, search,
    set_value, get_value, config_list, config_delete,
    reindex, match, clear,
):
    cli.add_command(command)

cli.add_command(verbosity)
cli.add_command(data_dir)
cli.add_command(completions)


if __name__ == "__main__":
    cli()
