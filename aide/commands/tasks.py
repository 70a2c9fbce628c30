"""Task commands for the aide CLI."""

import click

from ..completions import complete_task_name, complete_task_status
from ..schema import DEFAULT_PRIORITY, MAX_PRIORITY, MIN_PRIORITY, VALID_TASK_STATUS
from ..search import EntityType, Resolved, Suggested
from ..session import Session
from ..store import Task, timestamp
from ..utils import log_info, log_verbose, open_in_editor

PRIORITY = click.IntRange(MIN_PRIORITY, MAX_PRIORITY)


def _show_task(task: Task) -> None:
    log_info(click.style(task.name, bold=True))
    log_info(f"  Status:   {task.status}")
    log_info(f"  Priority: {task.priority}")
    log_info(f"  Created:  {task.created_at}")
    if task.log:
        log_info("  --- Task Log ---")
        for entry in task.log:
            log_info(f"  {entry}")


@click.command()
@click.argument("name", shell_complete=complete_task_name)
@click.option("--priority", "-p", type=PRIORITY, default=DEFAULT_PRIORITY, show_default=True,
              help="Priority for a new task (1 = highest)")
@click.pass_obj
def task(session: Session, name: str, priority: int):
    """Create a task, or open an existing one with a similar name.

    If a task with a close name exists you are asked whether you meant it;
    answering no creates NAME as a new task.

    Examples:
        aide task fix_login
        aide task write-report -p 1
    """
    if not name.strip():
        raise click.ClickException("Task name cannot be empty.")

    result = session.lookup(EntityType.TASK, name)
    existing = None
    if isinstance(result, Resolved):
        existing = result.name
    elif isinstance(result, Suggested) and session.confirm_suggestion(name, result.name):
        existing = result.name

    if existing is not None:
        log_info(f"Task '{existing}' already exists.")
        _show_task(session.store.get_task(existing))
        return

    session.store.put_task(Task(name=name, priority=priority))
    session.indexes.created(EntityType.TASK, name)
    log_info(click.style(f"Task '{name}' created.", fg="green"))


@click.command("task-status")
@click.argument("name", shell_complete=complete_task_name)
@click.argument("status", type=click.Choice(sorted(VALID_TASK_STATUS)),
                shell_complete=complete_task_status)
@click.pass_obj
def task_status(session: Session, name: str, status: str):
    """Change a task's status."""
    actual = session.resolve(EntityType.TASK, name)
    task = session.store.get_task(actual)
    task.status = status
    session.store.put_task(task)
    log_info(f"Task '{actual}' status updated to '{status}'")


@click.command("task-priority")
@click.argument("name", shell_complete=complete_task_name)
@click.argument("priority", type=PRIORITY)
@click.pass_obj
def task_priority(session: Session, name: str, priority: int):
    """Change a task's priority (1 = highest, 5 = lowest)."""
    actual = session.resolve(EntityType.TASK, name)
    task = session.store.get_task(actual)
    task.priority = priority
    session.store.put_task(task)
    log_info(f"Task '{actual}' priority updated to {priority}")


@click.command("task-log")
@click.argument("name", shell_complete=complete_task_name)
@click.argument("text")
@click.pass_obj
def task_log(session: Session, name: str, text: str):
    """Append a timestamped entry to a task's log."""
    actual = session.resolve(EntityType.TASK, name)
    task = session.store.get_task(actual)
    task.log.append(f"[{timestamp()}] {text}")
    session.store.put_task(task)
    log_info(f"Log entry added to task '{actual}'")


@click.command("task-show")
@click.argument("name", shell_complete=complete_task_name)
@click.pass_obj
def task_show(session: Session, name: str):
    """Show a task and its log."""
    actual = session.resolve(EntityType.TASK, name)
    _show_task(session.store.get_task(actual))


@click.command("task-edit")
@click.argument("name", shell_complete=complete_task_name)
@click.pass_obj
def task_edit(session: Session, name: str):
    """Edit a task's log in your editor.

    The task is written to tasks/NAME.txt; lines below the
    "--- Task Log ---" marker are saved back as the log when the editor closes.
    """
    actual = session.resolve(EntityType.TASK, name)
    task = session.store.get_task(actual)
    file_path = session.store.write_task_file(task)

    log_verbose(f"Opening {file_path}")
    open_in_editor(file_path)

    log = session.store.read_task_log(actual)
    if log != task.log:
        task.log = log
        session.store.put_task(task)
        log_info(f"Task '{actual}' log updated ({len(log)} entries)")


@click.command("task-delete")
@click.argument("name", shell_complete=complete_task_name)
@click.option("--force", "-f", is_flag=True, help="Delete without confirmation")
@click.pass_obj
def task_delete(session: Session, name: str, force: bool):
    """Delete a task."""
    actual = session.resolve(EntityType.TASK, name)
    if not force and not click.confirm(f"Delete task '{actual}'?"):
        log_info("Cancelled.")
        return

    session.store.delete_task(actual)
    session.indexes.deleted(EntityType.TASK, actual)
    log_info(f"Deleted task '{actual}'")


@click.command("task-list")
@click.pass_obj
def task_list(session: Session):
    """List tasks by priority, then creation time."""
    tasks = session.store.list_tasks()
    if not tasks:
        log_info("No tasks yet. Create one with: aide task <name>")
        return

    log_info(f"{'Task':<30} {'Priority':<9} {'Status':<12} {'Created':<19}")
    log_info("-" * 72)
    for t in tasks:
        log_info(f"{t.name:<30} {t.priority:<9} {t.status:<12} {t.created_at:<19}")
    log_verbose(f"\nTotal: {len(tasks)} tasks")
