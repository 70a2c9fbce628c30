"""Command modules for the aide CLI."""

from .tasks import (
    task, task_status, task_priority, task_log, task_show, task_edit, task_delete, task_list,
)
from .aides import create, add, aide_show, aide_delete, write, aide_list, search
from .settings import set_value, get_value, config_list, config_delete
from .maintenance import reindex, match, clear, verbosity, data_dir, completions

__all__ = [
    "task",
    "task_status",
    "task_priority",
    "task_log",
    "task_show",
    "task_edit",
    "task_delete",
    "task_list",
    "create",
    "add",
    "aide_show",
    "aide_delete",
    "write",
    "aide_list",
    "search",
    "set_value",
    "get_value",
    "config_list",
    "config_delete",
    "reindex",
    "match",
    "clear",
    "verbosity",
    "data_dir",
    "completions",
]
