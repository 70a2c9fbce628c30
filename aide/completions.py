"""Shell completion functions for the aide CLI."""

from click.shell_completion import CompletionItem

from .config import get_data_dir
from .schema import VALID_TASK_STATUS
from .search import EntityType, build
from .search.completion import complete_filtered_with_fuzzy
from .store import Store, StoreError


def _complete_kind(kind: EntityType, incomplete: str, help_text: str) -> list:
    """Complete names of one entity type from the store on disk.

    Completion runs in its own process, before any command callback, so it
    reads the store and builds a throwaway index itself.
    """
    store = Store(get_data_dir())
    try:
        listing = {
            EntityType.TASK: store.task_names,
            EntityType.AIDE: store.aide_names,
            EntityType.CONFIG: store.config_keys,
        }[kind]()
    except StoreError:
        return []

    return complete_filtered_with_fuzzy(
        search_stem=incomplete,
        index=build(listing, kind=kind.value),
        help_text=help_text,
    )


def complete_task_name(ctx, param, incomplete: str) -> list:
    """Shell completion for task names."""
    return _complete_kind(EntityType.TASK, incomplete, "Task {name}")


def complete_aide_name(ctx, param, incomplete: str) -> list:
    """Shell completion for aide names."""
    return _complete_kind(EntityType.AIDE, incomplete, "Aide {name}")


def complete_config_key(ctx, param, incomplete: str) -> list:
    """Shell completion for configuration keys."""
    return _complete_kind(EntityType.CONFIG, incomplete, "Config {name}")


def complete_task_status(ctx, param, incomplete: str) -> list:
    """Shell completion for task status values."""
    return [
        CompletionItem(s)
        for s in sorted(VALID_TASK_STATUS)
        if not incomplete or s.startswith(incomplete)
    ]
