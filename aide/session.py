"""State owned by a single CLI invocation: the store and its name indices."""

import click

from .search import EntityType, IndexRegistry, Resolved, resolve, resolve_interactive
from .store import Store
from .utils import log_info

LABELS = {
    EntityType.TASK: "Task",
    EntityType.AIDE: "Aide",
    EntityType.CONFIG: "Config key",
}


class Session:
    """Store plus lazily built per-entity-type indices.

    Created by the ``aide`` group callback and handed to every command via
    ``click.pass_obj``; nothing outlives the invocation.
    """

    def __init__(self, store: Store, assume_yes: bool = False):
        self.store = store
        self.assume_yes = assume_yes
        self.indexes = IndexRegistry({
            EntityType.TASK: store.task_names,
            EntityType.AIDE: store.aide_names,
            EntityType.CONFIG: store.config_keys,
        })

    def confirm_suggestion(self, query: str, suggestion: str) -> bool:
        """Ask whether the user meant `suggestion` when typing `query`."""
        if self.assume_yes:
            log_info(f"'{query}' not found. Using '{suggestion}'.")
            return True
        return click.confirm(f"'{query}' not found. Did you mean '{suggestion}'?", default=False)

    def lookup(self, kind: EntityType, raw_text: str):
        """Resolve without prompting (Resolved, Suggested or NotFound)."""
        return resolve(self.indexes.get(kind), raw_text)

    def resolve(self, kind: EntityType, raw_text: str) -> str:
        """Resolve a typed name to a stored one, prompting on a fuzzy match.

        Raises click.ClickException when nothing matches or the suggestion
        is declined, so the calling command aborts before changing anything.
        """
        result = resolve_interactive(self.indexes.get(kind), raw_text, self.confirm_suggestion)
        if isinstance(result, Resolved):
            return result.name
        if result.declined is not None:
            raise click.ClickException("Operation cancelled.")
        raise click.ClickException(f"{LABELS[kind]} '{raw_text}' not found.")
