"""Per-entity-type indices owned by one command invocation or session."""

from enum import Enum
from typing import Callable, Iterable

from .index import Index, build


class EntityType(str, Enum):
    TASK = "task"
    AIDE = "aide"
    CONFIG = "config"


Loader = Callable[[], Iterable[str]]


class IndexRegistry:
    """Lazily builds one ``Index`` per entity type from the store listings.

    ``loaders`` maps each entity type to a callable returning the names
    currently stored for it. An index is built the first time it is asked
    for; after that, ``created``/``deleted`` keep it in step with the store.
    Notifications for an index that was never built are ignored, since the
    next build reads the store anyway.
    """

    def __init__(self, loaders: dict[EntityType, Loader]):
        self._loaders = dict(loaders)
        self._indices: dict[EntityType, Index] = {}

    def is_built(self, kind: EntityType) -> bool:
        return kind in self._indices

    def get(self, kind: EntityType) -> Index:
        kind = EntityType(kind)
        if kind not in self._indices:
            self._indices[kind] = build(self._loaders[kind](), kind=kind.value)
        return self._indices[kind]

    def created(self, kind: EntityType, name: str) -> None:
        index = self._indices.get(EntityType(kind))
        if index is not None:
            index.insert(name)

    def deleted(self, kind: EntityType, name: str) -> bool:
        index = self._indices.get(EntityType(kind))
        if index is None:
            return False
        return index.remove(name)

    def rebuild(self, kind: EntityType | None = None) -> list[EntityType]:
        """Recompute cached vectors; builds indices that were not built yet."""
        kinds = [EntityType(kind)] if kind is not None else list(self._loaders)
        for k in kinds:
            if k in self._indices:
                self._indices[k].rebuild()
            else:
                self.get(k)
        return kinds

    def discard(self) -> None:
        """Forget every built index (e.g. after the store was cleared)."""
        self._indices.clear()
