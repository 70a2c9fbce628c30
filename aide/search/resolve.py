"""Exact / suggest-and-confirm resolution of a typed name.

``resolve`` never prompts: it returns ``Resolved`` for an exact match,
``Suggested`` when the best fuzzy candidate reaches the acceptance threshold,
and ``NotFound`` otherwise. A ``Suggested`` result is settled by the caller
with ``accept()`` or ``reject()`` once the user has answered.
"""

from dataclasses import dataclass
from typing import Callable, Union

from ..utils import log_debug
from .index import Index
from .matcher import Matcher


@dataclass(frozen=True)
class Resolved:
    name: str
    exact: bool = True


@dataclass(frozen=True)
class NotFound:
    query: str
    declined: str | None = None  # suggestion the user turned down


@dataclass(frozen=True)
class Suggested:
    query: str
    name: str
    combined_score: float

    def accept(self) -> Resolved:
        return Resolved(self.name, exact=False)

    def reject(self) -> NotFound:
        return NotFound(self.query, declined=self.name)


Resolution = Union[Resolved, Suggested, NotFound]


def resolve(index: Index, raw_text: str) -> Resolution:
    name = index.exact(raw_text)
    if name is not None:
        return Resolved(name)

    best = Matcher(index).best(raw_text)
    if best is None:
        log_debug(f"{index.kind or 'index'}: no candidate for '{raw_text}'")
        return NotFound(raw_text)
    return Suggested(raw_text, best.name, best.combined_score)


def resolve_interactive(
    index: Index,
    raw_text: str,
    confirm: Callable[[str, str], bool],
) -> Resolved | NotFound:
    """Run the whole protocol, asking confirm(query, suggestion) when needed."""
    result = resolve(index, raw_text)
    if isinstance(result, Suggested):
        if confirm(result.query, result.name):
            return result.accept()
        return result.reject()
    return result
