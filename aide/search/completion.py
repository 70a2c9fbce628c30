"""Shell completion filtering: prefix matches first, fuzzy as a fallback."""

from click.shell_completion import CompletionItem

from .index import Index
from .matcher import Matcher


def complete_filtered_with_fuzzy(
    search_stem: str,
    index: Index,
    help_text: str = "",
    limit: int = 10,
) -> list[CompletionItem]:
    """Complete a partially typed name against an index.

    Names starting with the typed text (ignoring case) are offered in sorted
    order. If none do, the best fuzzy candidates at or above the acceptance
    threshold are offered instead, best first.
    """
    names = index.names()
    stem = search_stem.lower()

    prefix_matches = [n for n in names if n.lower().startswith(stem)]
    if prefix_matches or not search_stem:
        return [CompletionItem(n, help=help_text.format(name=n)) for n in prefix_matches]

    candidates = [c for c in Matcher(index).query(search_stem) if c.acceptable]
    return [
        CompletionItem(c.name, help=f"~{c.combined_score:.2f}")
        for c in candidates[:limit]
    ]
