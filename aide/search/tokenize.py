"""Identifier tokenization shared by the index and the matcher."""

import re
from collections import Counter

_SPLIT_RE = re.compile(r"[\W_]+")


def normalize(name: str) -> str:
    """Case-insensitive form of a name, used for exact lookups and scoring."""
    return name.lower()


def tokenize(name: str) -> list[str]:
    """Split a name into lowercase terms.

    Any run of non-alphanumeric characters separates terms, so
    ``"Database_URL"``, ``"database-url"`` and ``"database url"`` all give
    ``["database", "url"]``. Order and duplicates are kept.
    """
    return [t for t in _SPLIT_RE.split(normalize(name)) if t]


def term_counts(name: str) -> dict[str, int]:
    """Raw term-frequency map of a name."""
    return dict(Counter(tokenize(name)))
