"""Name resolution for tasks, aides and configuration keys.

This package contains:
- tokenize.py: Name tokenization
- similarity.py: Character-level similarity
- index.py: Incremental vocabulary and document store
- tfidf.py: TF-IDF weighting and cosine similarity
- matcher.py: Candidate ranking
- resolve.py: Exact / suggest-and-confirm protocol
- registry.py: Per-entity-type index ownership
- completion.py: Shell completion filtering
"""

from .errors import IndexCorruptionError, SearchError
from .index import Document, Index, build
from .matcher import ACCEPTANCE_THRESHOLD, Candidate, Matcher
from .registry import EntityType, IndexRegistry
from .resolve import NotFound, Resolved, Suggested, resolve, resolve_interactive
from .similarity import similarity
from .tfidf import cosine, vectorize
from .tokenize import tokenize

__all__ = [
    "ACCEPTANCE_THRESHOLD",
    "Candidate",
    "Document",
    "EntityType",
    "Index",
    "IndexCorruptionError",
    "IndexRegistry",
    "Matcher",
    "NotFound",
    "Resolved",
    "SearchError",
    "Suggested",
    "build",
    "cosine",
    "resolve",
    "resolve_interactive",
    "similarity",
    "tokenize",
    "vectorize",
]
