"""Incremental per-entity-type index of names.

An ``Index`` keeps a vocabulary of document frequencies and, for every
indexed name, its term counts and a cached TF-IDF vector. Inserting or
removing a name touches only that name's terms: cached vectors of other
documents are never recomputed, so they reflect the document frequencies at
the time they were indexed until ``rebuild()`` is called explicitly.
"""

from collections import Counter
from dataclasses import dataclass, field

from ..utils import log_debug
from .errors import IndexCorruptionError
from .tfidf import vectorize
from .tokenize import normalize, term_counts


@dataclass
class Document:
    """One indexed name."""

    name: str
    term_counts: dict[str, int]
    vector: dict[str, float] = field(default_factory=dict)
    generation: int = 0  # index generation the vector was computed at


class Index:
    """Vocabulary and documents for a single entity type."""

    def __init__(self, kind: str = ""):
        self.kind = kind
        self.generation = 0
        self._vocabulary: dict[str, int] = {}
        self._documents: dict[str, Document] = {}
        self._folded: dict[str, set[str]] = {}
        self._total = 0

    def __len__(self) -> int:
        return self._total

    def __contains__(self, name: str) -> bool:
        return name in self._documents

    def __repr__(self) -> str:
        return f"Index(kind={self.kind!r}, documents={self._total}, terms={len(self._vocabulary)})"

    # Read accessors

    def document_frequency(self, term: str) -> int:
        return self._vocabulary.get(term, 0)

    def total_documents(self) -> int:
        return self._total

    def vocabulary(self) -> dict[str, int]:
        """Copy of the term -> document frequency map."""
        return dict(self._vocabulary)

    def names(self) -> list[str]:
        return sorted(self._documents)

    def documents(self) -> list[Document]:
        return list(self._documents.values())

    def get(self, name: str) -> Document | None:
        return self._documents.get(name)

    def exact(self, raw_text: str) -> str | None:
        """Return the indexed name equal to raw_text, ignoring case.

        A case-sensitive hit wins; otherwise the first of the names that
        fold to the same text, in sorted order.
        """
        if raw_text in self._documents:
            return raw_text
        matches = self._folded.get(normalize(raw_text))
        return min(matches) if matches else None

    # Mutation

    def insert(self, name: str) -> str:
        """Index a name and return its identifier (the name itself).

        Increments the document frequency of each distinct term and caches
        the document's vector against the vocabulary as it stands now.
        Inserting a name that is already indexed changes nothing.
        """
        if name in self._documents:
            log_debug(f"{self.kind or 'index'}: '{name}' already indexed")
            return name

        counts = term_counts(name)
        for term in counts:
            self._vocabulary[term] = self._vocabulary.get(term, 0) + 1
        self._total += 1
        self.generation += 1

        doc = Document(name=name, term_counts=counts, generation=self.generation)
        doc.vector = vectorize(counts, self)
        self._documents[name] = doc
        self._folded.setdefault(normalize(name), set()).add(name)

        log_debug(f"{self.kind or 'index'}: inserted '{name}' terms={sorted(counts)}")
        return name

    def remove(self, name: str) -> bool:
        """Drop a name from the index. Returns False if it was not indexed."""
        doc = self._documents.pop(name, None)
        if doc is None:
            return False

        for term in doc.term_counts:
            df = self._vocabulary.get(term, 0) - 1
            if df > 0:
                self._vocabulary[term] = df
            else:
                self._vocabulary.pop(term, None)

        folded = normalize(name)
        self._folded[folded].discard(name)
        if not self._folded[folded]:
            del self._folded[folded]

        self._total -= 1
        self.generation += 1

        log_debug(f"{self.kind or 'index'}: removed '{name}'")
        return True

    # Maintenance

    def rebuild(self) -> None:
        """Recompute every cached vector from the current vocabulary."""
        for doc in self._documents.values():
            missing = [t for t in doc.term_counts if t not in self._vocabulary]
            if missing:
                raise IndexCorruptionError(
                    f"'{doc.name}' has terms missing from the vocabulary: {missing}"
                )
            doc.vector = vectorize(doc.term_counts, self)
            doc.generation = self.generation
        log_debug(f"{self.kind or 'index'}: rebuilt {self._total} vectors")

    def stale_names(self) -> list[str]:
        """Names whose cached vector predates the latest insert or remove."""
        return sorted(
            doc.name for doc in self._documents.values() if doc.generation < self.generation
        )

    def check_invariants(self) -> None:
        """Verify document frequencies and N against the stored documents."""
        expected = Counter()
        for doc in self._documents.values():
            expected.update(doc.term_counts.keys())

        if dict(expected) != self._vocabulary:
            raise IndexCorruptionError(
                f"document frequencies out of sync for {self.kind or 'index'}"
            )
        if self._total != len(self._documents):
            raise IndexCorruptionError(
                f"document count {self._total} != {len(self._documents)} stored documents"
            )


def build(names, kind: str = "") -> Index:
    """Bulk-load an index from the names currently in the store.

    Vectors are recomputed once at the end so a freshly built index has no
    stale entries.
    """
    index = Index(kind)
    for name in names:
        index.insert(name)
    index.rebuild()
    log_debug(f"{kind or 'index'}: built with {len(index)} documents")
    return index
