"""TF-IDF weighting and cosine similarity over sparse term vectors.

Vectors are plain ``dict[str, float]`` maps from term to weight. Term
frequency is the raw count and inverse document frequency uses add-one
smoothing::

    idf(t) = ln((N + 1) / (df(t) + 1)) + 1

so a term present in every document still carries a positive weight and a
term unknown to the vocabulary (df = 0) never divides by zero.
"""

import math
from typing import Protocol

from .errors import IndexCorruptionError


class Vocabulary(Protocol):
    def document_frequency(self, term: str) -> int: ...

    def total_documents(self) -> int: ...


def tf(count: int) -> float:
    return float(count)


def idf(document_frequency: int, total_documents: int) -> float:
    if document_frequency < 0 or total_documents < 0:
        raise IndexCorruptionError(
            f"negative frequency (df={document_frequency}, N={total_documents})"
        )
    return math.log((total_documents + 1) / (document_frequency + 1)) + 1.0


def vectorize(term_counts: dict[str, int], vocabulary: Vocabulary) -> dict[str, float]:
    """Weight a term-frequency map against the current vocabulary.

    Terms with a zero count contribute nothing.
    """
    total = vocabulary.total_documents()
    vector = {}
    for term, count in term_counts.items():
        if count <= 0:
            continue
        vector[term] = tf(count) * idf(vocabulary.document_frequency(term), total)
    return vector


def norm(vector: dict[str, float]) -> float:
    return math.sqrt(sum(w * w for w in vector.values()))


def cosine(a: dict[str, float], b: dict[str, float]) -> float:
    """Cosine similarity of two non-negative sparse vectors, in [0, 1].

    Returns 0.0 when either vector has no weight.
    """
    for vector in (a, b):
        if any(w < 0 for w in vector.values()):
            raise IndexCorruptionError("vector has a negative weight")

    norm_a = norm(a)
    norm_b = norm(b)
    if norm_a == 0.0 or norm_b == 0.0:
        return 0.0

    # Iterate over the smaller vector
    if len(a) > len(b):
        a, b = b, a
    dot = sum(w * b.get(term, 0.0) for term, w in a.items())
    return min(1.0, dot / (norm_a * norm_b))
