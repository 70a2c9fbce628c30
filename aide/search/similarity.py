"""Character-level similarity between two names."""

from rapidfuzz.distance import Levenshtein

from .tokenize import normalize


def similarity(a: str, b: str) -> float:
    """Normalized Levenshtein similarity in [0, 1].

    1.0 when both names are equal ignoring case, 0.0 when every character
    has to be edited. Two empty strings are identical.
    """
    return Levenshtein.normalized_similarity(normalize(a), normalize(b))
