"""Ranking of indexed names against a typed query."""

from dataclasses import dataclass

from ..utils import log_debug
from .index import Index
from .similarity import similarity
from .tfidf import cosine, vectorize
from .tokenize import term_counts

TFIDF_WEIGHT = 0.3
STRING_WEIGHT = 0.7
ACCEPTANCE_THRESHOLD = 0.3  # Minimum combined score to suggest a name


@dataclass(frozen=True)
class Candidate:
    """Score of one indexed name for a query."""

    name: str
    tfidf_score: float
    string_score: float
    combined_score: float

    @property
    def acceptable(self) -> bool:
        return self.combined_score >= ACCEPTANCE_THRESHOLD


def combine(tfidf_score: float, string_score: float) -> float:
    return TFIDF_WEIGHT * tfidf_score + STRING_WEIGHT * string_score


def _rank_key(candidate: Candidate):
    return (-candidate.combined_score, -candidate.string_score, candidate.name)


class Matcher:
    """Scores every document of an index against a query."""

    def __init__(self, index: Index):
        self.index = index

    def score(self, raw_text: str, query_vector: dict[str, float], name: str) -> Candidate:
        doc = self.index.get(name)
        if doc is None:
            raise KeyError(name)
        tfidf_score = cosine(query_vector, doc.vector)
        string_score = similarity(raw_text, doc.name)
        return Candidate(
            name=doc.name,
            tfidf_score=tfidf_score,
            string_score=string_score,
            combined_score=combine(tfidf_score, string_score),
        )

    def query(self, raw_text: str) -> list[Candidate]:
        """Return every indexed name ranked best first.

        The query vector is weighted against the current vocabulary; document
        vectors are the cached ones. Ties on the combined score fall back to
        the string score, then to the name.
        """
        query_vector = vectorize(term_counts(raw_text), self.index)
        candidates = [self.score(raw_text, query_vector, name) for name in self.index.names()]
        candidates.sort(key=_rank_key)

        if candidates:
            best = candidates[0]
            log_debug(
                f"{self.index.kind or 'index'}: '{raw_text}' best '{best.name}' "
                f"combined={best.combined_score:.4f} tfidf={best.tfidf_score:.4f} "
                f"string={best.string_score:.4f} of {len(candidates)}"
            )
        return candidates

    def best(self, raw_text: str) -> Candidate | None:
        """Best candidate if it reaches the acceptance threshold."""
        candidates = self.query(raw_text)
        if candidates and candidates[0].acceptable:
            return candidates[0]
        return None
