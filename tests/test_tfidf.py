"""Tests for TF-IDF weighting and cosine similarity."""

import math

import pytest

from aide.search.errors import IndexCorruptionError
from aide.search.tfidf import cosine, idf, tf, vectorize


class FakeVocabulary:
    def __init__(self, frequencies: dict[str, int], total: int):
        self.frequencies = frequencies
        self.total = total

    def document_frequency(self, term):
        return self.frequencies.get(term, 0)

    def total_documents(self):
        return self.total


class TestWeights:
    def test_tf_is_raw_count(self):
        assert tf(0) == 0.0
        assert tf(3) == 3.0

    def test_idf_smoothing(self):
        assert idf(1, 3) == pytest.approx(math.log(2) + 1)

    def test_idf_positive_for_term_in_every_document(self):
        assert idf(4, 4) == pytest.approx(1.0)

    def test_idf_unknown_term(self):
        assert idf(0, 3) == pytest.approx(math.log(4) + 1)

    def test_idf_empty_collection(self):
        assert idf(0, 0) == pytest.approx(1.0)

    def test_idf_rejects_negative_frequency(self):
        with pytest.raises(IndexCorruptionError):
            idf(-1, 3)

    def test_rare_terms_weigh_more(self):
        assert idf(1, 10) > idf(5, 10)


class TestVectorize:
    def test_weights(self):
        vocab = FakeVocabulary({"database": 1, "url": 2}, total=3)
        vector = vectorize({"database": 1, "url": 2}, vocab)
        assert vector["database"] == pytest.approx(math.log(4 / 2) + 1)
        assert vector["url"] == pytest.approx(2 * (math.log(4 / 3) + 1))

    def test_zero_counts_contribute_nothing(self):
        vocab = FakeVocabulary({"a": 1}, total=1)
        assert vectorize({"a": 0}, vocab) == {}

    def test_empty(self):
        assert vectorize({}, FakeVocabulary({}, 0)) == {}


class TestCosine:
    def test_self_similarity(self):
        v = {"database": 1.693, "url": 0.4, "x": 2.0}
        assert cosine(v, v) == pytest.approx(1.0)

    def test_never_exceeds_one(self):
        v = {"a": 0.1, "b": 0.7, "c": 1e-9}
        assert cosine(v, v) <= 1.0

    def test_zero_vector(self):
        v = {"a": 1.0}
        assert cosine({}, v) == 0.0
        assert cosine(v, {}) == 0.0
        assert cosine({"a": 0.0}, v) == 0.0

    def test_disjoint(self):
        assert cosine({"a": 1.0}, {"b": 1.0}) == 0.0

    def test_symmetric(self):
        a = {"x": 1.0, "y": 2.0}
        b = {"y": 1.0, "z": 3.0, "w": 0.5}
        assert cosine(a, b) == pytest.approx(cosine(b, a))

    def test_partial_overlap(self):
        assert cosine({"a": 1.0, "b": 1.0}, {"a": 1.0}) == pytest.approx(1 / math.sqrt(2))

    def test_negative_weight_is_corruption(self):
        with pytest.raises(IndexCorruptionError):
            cosine({"a": -1.0}, {"a": 1.0})
