"""Tests for candidate ranking."""

import math

import pytest

from aide.search.index import Index, build
from aide.search.matcher import (
    ACCEPTANCE_THRESHOLD,
    Candidate,
    Matcher,
    _rank_key,
    combine,
)

# databse_url against {database_url, api_endpoint, debug_mode}:
# query idf: databse (df 0) = ln(4/1) + 1, url (df 1) = ln(4/2) + 1
IDF_UNKNOWN = math.log(4) + 1
IDF_ONCE = math.log(2) + 1
DATABSE_URL_TFIDF = IDF_ONCE ** 2 / (
    math.sqrt(IDF_UNKNOWN ** 2 + IDF_ONCE ** 2) * math.sqrt(2) * IDF_ONCE
)


class TestScenarios:
    def test_misspelled_config_key(self, config_index):
        candidates = Matcher(config_index).query("databse_url")
        best = candidates[0]

        assert best.name == "database_url"
        assert best.tfidf_score == pytest.approx(DATABSE_URL_TFIDF)
        assert best.tfidf_score == pytest.approx(0.409179, abs=1e-6)
        assert best.string_score == pytest.approx(11 / 12)
        assert best.combined_score == pytest.approx(0.764420, abs=1e-6)
        assert [c.name for c in candidates if c.acceptable] == ["database_url"]

    def test_other_candidates_fall_below_threshold(self, config_index):
        scores = {c.name: c for c in Matcher(config_index).query("databse_url")}
        # no shared terms; 9 edits over 11 characters
        assert scores["debug_mode"].tfidf_score == 0.0
        assert scores["debug_mode"].combined_score == pytest.approx(0.7 * 2 / 11)
        assert scores["api_endpoint"].combined_score == 0.0

    def test_abbreviation_boundary(self):
        # no shared term; string similarity 4 edits over 8 characters
        best = Matcher(build(["commands"])).query("cmds")[0]
        assert best.name == "commands"
        assert best.tfidf_score == 0.0
        assert best.string_score == pytest.approx(0.5)
        assert best.combined_score == pytest.approx(0.35)
        assert best.combined_score >= ACCEPTANCE_THRESHOLD
        assert best.acceptable

    def test_nothing_close(self, config_index):
        candidates = Matcher(config_index).query("xyz123")
        assert len(candidates) == 3
        assert all(c.combined_score == 0.0 for c in candidates)
        assert Matcher(config_index).best("xyz123") is None


class TestRanking:
    def test_returns_every_document(self, config_index):
        names = [c.name for c in Matcher(config_index).query("debug")]
        assert sorted(names) == config_index.names()
        assert names[0] == "debug_mode"

    def test_sorted_best_first(self, config_index):
        scores = [c.combined_score for c in Matcher(config_index).query("api_endpont")]
        assert scores == sorted(scores, reverse=True)

    def test_full_tie_breaks_by_name(self):
        candidates = Matcher(build(["ba", "ab"])).query("a")
        assert [c.name for c in candidates] == ["ab", "ba"]
        assert candidates[0].combined_score == candidates[1].combined_score

    def test_tie_on_combined_prefers_string_score(self):
        a = Candidate("zeta", tfidf_score=1.0, string_score=0.2, combined_score=0.5)
        b = Candidate("alpha", tfidf_score=0.0, string_score=0.6, combined_score=0.5)
        assert sorted([b, a], key=_rank_key) == [b, a]
        assert sorted([a, b], key=_rank_key) == [b, a]

    def test_empty_index(self):
        assert Matcher(Index()).query("anything") == []
        assert Matcher(Index()).best("anything") is None

    def test_query_uses_current_vocabulary(self):
        index = Index()
        index.insert("database_url")
        index.insert("api_url")
        # database_url's cached vector predates api_url; the query does not
        stale = index.get("database_url").vector
        candidate = Matcher(index).query("database_url")[0]
        assert candidate.name == "database_url"
        assert candidate.string_score == 1.0
        assert stale == index.get("database_url").vector


def test_combine_weights():
    assert combine(1.0, 0.0) == pytest.approx(0.3)
    assert combine(0.0, 1.0) == pytest.approx(0.7)
    assert combine(1.0, 1.0) == pytest.approx(1.0)
