"""Tests for search query classification."""

import pytest

from cineai.discovery.classifier import (
    THEMATIC_KEYWORDS,
    classify,
    has_actor_pattern,
    has_thematic_keyword,
    is_thematic,
)
from cineai.models import QueryKind


class TestClassify:
    """Test thematic versus direct routing."""

    @pytest.mark.parametrize(
        "query",
        [
            "movies that make you think",
            "romantic comedies",
            "Funny movies",
            "SCARY films about ghosts",
            "time travel",
            "feel-good classics",
        ],
    )
    def test_thematic_queries(self, query):
        assert classify(query) is QueryKind.THEMATIC

    @pytest.mark.parametrize("query", ["Oppenheimer", "Inception", "Jaws", "The Godfather"])
    def test_direct_queries(self, query):
        assert classify(query) is QueryKind.DIRECT

    def test_actor_phrasing_is_thematic(self):
        assert has_actor_pattern("eddie murphy comedies")
        assert classify("eddie murphy comedies") is QueryKind.THEMATIC

    def test_surname_pattern_is_thematic(self):
        assert has_actor_pattern("will smith classics")
        assert is_thematic("will smith classics")

    def test_keyword_match_is_substring(self):
        # "Love Actually" is a title, but contains "love"
        assert has_thematic_keyword("Love Actually")
        assert classify("Love Actually") is QueryKind.THEMATIC

    def test_keyword_match_ignores_case(self):
        assert has_thematic_keyword("HORROR")

    def test_plain_title_has_no_keyword(self):
        assert not has_thematic_keyword("Oppenheimer")
        assert not has_actor_pattern("Oppenheimer")
        assert not is_thematic("Oppenheimer")

    def test_keywords_are_lowercase(self):
        assert all(keyword == keyword.lower() for keyword in THEMATIC_KEYWORDS)
