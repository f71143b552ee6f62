"""Tests for completion prompt templates."""

from cineai.discovery.prompts import (
    build_analysis_prompt,
    build_recommendation_prompt,
    build_thematic_prompt,
)
from cineai.models import MovieSummary


def _movie(**overrides):
    data = {"id": 27205, "title": "Inception", "overview": "A thief who steals secrets.", "release_date": "2010-07-15"}
    data.update(overrides)
    return MovieSummary.model_validate(data)


class TestRecommendationPrompt:
    def test_includes_title_year_and_overview(self):
        prompt = build_recommendation_prompt(_movie())

        assert 'Based on the movie "Inception" (2010)' in prompt
        assert '"A thief who steals secrets."' in prompt
        assert "recommend 5 similar movies" in prompt
        assert 'add a line starting with "MOVIE_TITLES:"' in prompt
        assert "User preferences" not in prompt

    def test_omits_unknown_year(self):
        prompt = build_recommendation_prompt(_movie(release_date=""))

        assert 'Based on the movie "Inception" with' in prompt

    def test_includes_preferences(self):
        prompt = build_recommendation_prompt(_movie(), preferences="  less violence ")

        assert "User preferences: less violence" in prompt

    def test_blank_preferences_are_ignored(self):
        assert "User preferences" not in build_recommendation_prompt(_movie(), preferences="   ")


class TestThematicPrompt:
    def test_asks_for_ten_titles(self):
        prompt = build_thematic_prompt(" heist movies with a twist ")

        assert 'Find 10 movies that match this theme or concept: "heist movies with a twist".' in prompt
        assert "just the 10 movie titles" in prompt


class TestAnalysisPrompt:
    def test_mentions_title_and_length(self):
        prompt = build_analysis_prompt(_movie())

        assert 'Analyze the movie "Inception"' in prompt
        assert "max 200 words" in prompt
