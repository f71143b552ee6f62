"""Tests for AI recommendation orchestration."""

from unittest.mock import AsyncMock

import pytest

from cineai.clients.base import TransportError
from cineai.discovery.prompts import (
    ANALYSIS_SYSTEM_PROMPT,
    RECOMMENDATION_SYSTEM_PROMPT,
    THEMATIC_SYSTEM_PROMPT,
)
from cineai.models import MovieSummary
from cineai.services.recommendation import (
    CompletionOptions,
    RecommendationFailed,
    RecommendationService,
)
from cineai.services.search import InvalidQuery
from tests.fixtures.openai_responses import (
    ANALYSIS_TEXT,
    NO_MARKER_TEXT,
    RECOMMENDATION_PROSE,
    RECOMMENDATION_TEXT,
    THEMATIC_TEXT,
)
from tests.fixtures.tmdb_responses import movie_payload

INCEPTION = MovieSummary.model_validate(movie_payload(27205, "Inception"))


@pytest.fixture
def completion():
    client = AsyncMock()
    client.complete.return_value = RECOMMENDATION_TEXT
    return client


@pytest.fixture
def metadata():
    client = AsyncMock()

    async def lookup(title):
        if title == "Paprika":
            return None
        return MovieSummary.model_validate(movie_payload(abs(hash(title)) % 100000, title))

    client.search_movies_by_title.side_effect = lookup
    return client


@pytest.fixture
def service(completion, metadata):
    return RecommendationService(completion, metadata)


class TestRecommend:
    @pytest.mark.asyncio
    async def test_recommend_parses_and_resolves_titles(self, service, completion, metadata):
        result = await service.recommend(INCEPTION)

        assert result.text == RECOMMENDATION_PROSE
        assert result.titles == ["The Matrix", "Memento", "Shutter Island", "Paprika", "Dark City"]
        assert [movie.title for movie in result.movies] == ["The Matrix", "Memento", "Shutter Island", "Dark City"]
        assert metadata.search_movies_by_title.await_count == 5

        args, kwargs = completion.complete.call_args
        assert args[0] == RECOMMENDATION_SYSTEM_PROMPT
        assert 'Based on the movie "Inception" (2010)' in args[1]
        assert kwargs == {"max_tokens": 800, "temperature": 0.7}

    @pytest.mark.asyncio
    async def test_recommend_passes_preferences(self, service, completion):
        await service.recommend(INCEPTION, preferences="Nothing too long")

        prompt = completion.complete.call_args.args[1]
        assert "User preferences: Nothing too long" in prompt

    @pytest.mark.asyncio
    async def test_recommend_without_marker(self, service, completion, metadata):
        completion.complete.return_value = NO_MARKER_TEXT

        result = await service.recommend(INCEPTION)

        assert result.text == NO_MARKER_TEXT.strip()
        assert result.titles == []
        assert result.movies == []
        metadata.search_movies_by_title.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_completion_failure_raises(self, service, completion, metadata):
        completion.complete.side_effect = TransportError("OpenAI request failed: boom")

        with pytest.raises(RecommendationFailed, match="Failed to get AI recommendations"):
            await service.recommend(INCEPTION)
        metadata.search_movies_by_title.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_failed_lookups_are_skipped(self, service, metadata):
        async def lookup(title):
            if title == "Memento":
                raise TransportError("TMDB request /search/movie failed with status 503")
            return MovieSummary.model_validate(movie_payload(1, title))

        metadata.search_movies_by_title.side_effect = lookup

        result = await service.recommend(INCEPTION)

        assert [movie.title for movie in result.movies] == [
            "The Matrix",
            "Shutter Island",
            "Paprika",
            "Dark City",
        ]

    @pytest.mark.asyncio
    async def test_custom_completion_options(self, completion, metadata):
        service = RecommendationService(
            completion, metadata, recommendation=CompletionOptions(max_tokens=400, temperature=0.2)
        )

        await service.recommend(INCEPTION)

        assert completion.complete.call_args.kwargs == {"max_tokens": 400, "temperature": 0.2}


class TestRecommendThematic:
    @pytest.mark.asyncio
    async def test_thematic_uses_theme_template(self, service, completion):
        completion.complete.return_value = THEMATIC_TEXT

        result = await service.recommend_thematic("movies that make you think")

        args, kwargs = completion.complete.call_args
        assert args[0] == THEMATIC_SYSTEM_PROMPT
        assert '"movies that make you think"' in args[1]
        assert kwargs == {"max_tokens": 500, "temperature": 0.7}
        assert len(result.titles) == 10
        assert len(result.movies) == 10

    @pytest.mark.asyncio
    async def test_custom_prompt_replaces_template(self, service, completion):
        completion.complete.return_value = THEMATIC_TEXT

        await service.recommend_thematic("ignored", custom_prompt="List heist films. MOVIE_TITLES: ...")

        assert completion.complete.call_args.args[1] == "List heist films. MOVIE_TITLES: ..."

    @pytest.mark.asyncio
    async def test_custom_prompt_does_not_replace_theme(self, service, completion):
        with pytest.raises(InvalidQuery, match="Theme is required"):
            await service.recommend_thematic("", custom_prompt="Find heist films")
        completion.complete.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_blank_theme_is_rejected(self, service, completion):
        with pytest.raises(InvalidQuery, match="Theme is required"):
            await service.recommend_thematic("   ")
        completion.complete.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_thematic_failure_raises(self, service, completion):
        completion.complete.side_effect = TransportError("OpenAI response did not include any choices")

        with pytest.raises(RecommendationFailed, match="Failed to get thematic recommendations"):
            await service.recommend_thematic("heists")


class TestAnalyze:
    @pytest.mark.asyncio
    async def test_analyze_returns_trimmed_text(self, service, completion, metadata):
        completion.complete.return_value = ANALYSIS_TEXT

        analysis = await service.analyze(INCEPTION)

        assert analysis == ANALYSIS_TEXT.strip()
        args, kwargs = completion.complete.call_args
        assert args[0] == ANALYSIS_SYSTEM_PROMPT
        assert kwargs == {"max_tokens": 300, "temperature": 0.6}
        metadata.search_movies_by_title.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_analyze_failure_raises(self, service, completion):
        completion.complete.side_effect = TransportError("OpenAI request failed")

        with pytest.raises(RecommendationFailed, match="Failed to get AI analysis"):
            await service.analyze(INCEPTION)
