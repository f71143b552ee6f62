"""Tests for catalog browsing against a mocked TMDB API."""

import httpx
import pytest
import respx

from cineai.clients.tmdb import TMDBClient
from cineai.services.catalog import CatalogService
from tests.fixtures.tmdb_responses import (
    MOVIE_DETAILS_RESPONSE,
    RECOMMENDATIONS_RESPONSE,
    SEARCH_INCEPTION_RESPONSE,
    TRENDING_RESPONSE,
)

BASE_URL = "https://api.themoviedb.org/3"


@pytest.fixture
def catalog():
    return CatalogService(TMDBClient(api_key="test-api-key"))


class TestCatalogService:
    @pytest.mark.asyncio
    @respx.mock
    async def test_trending_defaults_to_week(self, catalog):
        route = respx.get(f"{BASE_URL}/trending/movie/week").mock(
            return_value=httpx.Response(200, json=TRENDING_RESPONSE)
        )

        movies = await catalog.trending()

        assert route.called
        assert [movie.title for movie in movies] == ["Oppenheimer", "Barbie", "Dune: Part Two"]

    @pytest.mark.asyncio
    @respx.mock
    async def test_provider_recommendations_are_limited(self, catalog):
        respx.get(f"{BASE_URL}/movie/27205/recommendations").mock(
            return_value=httpx.Response(200, json=RECOMMENDATIONS_RESPONSE)
        )

        movies = await catalog.provider_recommendations(27205)

        assert len(movies) == 6
        assert movies[0].title == "Recommended 0"

    @pytest.mark.asyncio
    @respx.mock
    async def test_details_and_similar(self, catalog):
        respx.get(f"{BASE_URL}/movie/27205").mock(
            return_value=httpx.Response(200, json=MOVIE_DETAILS_RESPONSE)
        )
        respx.get(f"{BASE_URL}/movie/27205/similar").mock(
            return_value=httpx.Response(200, json=RECOMMENDATIONS_RESPONSE)
        )

        details = await catalog.details(27205)
        similar = await catalog.similar(27205)

        assert details.imdb_id == "tt1375666"
        assert len(similar) == 8

    @pytest.mark.asyncio
    @respx.mock
    async def test_popular_and_find_by_title(self, catalog):
        respx.get(f"{BASE_URL}/movie/popular").mock(
            return_value=httpx.Response(200, json=TRENDING_RESPONSE)
        )
        respx.get(f"{BASE_URL}/search/movie").mock(
            return_value=httpx.Response(200, json=SEARCH_INCEPTION_RESPONSE)
        )

        popular = await catalog.popular()
        found = await catalog.find_by_title("Inception")

        assert len(popular) == 3
        assert found is not None
        assert found.id == 27205
