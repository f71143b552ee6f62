from __future__ import annotations

from cineai.clients.base import TimeWindow
from cineai.clients.tmdb import TMDBClient
from cineai.models import MovieDetails, MovieSummary


class CatalogService:
    """Browsing operations that map directly onto TMDB endpoints."""

    def __init__(self, client: TMDBClient) -> None:
        self._client = client

    async def trending(self, window: TimeWindow = "week") -> list[MovieSummary]:
        """Default listing shown when there is no search query."""
        page = await self._client.get_trending(window)
        return list(page.results)

    async def popular(self, page: int = 1) -> list[MovieSummary]:
        result = await self._client.get_popular(page)
        return list(result.results)

    async def details(self, movie_id: int) -> MovieDetails:
        return await self._client.get_movie_details(movie_id)

    async def similar(self, movie_id: int) -> list[MovieSummary]:
        page = await self._client.get_similar(movie_id)
        return list(page.results)

    async def provider_recommendations(self, movie_id: int, *, limit: int = 6) -> list[MovieSummary]:
        page = await self._client.get_recommendations(movie_id)
        return list(page.results[:limit])

    async def find_by_title(self, title: str) -> MovieSummary | None:
        return await self._client.search_movies_by_title(title)


__all__ = ["CatalogService"]
