from __future__ import annotations

from typing import Literal, Protocol

from cineai.models import MovieDetails, MoviePage, MovieSummary

TimeWindow = Literal["day", "week"]


class MetadataClient(Protocol):
    """Protocol for movie metadata lookups."""

    async def search_movies(self, query: str, page: int = 1) -> MoviePage:
        """Return the provider-ranked page of matches for a free-text query."""

    async def search_movies_by_title(self, title: str) -> MovieSummary | None:
        """Return the provider's top-ranked match for a title, if any."""

    async def get_movie_details(self, movie_id: int) -> MovieDetails:
        """Return the full record for a single movie."""

    async def get_trending(self, window: TimeWindow = "week") -> MoviePage:
        """Return trending movies for the given time window."""

    async def get_recommendations(self, movie_id: int) -> MoviePage:
        """Return the provider's own recommendations for a movie."""


class CompletionClient(Protocol):
    """Protocol for text completion providers."""

    async def complete(
        self,
        system_prompt: str,
        user_prompt: str,
        *,
        max_tokens: int,
        temperature: float,
    ) -> str:
        """Return the raw completion text."""


class TransportError(RuntimeError):
    """Raised when a provider request fails or returns an unusable payload."""


__all__ = ["CompletionClient", "MetadataClient", "TimeWindow", "TransportError"]
