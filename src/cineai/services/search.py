"""Intelligent search: routes a query to a direct lookup or a curated theme."""

from __future__ import annotations

import logging

from cineai.clients.base import MetadataClient, TransportError
from cineai.discovery.classifier import classify
from cineai.discovery.themes import resolve_curated_titles
from cineai.models import MovieSummary, QueryKind, SearchResult
from cineai.services.resolution import resolve_titles

logger = logging.getLogger(__name__)


class InvalidQuery(ValueError):
    """Raised for blank search input; callers should show a default listing instead."""


class SearchFailed(RuntimeError):
    """Raised when the metadata provider cannot answer a search."""


class SearchService:
    """Coordinates query classification, curated themes and TMDB lookups."""

    def __init__(self, client: MetadataClient, *, debug: bool = False) -> None:
        self._client = client
        self._debug = debug

    async def search(self, query: str) -> SearchResult:
        if not query or not query.strip():
            raise InvalidQuery("Search query must not be blank")

        kind = classify(query)
        if self._debug:
            logger.info(f"[SEARCH] {query!r} classified as {kind.value}")

        if kind is QueryKind.DIRECT:
            movies = await self._direct(query, "Failed to search movies. Please try again.")
            return SearchResult(query=query, kind=kind, movies=movies)

        titles = resolve_curated_titles(query)
        if self._debug:
            logger.info(f"[SEARCH] Curated titles: {', '.join(titles)}")

        movies = await resolve_titles(self._client, titles, debug=self._debug, log_prefix="[SEARCH]")
        if movies:
            if self._debug:
                logger.info(f"[SEARCH] Resolved {len(movies)}/{len(titles)} curated titles")
            return SearchResult(query=query, kind=kind, movies=movies)

        logger.warning(f"[SEARCH] No curated titles resolved for {query!r}, falling back to direct search")
        movies = await self._direct(query, _thematic_miss_message(query))
        return SearchResult(query=query, kind=kind, movies=movies, used_fallback=True)

    async def _direct(self, query: str, failure_message: str) -> list[MovieSummary]:
        try:
            page = await self._client.search_movies(query)
        except TransportError as exc:
            raise SearchFailed(failure_message) from exc
        return list(page.results)


def no_results_message(result: SearchResult) -> str:
    """User-facing message for an empty result, worded by query kind."""
    if result.kind is QueryKind.THEMATIC:
        return _thematic_miss_message(result.query)
    return f'No movies found for "{result.query}". Try a different search term.'


def _thematic_miss_message(query: str) -> str:
    return (
        f'We couldn\'t find movies for "{query}". '
        "Try searching for a specific movie title or a different theme."
    )


__all__ = ["InvalidQuery", "SearchFailed", "SearchService", "no_results_message"]
