from __future__ import annotations

from collections.abc import Mapping
from contextlib import asynccontextmanager
from typing import Any

import httpx
from pydantic import ValidationError

from cineai.clients.base import TimeWindow, TransportError
from cineai.models import MovieDetails, MoviePage, MovieSummary

DEFAULT_BASE_URL = "https://api.themoviedb.org/3"
DEFAULT_TIMEOUT = 20.0
USER_AGENT = "cineai/0.1.0"


class TMDBClient:
    """Thin asynchronous wrapper around the TMDB v3 API."""

    def __init__(
        self,
        api_key: str,
        *,
        base_url: str = DEFAULT_BASE_URL,
        language: str | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        if not api_key:
            raise TransportError("TMDB_API_KEY is required for the TMDB client")

        params: dict[str, str] = {"api_key": api_key}
        if language:
            params["language"] = language

        headers = {
            "User-Agent": USER_AGENT,
            "Accept": "application/json",
        }
        self._client = httpx.AsyncClient(
            base_url=base_url.rstrip("/"),
            params=params,
            headers=headers,
            timeout=timeout,
        )

    async def close(self) -> None:
        await self._client.aclose()

    async def search_movies(self, query: str, page: int = 1) -> MoviePage:
        payload = await self._get_json("/search/movie", {"query": query, "page": page})
        return _parse(MoviePage, payload)

    async def search_movies_by_title(self, title: str) -> MovieSummary | None:
        """Return the most relevant match for a title, or None when TMDB has none."""
        page = await self.search_movies(title, page=1)
        return page.results[0] if page.results else None

    async def get_movie_details(self, movie_id: int) -> MovieDetails:
        payload = await self._get_json(f"/movie/{movie_id}")
        return _parse(MovieDetails, payload)

    async def get_trending(self, window: TimeWindow = "week") -> MoviePage:
        if window not in ("day", "week"):
            raise ValueError(f"Unsupported trending window: {window!r}")
        payload = await self._get_json(f"/trending/movie/{window}")
        return _parse(MoviePage, payload)

    async def get_popular(self, page: int = 1) -> MoviePage:
        payload = await self._get_json("/movie/popular", {"page": page})
        return _parse(MoviePage, payload)

    async def get_recommendations(self, movie_id: int) -> MoviePage:
        payload = await self._get_json(f"/movie/{movie_id}/recommendations")
        return _parse(MoviePage, payload)

    async def get_similar(self, movie_id: int) -> MoviePage:
        payload = await self._get_json(f"/movie/{movie_id}/similar")
        return _parse(MoviePage, payload)

    async def _get_json(self, path: str, params: Mapping[str, Any] | None = None) -> Any:
        try:
            response = await self._client.get(path, params=params)
            response.raise_for_status()
            return response.json()
        except httpx.HTTPStatusError as exc:
            raise TransportError(
                f"TMDB request {path} failed with status {exc.response.status_code}",
            ) from exc
        except httpx.HTTPError as exc:
            raise TransportError(f"TMDB request {path} failed: {exc}") from exc
        except ValueError as exc:  # response was not JSON
            raise TransportError(f"TMDB request {path} returned invalid JSON") from exc

    async def __aenter__(self) -> TMDBClient:
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:  # type: ignore[override]
        await self.close()


@asynccontextmanager
async def tmdb_client(
    api_key: str,
    *,
    base_url: str = DEFAULT_BASE_URL,
    language: str | None = None,
    timeout: float = DEFAULT_TIMEOUT,
):
    client = TMDBClient(api_key=api_key, base_url=base_url, language=language, timeout=timeout)
    try:
        yield client
    finally:
        await client.close()


def _parse(model: type[Any], payload: Any) -> Any:
    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        raise TransportError(f"Unexpected TMDB payload for {model.__name__}: {exc}") from exc


__all__ = ["TMDBClient", "tmdb_client"]
