"""AI recommendations resolved against TMDB."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from cineai.clients.base import CompletionClient, MetadataClient, TransportError
from cineai.discovery.parsers import parse_completion
from cineai.discovery.prompts import (
    ANALYSIS_SYSTEM_PROMPT,
    RECOMMENDATION_SYSTEM_PROMPT,
    THEMATIC_SYSTEM_PROMPT,
    build_analysis_prompt,
    build_recommendation_prompt,
    build_thematic_prompt,
)
from cineai.models import MovieSummary, RecommendationResult
from cineai.services.resolution import resolve_titles
from cineai.services.search import InvalidQuery

logger = logging.getLogger(__name__)


class RecommendationFailed(RuntimeError):
    """Raised when the completion provider cannot produce recommendations."""


@dataclass(frozen=True)
class CompletionOptions:
    """Output length and sampling temperature for one kind of completion."""

    max_tokens: int
    temperature: float


class RecommendationService:
    """Builds prompts, calls the completion provider and resolves the titles it returns."""

    def __init__(
        self,
        completion: CompletionClient,
        metadata: MetadataClient,
        *,
        recommendation: CompletionOptions | None = None,
        thematic: CompletionOptions | None = None,
        analysis: CompletionOptions | None = None,
        debug: bool = False,
    ) -> None:
        self._completion = completion
        self._metadata = metadata
        self._recommendation = recommendation or CompletionOptions(800, 0.7)
        self._thematic = thematic or CompletionOptions(500, 0.7)
        self._analysis = analysis or CompletionOptions(300, 0.6)
        self._debug = debug

    async def recommend(
        self, movie: MovieSummary, preferences: str | None = None
    ) -> RecommendationResult:
        """Recommend movies similar to ``movie``, optionally steered by preferences."""
        if self._debug:
            logger.info(f"[RECOMMEND] Requesting recommendations for {movie.title} (tmdb:{movie.id})")

        prompt = build_recommendation_prompt(movie, preferences)
        content = await self._complete(
            RECOMMENDATION_SYSTEM_PROMPT,
            prompt,
            self._recommendation,
            failure="Failed to get AI recommendations",
        )
        return await self._resolve(content)

    async def recommend_thematic(
        self, theme: str, custom_prompt: str | None = None
    ) -> RecommendationResult:
        """Recommend movies for a theme; ``custom_prompt`` replaces the built-in template."""
        if not theme or not theme.strip():
            raise InvalidQuery("Theme is required")

        if custom_prompt and custom_prompt.strip():
            prompt = custom_prompt
        else:
            prompt = build_thematic_prompt(theme)

        if self._debug:
            logger.info(f"[RECOMMEND] Requesting thematic recommendations for {theme!r}")

        content = await self._complete(
            THEMATIC_SYSTEM_PROMPT,
            prompt,
            self._thematic,
            failure="Failed to get thematic recommendations",
        )
        return await self._resolve(content)

    async def analyze(self, movie: MovieSummary) -> str:
        """Short critical analysis of a movie's themes, craft and impact."""
        content = await self._complete(
            ANALYSIS_SYSTEM_PROMPT,
            build_analysis_prompt(movie),
            self._analysis,
            failure="Failed to get AI analysis",
        )
        return content.strip()

    async def _complete(
        self,
        system_prompt: str,
        prompt: str,
        options: CompletionOptions,
        *,
        failure: str,
    ) -> str:
        try:
            return await self._completion.complete(
                system_prompt,
                prompt,
                max_tokens=options.max_tokens,
                temperature=options.temperature,
            )
        except TransportError as exc:
            logger.error(f"[RECOMMEND] Completion request failed: {exc}")
            raise RecommendationFailed(failure) from exc

    async def _resolve(self, content: str) -> RecommendationResult:
        parsed = parse_completion(content)
        if not parsed.movie_titles:
            logger.warning("[RECOMMEND] Completion did not include a MOVIE_TITLES line")

        movies = await resolve_titles(
            self._metadata,
            parsed.movie_titles,
            debug=self._debug,
            log_prefix="[RECOMMEND]",
        )
        if self._debug:
            logger.info(
                f"[RECOMMEND] Resolved {len(movies)}/{len(parsed.movie_titles)} recommended titles"
            )
        return RecommendationResult(text=parsed.text, titles=parsed.movie_titles, movies=movies)


__all__ = ["CompletionOptions", "RecommendationFailed", "RecommendationService"]
