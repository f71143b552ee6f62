from __future__ import annotations

from dataclasses import dataclass

from cineai.clients.factory import build_completion_client, build_metadata_client
from cineai.clients.openai import OpenAICompletionClient
from cineai.clients.tmdb import TMDBClient
from cineai.config import Settings, SettingsError
from cineai.services.catalog import CatalogService
from cineai.services.recommendation import CompletionOptions, RecommendationService
from cineai.services.search import SearchService


@dataclass
class Services:
    """Services sharing one client per provider for the life of the process."""

    metadata: TMDBClient
    completion: OpenAICompletionClient | None
    catalog: CatalogService
    search: SearchService
    recommendations: RecommendationService | None

    def require_recommendations(self) -> RecommendationService:
        if self.recommendations is None:
            raise SettingsError("Missing OPENAI_API_KEY. Configure environment or TOML file.")
        return self.recommendations

    async def aclose(self) -> None:
        await self.metadata.close()
        if self.completion is not None:
            await self.completion.close()


def build_services(settings: Settings, *, debug: bool = False) -> Services:
    """Wire clients and services from configuration.

    TMDB is mandatory. The completion client is only built when an OpenAI key
    is configured, so browsing and search keep working without one.
    """
    settings.require_tmdb()
    # Nothing may raise once the TMDB client exists
    completion = build_completion_client(settings, debug=debug) if settings.openai_api_key else None
    metadata = build_metadata_client(settings)

    recommendations = None
    if completion is not None:
        recommendations = RecommendationService(
            completion,
            metadata,
            recommendation=CompletionOptions(
                settings.recommendation_max_tokens, settings.recommendation_temperature
            ),
            thematic=CompletionOptions(settings.thematic_max_tokens, settings.thematic_temperature),
            analysis=CompletionOptions(settings.analysis_max_tokens, settings.analysis_temperature),
            debug=debug,
        )

    return Services(
        metadata=metadata,
        completion=completion,
        catalog=CatalogService(metadata),
        search=SearchService(metadata, debug=debug),
        recommendations=recommendations,
    )


__all__ = ["Services", "build_services"]
