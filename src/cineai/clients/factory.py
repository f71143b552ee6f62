from __future__ import annotations

from cineai.clients.openai import OpenAICompletionClient
from cineai.clients.tmdb import TMDBClient
from cineai.config import Settings


def build_metadata_client(settings: Settings) -> TMDBClient:
    """Construct the TMDB client from configuration."""
    settings.require_tmdb()
    return TMDBClient(
        api_key=settings.tmdb_api_key or "",
        base_url=settings.tmdb_base_url,
        language=settings.tmdb_language,
        timeout=settings.request_timeout,
    )


def build_completion_client(settings: Settings, debug: bool = False) -> OpenAICompletionClient:
    """Construct the completion client from configuration."""
    settings.require_openai()
    return OpenAICompletionClient(
        api_key=settings.openai_api_key or "",
        model=settings.openai_model,
        base_url=settings.openai_base_url,
        timeout=settings.request_timeout,
        debug=debug,
    )


__all__ = ["build_completion_client", "build_metadata_client"]
