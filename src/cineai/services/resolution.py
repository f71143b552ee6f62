"""Resolution of free-text titles to TMDB records."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from cineai.clients.base import MetadataClient
from cineai.models import MovieSummary

logger = logging.getLogger(__name__)


async def resolve_titles(
    client: MetadataClient,
    titles: Iterable[str],
    *,
    debug: bool = False,
    log_prefix: str = "[RESOLVE]",
) -> list[MovieSummary]:
    """Look up each title in order, keeping the provider's top match.

    Lookups run one at a time. Titles that fail or have no match are
    skipped; the returned list preserves the order of the input titles.
    """
    movies: list[MovieSummary] = []
    for title in titles:
        try:
            movie = await client.search_movies_by_title(title)
        except Exception as exc:
            logger.warning(f"{log_prefix} Could not look up {title!r}: {exc}")
            continue

        if movie is None:
            if debug:
                logger.info(f"{log_prefix} Movie not found: {title}")
            continue

        if debug:
            logger.info(f"{log_prefix} {title} -> {movie.title} (tmdb:{movie.id})")
        movies.append(movie)
    return movies


__all__ = ["resolve_titles"]
