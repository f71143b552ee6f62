from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

import typer

from cineai import __version__
from cineai.clients.base import TransportError
from cineai.config import Settings, SettingsError, SettingsLoadResult, load_settings
from cineai.discovery.classifier import classify
from cineai.discovery.themes import match_theme
from cineai.models import MovieDetails, MovieSummary, QueryKind, RecommendationResult
from cineai.services import (
    InvalidQuery,
    RecommendationFailed,
    SearchFailed,
    Services,
    build_services,
    no_results_message,
)

T = TypeVar("T")

app = typer.Typer(
    add_completion=False,
    help="Search movies by title or theme and get AI-powered recommendations.",
)


@app.callback()
def _cli_entry(ctx: typer.Context) -> None:
    """Entrypoint for the cineai CLI."""
    ctx.obj = {} if ctx.obj is None else ctx.obj


@app.command()
def version() -> None:
    """Print the installed version."""
    typer.echo(__version__)


@app.command()
def trending(
    window: str = typer.Option("week", help="Trending window: day or week."),
    limit: int = typer.Option(20, help="Maximum number of movies to show.", min=1),
    debug: bool = typer.Option(False, help="Enable debug logging."),
) -> None:
    """Show trending movies."""
    if window not in ("day", "week"):
        typer.secho("Window must be 'day' or 'week'.", fg=typer.colors.RED)
        raise typer.Exit(code=2)

    services = _services_or_exit(debug=debug)
    try:
        movies = _run(services, lambda: services.catalog.trending(window))  # type: ignore[arg-type]
    except TransportError as exc:
        typer.secho(
            f"Failed to load trending movies. Please check your API configuration. ({exc})",
            fg=typer.colors.RED,
        )
        raise typer.Exit(code=1) from exc

    typer.secho(f"Trending this {window}", fg=typer.colors.CYAN)
    _render_movies(movies[:limit])


@app.command()
def search(
    query: str = typer.Argument("", help="Movie title or theme, e.g. 'movies that make you think'."),
    limit: int = typer.Option(20, help="Maximum number of movies to show.", min=1),
    debug: bool = typer.Option(False, help="Enable debug logging to see how the query is resolved."),
) -> None:
    """Search by title, or by theme for curated picks."""
    services = _services_or_exit(debug=debug)

    if not query.strip():
        # Blank query: show the default listing instead
        try:
            movies = _run(services, lambda: services.catalog.trending())
        except TransportError as exc:
            typer.secho(f"Failed to load trending movies: {exc}", fg=typer.colors.RED)
            raise typer.Exit(code=1) from exc
        typer.secho("Trending this week", fg=typer.colors.CYAN)
        _render_movies(movies[:limit])
        return

    try:
        result = _run(services, lambda: services.search.search(query))
    except SearchFailed as exc:
        typer.secho(str(exc), fg=typer.colors.RED)
        raise typer.Exit(code=1) from exc

    if result.is_empty:
        typer.secho(no_results_message(result), fg=typer.colors.YELLOW)
        return

    header = f"{len(result.movies)} results for {query!r} ({result.kind.value}"
    header += ", fell back to title search)" if result.used_fallback else ")"
    typer.secho(header, fg=typer.colors.CYAN)
    _render_movies(result.movies[:limit])


@app.command(name="classify")
def classify_command(query: str = typer.Argument(..., help="Search string to classify.")) -> None:
    """Show whether a query is treated as a theme or a literal title."""
    kind = classify(query)
    typer.echo(f"{query!r}: {kind.value}")
    if kind is QueryKind.THEMATIC:
        theme = match_theme(query)
        typer.echo(f"curated list: {theme.name if theme else 'default'}")


@app.command()
def details(
    movie_id: int = typer.Argument(..., help="TMDB movie ID."),
    debug: bool = typer.Option(False, help="Enable debug logging."),
) -> None:
    """Show details and TMDB recommendations for a movie."""
    services = _services_or_exit(debug=debug)

    async def _load() -> tuple[MovieDetails, list[MovieSummary]]:
        movie = await services.catalog.details(movie_id)
        related = await services.catalog.provider_recommendations(movie_id)
        return movie, related

    try:
        movie, related = _run(services, _load)
    except TransportError as exc:
        typer.secho(str(exc), fg=typer.colors.RED)
        raise typer.Exit(code=1) from exc

    _render_details(movie)
    if related:
        typer.secho("More like this", fg=typer.colors.CYAN)
        _render_movies(related)


@app.command()
def recommend(
    title: str = typer.Argument(..., help="Title of a movie you enjoyed."),
    preferences: str | None = typer.Option(None, help="Extra viewer preferences."),
    debug: bool = typer.Option(False, help="Enable debug logging."),
) -> None:
    """Get AI recommendations similar to a movie."""
    services = _services_or_exit(debug=debug, require_openai=True)
    recommender = services.require_recommendations()

    async def _recommend() -> tuple[MovieSummary | None, RecommendationResult | None]:
        movie = await services.catalog.find_by_title(title)
        if movie is None:
            return None, None
        return movie, await recommender.recommend(movie, preferences)

    try:
        movie, result = _run(services, _recommend)
    except (TransportError, RecommendationFailed) as exc:
        typer.secho(str(exc), fg=typer.colors.RED)
        raise typer.Exit(code=1) from exc

    if movie is None or result is None:
        typer.secho(f"Movie not found: {title}", fg=typer.colors.YELLOW)
        raise typer.Exit(code=1)

    typer.secho(f"Because you liked {movie.title} ({movie.year or 'TBA'})", fg=typer.colors.CYAN)
    _render_recommendation(result)


@app.command()
def themes(
    theme: str = typer.Argument(..., help="Theme, mood or concept."),
    prompt: str | None = typer.Option(None, help="Custom prompt replacing the built-in one."),
    debug: bool = typer.Option(False, help="Enable debug logging."),
) -> None:
    """Get AI recommendations for a theme."""
    services = _services_or_exit(debug=debug, require_openai=True)
    recommender = services.require_recommendations()

    try:
        result = _run(services, lambda: recommender.recommend_thematic(theme, prompt))
    except InvalidQuery as exc:
        typer.secho(str(exc), fg=typer.colors.RED)
        raise typer.Exit(code=2) from exc
    except RecommendationFailed as exc:
        typer.secho(str(exc), fg=typer.colors.RED)
        raise typer.Exit(code=1) from exc

    _render_recommendation(result)


@app.command()
def analyze(
    movie_id: int = typer.Argument(..., help="TMDB movie ID."),
    debug: bool = typer.Option(False, help="Enable debug logging."),
) -> None:
    """Get a short AI analysis of a movie."""
    services = _services_or_exit(debug=debug, require_openai=True)
    recommender = services.require_recommendations()

    async def _analyze() -> tuple[MovieDetails, str]:
        movie = await services.catalog.details(movie_id)
        return movie, await recommender.analyze(movie)

    try:
        movie, analysis = _run(services, _analyze)
    except (TransportError, RecommendationFailed) as exc:
        typer.secho(str(exc), fg=typer.colors.RED)
        raise typer.Exit(code=1) from exc

    typer.secho(f"{movie.title} ({movie.year or 'TBA'})", fg=typer.colors.CYAN)
    typer.echo(analysis)


@app.command()
def config(show_sources: bool = typer.Option(False, help="Display where settings came from.")) -> None:
    """Describe configuration expectations."""
    load_result = _safe_load_settings(load_even_if_missing=True)
    if load_result is None:
        raise typer.Exit(code=1)

    settings = load_result.settings
    values: dict[str, Any] = {
        "tmdb_api_key": "<set>" if settings.tmdb_api_key else "<unset>",
        "tmdb_base_url": settings.tmdb_base_url,
        "tmdb_language": settings.tmdb_language or "<unset>",
        "openai_api_key": "<set>" if settings.openai_api_key else "<unset>",
        "openai_base_url": settings.openai_base_url or "<default>",
        "openai_model": settings.openai_model or "<unset>",
        "request_timeout": settings.request_timeout,
        "recommendation": f"max_tokens={settings.recommendation_max_tokens} "
        f"temperature={settings.recommendation_temperature}",
        "thematic": f"max_tokens={settings.thematic_max_tokens} "
        f"temperature={settings.thematic_temperature}",
        "analysis": f"max_tokens={settings.analysis_max_tokens} "
        f"temperature={settings.analysis_temperature}",
    }

    for key, value in values.items():
        typer.echo(f"{key}: {value}")

    if show_sources:
        source_hint = load_result.source_path or "<env/.env>"
        typer.echo(f"resolved_from: {source_hint}")
        typer.echo(
            "Provider keys: TMDB_API_KEY, OPENAI_API_KEY."
            " Configure ~/.config/cineai/config.toml for persistent settings.",
        )


@app.command()
def serve(
    host: str | None = typer.Option(
        None, help="Host to bind MCP server (default: MCP_HOST or 127.0.0.1)"
    ),
    port: int | None = typer.Option(
        None, help="Port to bind MCP server (default: MCP_PORT or 8092)"
    ),
    transport: str | None = typer.Option(
        None, help="Transport: stdio or sse (default: MCP_TRANSPORT or stdio)"
    ),
    debug: bool = typer.Option(False, help="Enable debug logging"),
) -> None:
    """Run cineai as an MCP service for AI agents.

    Transport modes:
    - stdio: Process communication via stdin/stdout
    - sse: HTTP/SSE server on network
      Endpoints: /mcp/sse (SSE stream), /mcp/messages (POST)

    Example:
        cineai serve --host 0.0.0.0 --port 8092 --transport sse
    """
    if debug:
        _setup_logging(logging.DEBUG)
        logging.getLogger("mcp").setLevel(logging.DEBUG)

    load_result = _safe_load_settings()
    if load_result is None:
        raise typer.Exit(code=1)

    settings = load_result.settings
    try:
        settings.require_tmdb()
    except SettingsError as exc:
        typer.secho(str(exc), fg=typer.colors.RED)
        raise typer.Exit(code=1) from exc

    final_host = host if host is not None else settings.mcp_host
    final_port = port if port is not None else settings.mcp_port
    final_transport = transport if transport is not None else settings.mcp_transport

    from cineai.mcp.server import run_mcp_http_server, run_mcp_server

    if final_transport == "sse":
        typer.secho(
            f"Starting MCP HTTP/SSE server on http://{final_host}:{final_port}...",
            fg=typer.colors.GREEN,
        )
    else:
        typer.secho("Starting MCP stdio server...", fg=typer.colors.GREEN)

    try:
        if final_transport == "sse":
            asyncio.run(run_mcp_http_server(settings, final_host, final_port, debug=debug))
        else:
            asyncio.run(run_mcp_server(settings, debug=debug))
    except KeyboardInterrupt:
        typer.echo("\nMCP server stopped")


def main() -> None:
    """Expose Typer app for the console script."""
    app()


def _safe_load_settings(load_even_if_missing: bool = False) -> SettingsLoadResult | None:
    try:
        return load_settings()
    except SettingsError as exc:
        if load_even_if_missing:
            typer.secho(
                f"Warning: configuration incomplete – {exc}",
                fg=typer.colors.YELLOW,
            )
            return SettingsLoadResult(settings=Settings(), source_path=None)
        typer.secho(str(exc), fg=typer.colors.RED)
        return None


def _services_or_exit(*, debug: bool = False, require_openai: bool = False) -> Services:
    if debug:
        _setup_logging(logging.INFO)

    load_result = _safe_load_settings()
    if load_result is None:
        raise typer.Exit(code=1)

    settings = load_result.settings
    try:
        if require_openai:
            settings.require_openai()
        return build_services(settings, debug=debug)
    except SettingsError as exc:
        typer.secho(str(exc), fg=typer.colors.RED)
        raise typer.Exit(code=1) from exc


def _run(services: Services, operation: Callable[[], Awaitable[T]]) -> T:
    """Run one async operation and close the provider clients afterwards."""

    async def _runner() -> T:
        try:
            return await operation()
        finally:
            await services.aclose()

    return asyncio.run(_runner())


def _setup_logging(level: int = logging.INFO) -> None:
    """Configure logging for debug mode."""
    logging.basicConfig(
        format="%(message)s",
        level=level,
        force=True,
    )


def _render_movies(movies: list[MovieSummary]) -> None:
    if not movies:
        typer.secho("No movies to show.", fg=typer.colors.YELLOW)
        return

    for idx, movie in enumerate(movies, start=1):
        rating = f"{movie.vote_average:.1f}" if movie.vote_average is not None else "n/a"
        typer.echo(f"{idx}. {movie.title} ({movie.year or 'TBA'}) • rating={rating} • tmdb:{movie.id}")
        if movie.overview:
            typer.echo(f"   {movie.overview}")


def _render_details(movie: MovieDetails) -> None:
    typer.secho(f"{movie.title} ({movie.year or 'TBA'})", fg=typer.colors.CYAN)
    if movie.tagline:
        typer.echo(f"   {movie.tagline}")
    if movie.runtime:
        hours, minutes = divmod(movie.runtime, 60)
        typer.echo(f"   runtime: {hours}h {minutes}m")
    if movie.genres:
        typer.echo(f"   genres: {', '.join(movie.genre_names)}")
    if movie.vote_average is not None:
        typer.echo(f"   rating: {movie.vote_average:.1f} ({movie.vote_count:,} votes)")
    if movie.budget:
        typer.echo(f"   budget: ${movie.budget:,}")
    if movie.revenue:
        typer.echo(f"   revenue: ${movie.revenue:,}")
    if movie.status:
        typer.echo(f"   status: {movie.status}")
    if movie.overview:
        typer.echo(f"   {movie.overview}")


def _render_recommendation(result: RecommendationResult) -> None:
    typer.echo(result.text)
    if result.movies:
        typer.echo("")
        typer.secho("Recommended movies", fg=typer.colors.CYAN)
        _render_movies(result.movies)
    elif result.titles:
        typer.secho("None of the recommended titles were found on TMDB.", fg=typer.colors.YELLOW)
