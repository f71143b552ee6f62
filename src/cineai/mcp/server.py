"""MCP server implementation with cineai tools."""

import asyncio
import logging
from typing import Any

import uvicorn
from mcp.server import Server
from mcp.server.sse import SseServerTransport
from mcp.server.stdio import stdio_server
from mcp.types import TextContent, Tool

from cineai.clients.base import TransportError
from cineai.config.settings import Settings, SettingsError, load_settings
from cineai.discovery.classifier import classify
from cineai.discovery.themes import match_theme
from cineai.mcp.schemas import (
    ClassifyQueryParams,
    ClassifyQueryResponse,
    MovieDetailsParams,
    MovieDetailsResponse,
    MovieSearchResponse,
    RecommendationResponse,
    RecommendMoviesParams,
    RecommendThematicParams,
    SearchMoviesParams,
    TrendingMoviesParams,
)
from cineai.models import MovieSummary, QueryKind
from cineai.services import (
    InvalidQuery,
    RecommendationFailed,
    SearchFailed,
    Services,
    build_services,
    no_results_message,
)

logger = logging.getLogger(__name__)

TOOLS: list[Tool] = [
    Tool(
        name="search_movies",
        description=(
            "Search movies by title or by theme (genre, mood, actor). "
            "Thematic queries return curated picks; a blank query returns trending movies."
        ),
        inputSchema={
            "type": "object",
            "properties": {
                "query": {"type": "string", "description": "Movie title or theme"},
            },
        },
    ),
    Tool(
        name="trending_movies",
        description="List movies trending on TMDB today or this week.",
        inputSchema={
            "type": "object",
            "properties": {
                "window": {
                    "type": "string",
                    "enum": ["day", "week"],
                    "default": "week",
                },
                "limit": {
                    "type": "integer",
                    "description": "Number of movies",
                    "default": 20,
                    "minimum": 1,
                    "maximum": 20,
                },
            },
        },
    ),
    Tool(
        name="movie_details",
        description="Get runtime, genres, budget and TMDB recommendations for a movie.",
        inputSchema={
            "type": "object",
            "properties": {
                "movie_id": {"type": "integer", "description": "TMDB ID"},
                "include_recommendations": {"type": "boolean", "default": True},
            },
            "required": ["movie_id"],
        },
    ),
    Tool(
        name="recommend_movies",
        description=(
            "Get AI recommendations for movies similar to a given movie. "
            "Returns the critic's explanation plus resolved movie records."
        ),
        inputSchema={
            "type": "object",
            "properties": {
                "movie_id": {"type": "integer", "description": "TMDB ID"},
                "title": {"type": "string", "description": "Movie title (if no ID)"},
                "preferences": {"type": "string", "description": "Viewer preferences"},
            },
        },
    ),
    Tool(
        name="recommend_thematic",
        description="Get AI recommendations for a theme, mood or concept.",
        inputSchema={
            "type": "object",
            "properties": {
                "theme": {"type": "string", "description": "Theme or concept"},
                "custom_prompt": {
                    "type": "string",
                    "description": "Replaces the built-in prompt",
                },
            },
            "required": ["theme"],
        },
    ),
    Tool(
        name="classify_query",
        description="Tell whether a search string is treated as a theme or a literal title.",
        inputSchema={
            "type": "object",
            "properties": {
                "query": {"type": "string", "description": "Search string"},
            },
            "required": ["query"],
        },
    ),
]


def create_mcp_server(services: Services) -> Server:
    """Create and configure the MCP server with all tools."""
    server = Server("cineai")

    @server.list_tools()
    async def list_tools() -> list[Tool]:
        """List all available tools."""
        return TOOLS

    @server.call_tool()
    async def call_tool(name: str, arguments: dict[str, Any]) -> list[TextContent]:
        """Handle tool calls."""
        logger.info(f"Processing tool call: {name} with arguments: {arguments}")

        if name == "search_movies":
            result = await _search_movies(services, arguments)
        elif name == "trending_movies":
            result = await _trending_movies(services, arguments)
        elif name == "movie_details":
            result = await _movie_details(services, arguments)
        elif name == "recommend_movies":
            result = await _recommend_movies(services, arguments)
        elif name == "recommend_thematic":
            result = await _recommend_thematic(services, arguments)
        elif name == "classify_query":
            result = _classify_query(arguments)
        else:
            raise ValueError(f"Unknown tool: {name}")

        logger.info(f"Tool call {name} completed")
        return result

    return server


def _text(response: Any) -> list[TextContent]:
    return [TextContent(type="text", text=response.model_dump_json(indent=2))]


async def _search_movies(services: Services, arguments: dict[str, Any]) -> list[TextContent]:
    """Intelligent search; blank queries return the trending listing."""
    params = SearchMoviesParams(**arguments)

    if not params.query.strip():
        return await _trending_movies(services, {})

    try:
        result = await services.search.search(params.query)
    except SearchFailed as exc:
        response = MovieSearchResponse(success=False, error="search_failed", message=str(exc))
        return _text(response)

    message = (
        no_results_message(result)
        if result.is_empty
        else f"Found {len(result.movies)} movies for {params.query!r}"
    )
    response = MovieSearchResponse(
        success=True,
        kind=result.kind.value,
        movies=result.movies,
        count=len(result.movies),
        used_fallback=result.used_fallback,
        message=message,
    )
    return _text(response)


async def _trending_movies(services: Services, arguments: dict[str, Any]) -> list[TextContent]:
    params = TrendingMoviesParams(**arguments)

    try:
        movies = await services.catalog.trending(params.window)
    except TransportError as exc:
        logger.error(f"Trending lookup failed: {exc}")
        response = MovieSearchResponse(
            success=False,
            error="transport_error",
            message="Failed to load trending movies. Please check your API configuration.",
        )
        return _text(response)

    movies = movies[: params.limit]
    response = MovieSearchResponse(
        success=True,
        kind="trending",
        movies=movies,
        count=len(movies),
        message=f"{len(movies)} trending movies this {params.window}",
    )
    return _text(response)


async def _movie_details(services: Services, arguments: dict[str, Any]) -> list[TextContent]:
    params = MovieDetailsParams(**arguments)

    try:
        details = await services.catalog.details(params.movie_id)
        recommendations: list[MovieSummary] = []
        if params.include_recommendations:
            recommendations = await services.catalog.provider_recommendations(params.movie_id)
    except TransportError as exc:
        response = MovieDetailsResponse(
            success=False,
            error="transport_error",
            message=f"Failed to load movie {params.movie_id}: {exc}",
        )
        return _text(response)

    response = MovieDetailsResponse(
        success=True,
        movie=details.model_dump(),
        recommendations=recommendations,
        message=f"{details.title} ({details.year or 'TBA'})",
    )
    return _text(response)


async def _recommend_movies(services: Services, arguments: dict[str, Any]) -> list[TextContent]:
    params = RecommendMoviesParams(**arguments)

    if params.movie_id is None and not (params.title and params.title.strip()):
        response = RecommendationResponse(
            success=False,
            error="missing_identifier",
            message="Must provide movie_id or title",
        )
        return _text(response)

    try:
        recommender = services.require_recommendations()
        if params.movie_id is not None:
            movie: MovieSummary | None = await services.catalog.details(params.movie_id)
        else:
            movie = await services.catalog.find_by_title(params.title or "")
        if movie is None:
            response = RecommendationResponse(
                success=False,
                error="not_found",
                message=f"Movie not found: {params.title}",
            )
            return _text(response)

        result = await recommender.recommend(movie, params.preferences)
    except SettingsError as exc:
        return _text(RecommendationResponse(success=False, error="config_error", message=str(exc)))
    except TransportError as exc:
        return _text(
            RecommendationResponse(success=False, error="transport_error", message=str(exc))
        )
    except RecommendationFailed as exc:
        return _text(
            RecommendationResponse(success=False, error="recommendation_failed", message=str(exc))
        )

    response = RecommendationResponse(
        success=True,
        text=result.text,
        titles=result.titles,
        movies=result.movies,
        message=f"{len(result.movies)} recommendations based on {movie.title}",
    )
    return _text(response)


async def _recommend_thematic(services: Services, arguments: dict[str, Any]) -> list[TextContent]:
    params = RecommendThematicParams(**arguments)

    try:
        recommender = services.require_recommendations()
        result = await recommender.recommend_thematic(params.theme, params.custom_prompt)
    except SettingsError as exc:
        return _text(RecommendationResponse(success=False, error="config_error", message=str(exc)))
    except InvalidQuery as exc:
        return _text(RecommendationResponse(success=False, error="invalid_input", message=str(exc)))
    except RecommendationFailed as exc:
        return _text(
            RecommendationResponse(success=False, error="recommendation_failed", message=str(exc))
        )

    response = RecommendationResponse(
        success=True,
        text=result.text,
        titles=result.titles,
        movies=result.movies,
        message=f"{len(result.movies)} movies for theme {params.theme!r}",
    )
    return _text(response)


def _classify_query(arguments: dict[str, Any]) -> list[TextContent]:
    params = ClassifyQueryParams(**arguments)
    kind = classify(params.query)

    curated_theme = None
    if kind is QueryKind.THEMATIC:
        theme = match_theme(params.query)
        curated_theme = theme.name if theme else "default"

    response = ClassifyQueryResponse(query=params.query, kind=kind.value, curated_theme=curated_theme)
    return _text(response)


async def run_mcp_server(settings: Settings, *, debug: bool = False) -> None:
    """Run the MCP server with stdio transport."""
    services = build_services(settings, debug=debug)
    server = create_mcp_server(services)
    try:
        async with stdio_server() as (read_stream, write_stream):
            await server.run(read_stream, write_stream, server.create_initialization_options())
    finally:
        await services.aclose()


async def run_mcp_http_server(
    settings: Settings, host: str, port: int, *, debug: bool = False
) -> None:
    """Run the MCP server with HTTP/SSE transport."""
    services = build_services(settings, debug=debug)
    server = create_mcp_server(services)
    sse = SseServerTransport("/mcp/messages")

    async def app(scope, receive, send):
        """Raw ASGI application for MCP SSE transport."""
        if scope["type"] != "http":
            return

        path = scope["path"]
        method = scope["method"]
        logger.debug(f"Received {method} request to {path}")

        if path == "/mcp/sse":
            logger.info(f"Opening SSE connection from {scope.get('client', ['unknown'])[0]}")
            async with sse.connect_sse(scope, receive, send) as streams:
                await server.run(streams[0], streams[1], server.create_initialization_options())

        elif path == "/mcp/messages" and method == "POST":
            await sse.handle_post_message(scope, receive, send)

        else:
            logger.warning(f"404 for {method} {path}")
            await send(
                {
                    "type": "http.response.start",
                    "status": 404,
                    "headers": [[b"content-type", b"text/plain"]],
                }
            )
            await send({"type": "http.response.body", "body": b"Not Found"})

    config = uvicorn.Config(app, host=host, port=port, log_level="info")
    server_instance = uvicorn.Server(config)
    try:
        await server_instance.serve()
    finally:
        await services.aclose()


def main() -> None:
    """Entry point for MCP server."""
    settings = load_settings().settings
    asyncio.run(run_mcp_server(settings))


if __name__ == "__main__":
    main()
