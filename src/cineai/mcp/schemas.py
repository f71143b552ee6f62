"""Pydantic schemas for MCP tool parameters and responses."""

from typing import Any, Literal

from pydantic import BaseModel, Field

from cineai.models import MovieSummary

# Tool Parameter Schemas


class SearchMoviesParams(BaseModel):
    """Parameters for search_movies tool."""

    query: str = Field("", description="Movie title or theme; blank returns trending movies")


class TrendingMoviesParams(BaseModel):
    """Parameters for trending_movies tool."""

    window: Literal["day", "week"] = Field("week", description="Trending time window")
    limit: int = Field(20, ge=1, le=20, description="Maximum number of movies")


class MovieDetailsParams(BaseModel):
    """Parameters for movie_details tool."""

    movie_id: int = Field(..., description="TMDB movie ID")
    include_recommendations: bool = Field(
        True, description="Include TMDB's own recommendations for the movie"
    )


class RecommendMoviesParams(BaseModel):
    """Parameters for recommend_movies tool."""

    movie_id: int | None = Field(None, description="TMDB ID of the movie to base recommendations on")
    title: str | None = Field(None, description="Movie title, used when no ID is given")
    preferences: str | None = Field(None, description="Free-text viewer preferences")


class RecommendThematicParams(BaseModel):
    """Parameters for recommend_thematic tool."""

    theme: str = Field(..., description="Theme, mood or concept")
    custom_prompt: str | None = Field(None, description="Replaces the built-in thematic prompt")


class ClassifyQueryParams(BaseModel):
    """Parameters for classify_query tool."""

    query: str = Field(..., description="Search string to classify")


# Tool Response Schemas


class MovieSearchResponse(BaseModel):
    """Response from search_movies and trending_movies tools."""

    success: bool = Field(..., description="Whether operation succeeded")
    kind: str | None = Field(None, description="thematic, direct, or trending")
    movies: list[MovieSummary] = Field(default_factory=list, description="Matching movies")
    count: int = Field(0, description="Number of movies returned")
    used_fallback: bool = Field(False, description="Thematic search fell back to direct search")
    message: str = Field(..., description="Human-readable message")
    error: str | None = Field(None, description="Error type if failed")


class MovieDetailsResponse(BaseModel):
    """Response from movie_details tool."""

    success: bool = Field(..., description="Whether operation succeeded")
    movie: dict[str, Any] | None = Field(None, description="Full movie record")
    recommendations: list[MovieSummary] = Field(
        default_factory=list, description="TMDB recommendations"
    )
    message: str = Field(..., description="Human-readable message")
    error: str | None = Field(None, description="Error type if failed")


class RecommendationResponse(BaseModel):
    """Response from recommend_movies and recommend_thematic tools."""

    success: bool = Field(..., description="Whether operation succeeded")
    text: str = Field("", description="Recommendation prose")
    titles: list[str] = Field(default_factory=list, description="Titles named by the model")
    movies: list[MovieSummary] = Field(default_factory=list, description="Resolved movies")
    message: str = Field(..., description="Human-readable message")
    error: str | None = Field(None, description="Error type if failed")


class ClassifyQueryResponse(BaseModel):
    """Response from classify_query tool."""

    query: str = Field(..., description="Classified query")
    kind: str = Field(..., description="thematic or direct")
    curated_theme: str | None = Field(None, description="Curated theme a search would use")
