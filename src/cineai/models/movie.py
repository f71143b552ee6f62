from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, field_validator


class QueryKind(str, Enum):
    """How a free-text search should be resolved."""

    THEMATIC = "thematic"
    DIRECT = "direct"


class MovieSummary(BaseModel):
    """A movie as returned by TMDB list and search endpoints."""

    id: int
    title: str
    overview: str = ""
    poster_path: str | None = None
    backdrop_path: str | None = None
    release_date: str | None = None
    vote_average: float | None = None
    vote_count: int = Field(default=0, ge=0)
    popularity: float = 0.0
    original_language: str = ""
    original_title: str = ""
    genre_ids: list[int] = Field(default_factory=list)
    adult: bool = False
    video: bool = False

    model_config = {
        "populate_by_name": True,
        "extra": "ignore",
        "frozen": True,
    }

    @field_validator("release_date", mode="before")
    @classmethod
    def _blank_date_is_unknown(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("overview", "original_language", "original_title", mode="before")
    @classmethod
    def _null_text_is_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("vote_count", mode="before")
    @classmethod
    def _null_count_is_zero(cls, value: Any) -> Any:
        return 0 if value is None else value

    @property
    def year(self) -> str | None:
        """Release year as it appears in the ISO date, if known."""
        return self.release_date[:4] if self.release_date else None


class Genre(BaseModel):
    id: int
    name: str

    model_config = {"frozen": True, "extra": "ignore"}


class ProductionCompany(BaseModel):
    id: int
    name: str
    logo_path: str | None = None
    origin_country: str = ""

    model_config = {"frozen": True, "extra": "ignore"}


class MovieDetails(MovieSummary):
    """Full TMDB record for a single movie, fetched on demand."""

    runtime: int = 0
    budget: int = 0
    revenue: int = 0
    genres: list[Genre] = Field(default_factory=list)
    production_companies: list[ProductionCompany] = Field(default_factory=list)
    status: str = ""
    tagline: str = ""
    homepage: str = ""
    imdb_id: str | None = None

    @field_validator("runtime", "budget", "revenue", mode="before")
    @classmethod
    def _unknown_amount_is_zero(cls, value: Any) -> Any:
        return 0 if value is None else value

    @field_validator("status", "tagline", "homepage", mode="before")
    @classmethod
    def _null_detail_text_is_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    @property
    def genre_names(self) -> list[str]:
        return [genre.name for genre in self.genres]


class MoviePage(BaseModel):
    """One page of a TMDB list endpoint."""

    page: int = 1
    results: list[MovieSummary] = Field(default_factory=list)
    total_pages: int = 0
    total_results: int = 0

    model_config = {"extra": "ignore"}


class SearchResult(BaseModel):
    """Outcome of an intelligent search."""

    query: str
    kind: QueryKind
    movies: list[MovieSummary] = Field(default_factory=list)
    used_fallback: bool = False

    @property
    def is_empty(self) -> bool:
        return not self.movies


class RecommendationResult(BaseModel):
    """Descriptive completion text plus the movies it recommends."""

    text: str
    titles: list[str] = Field(default_factory=list)
    movies: list[MovieSummary] = Field(default_factory=list)
