from .movie import (
    Genre,
    MovieDetails,
    MoviePage,
    MovieSummary,
    ProductionCompany,
    QueryKind,
    RecommendationResult,
    SearchResult,
)

__all__ = [
    "Genre",
    "MovieDetails",
    "MoviePage",
    "MovieSummary",
    "ProductionCompany",
    "QueryKind",
    "RecommendationResult",
    "SearchResult",
]
