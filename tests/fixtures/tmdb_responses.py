"""Fixture data for TMDB API responses."""

from typing import Any


def movie_payload(movie_id: int, title: str, release_date: str = "2010-07-15", **extra: Any) -> dict[str, Any]:
    """Minimal TMDB list-endpoint movie entry."""
    payload = {
        "id": movie_id,
        "title": title,
        "original_title": title,
        "overview": f"Overview of {title}",
        "poster_path": f"/poster-{movie_id}.jpg",
        "backdrop_path": None,
        "release_date": release_date,
        "vote_average": 7.5,
        "vote_count": 1000,
        "popularity": 42.0,
        "original_language": "en",
        "genre_ids": [18],
        "adult": False,
        "video": False,
    }
    payload.update(extra)
    return payload


def page_payload(*movies: dict[str, Any], page: int = 1) -> dict[str, Any]:
    return {
        "page": page,
        "results": list(movies),
        "total_pages": 1 if movies else 0,
        "total_results": len(movies),
    }


SEARCH_INCEPTION_RESPONSE = page_payload(
    movie_payload(27205, "Inception"),
    movie_payload(64956, "Inception: The Cobol Job", release_date="2010-12-07"),
)

EMPTY_SEARCH_RESPONSE = page_payload()

TRENDING_RESPONSE = page_payload(
    movie_payload(872585, "Oppenheimer", release_date="2023-07-19", media_type="movie"),
    movie_payload(346698, "Barbie", release_date="2023-07-19", media_type="movie"),
    movie_payload(693134, "Dune: Part Two", release_date="2024-02-27", media_type="movie"),
)

RECOMMENDATIONS_RESPONSE = page_payload(
    *[movie_payload(1000 + idx, f"Recommended {idx}") for idx in range(8)]
)

MOVIE_DETAILS_RESPONSE = {
    **movie_payload(27205, "Inception"),
    "runtime": 148,
    "budget": 160000000,
    "revenue": 839030630,
    "genres": [
        {"id": 28, "name": "Action"},
        {"id": 878, "name": "Science Fiction"},
        {"id": 12, "name": "Adventure"},
    ],
    "production_companies": [
        {"id": 923, "name": "Legendary Pictures", "logo_path": "/logo.png", "origin_country": "US"},
        {"id": 9996, "name": "Syncopy", "logo_path": None, "origin_country": "GB"},
    ],
    "status": "Released",
    "tagline": "Your mind is the scene of the crime.",
    "homepage": "https://www.warnerbros.com/movies/inception",
    "imdb_id": "tt1375666",
}

DETAILS_WITH_NULLS_RESPONSE = {
    **movie_payload(999999, "Untitled Project", release_date=""),
    "vote_average": None,
    "runtime": None,
    "budget": 0,
    "revenue": None,
    "genres": [],
    "production_companies": [],
    "status": "In Production",
    "tagline": None,
    "homepage": None,
    "imdb_id": None,
}
