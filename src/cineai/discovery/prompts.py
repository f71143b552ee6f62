"""Prompt templates for the completion provider."""

from __future__ import annotations

from cineai.models import MovieSummary

RECOMMENDATION_SYSTEM_PROMPT = (
    "You are a knowledgeable movie critic and recommendation expert. "
    "Provide thoughtful, accurate movie recommendations with engaging explanations."
)

THEMATIC_SYSTEM_PROMPT = (
    "You are a knowledgeable movie recommendation expert. "
    "Provide accurate movie suggestions based on themes and concepts."
)

ANALYSIS_SYSTEM_PROMPT = "You are a film analyst providing thoughtful movie insights."

RECOMMENDATION_COUNT = 5
THEMATIC_COUNT = 10


def build_recommendation_prompt(movie: MovieSummary, preferences: str | None = None) -> str:
    """Ask for similar movies, terminated by a MOVIE_TITLES line."""
    year = f" ({movie.year})" if movie.year else ""
    lines = [
        f'Based on the movie "{movie.title}"{year} with the following description: '
        f'"{movie.overview}", please recommend {RECOMMENDATION_COUNT} similar movies and '
        "explain why each would appeal to someone who enjoyed this film.",
        "",
    ]
    if preferences and preferences.strip():
        lines.extend([f"User preferences: {preferences.strip()}", ""])
    lines.extend(
        [
            "Please format your response in a clear, engaging way with movie titles in bold "
            "and brief explanations for each recommendation. Focus on movies that share similar "
            "themes, genres, or storytelling styles.",
            "",
            'IMPORTANT: At the end of your response, add a line starting with "MOVIE_TITLES:" '
            f"followed by just the {RECOMMENDATION_COUNT} movie titles separated by commas, "
            "without any formatting or explanations. For example: "
            '"MOVIE_TITLES: Inception, The Matrix, Blade Runner, Ex Machina, Her"',
        ]
    )
    return "\n".join(lines)


def build_thematic_prompt(theme: str) -> str:
    """Ask for movies matching a theme, terminated by a MOVIE_TITLES line."""
    return "\n".join(
        [
            f'Find {THEMATIC_COUNT} movies that match this theme or concept: "{theme.strip()}".',
            "",
            "Consider movies that:",
            "- Match the theme, concept, or emotion described",
            "- Are well-known and accessible",
            "- Have good ratings and reviews",
            "- Represent different genres and time periods",
            "",
            "Return only the movie titles separated by commas, no explanations or formatting.",
            'Example format: "Inception, Eternal Sunshine of the Spotless Mind, The Matrix, '
            'Blade Runner, Her"',
            "",
            'IMPORTANT: At the end of your response, add a line starting with "MOVIE_TITLES:" '
            f"followed by just the {THEMATIC_COUNT} movie titles separated by commas, "
            "without any formatting or explanations.",
        ]
    )


def build_analysis_prompt(movie: MovieSummary) -> str:
    return (
        f'Analyze the movie "{movie.title}" and provide insights about its themes, '
        "cinematography, storytelling, and cultural impact. "
        "Keep it concise but informative (max 200 words)."
    )


__all__ = [
    "ANALYSIS_SYSTEM_PROMPT",
    "RECOMMENDATION_SYSTEM_PROMPT",
    "THEMATIC_SYSTEM_PROMPT",
    "build_analysis_prompt",
    "build_recommendation_prompt",
    "build_thematic_prompt",
]
