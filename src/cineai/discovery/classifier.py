"""Keyword heuristics that decide how a free-text search is resolved.

A query is thematic when it describes a genre, mood or concept ("movies that
make you think", "eddie murphy comedies"); anything else is treated as a
literal title and sent straight to the metadata provider. Matching is plain
substring containment, so a title such as "Love Actually" routes thematic.
"""

from __future__ import annotations

import re

from cineai.models import QueryKind

THEMATIC_KEYWORDS: frozenset[str] = frozenset(
    {
        # phrasing
        "movies that", "films that", "stories about", "films about", "movies about",
        # genres
        "love", "romance", "romantic", "action", "adventure", "comedy", "drama", "horror",
        "thriller", "sci-fi", "science fiction", "fantasy", "mystery", "crime", "war",
        "western", "musical", "documentary", "animation", "family", "children", "teen",
        # moods
        "emotional", "thought-provoking", "mind-bending", "heartwarming", "feel-good",
        "inspiring", "sad", "happy", "funny", "humor", "scary", "exciting", "relaxing",
        "educational",
        # subjects
        "time travel", "space", "robots", "aliens", "magic", "superheroes", "vampires",
        "zombies", "ghosts", "monsters", "animals", "nature", "history", "future",
        "past", "present", "world war", "civil war", "revolution", "independence",
        "freedom", "justice", "revenge", "redemption", "forgiveness", "friendship",
        "parenting", "marriage", "divorce", "dating", "breakup", "reunion",
        "coming of age", "growing up", "adulthood", "old age", "death", "life",
        "success", "failure", "dreams", "ambition", "career", "business", "money",
        "poverty", "wealth", "class", "society", "politics", "government", "religion",
        "spirituality", "philosophy", "science", "technology", "art", "music",
        "dance", "sports", "competition", "teamwork", "individual",
        "culture", "tradition", "modern", "classic", "contemporary", "period",
        # eras and settings
        "medieval", "ancient", "futuristic", "post-apocalyptic",
        "dystopian", "utopian", "realistic", "surreal", "abstract",
    }
)

# "<name> <name> comedies" and "<first> <surname> <word>" phrasings
ACTOR_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(
        r"\b\w+\s+\w+\s+(movies|films|comedies|dramas|action|horror|thriller|romance)\b",
        re.IGNORECASE,
    ),
    re.compile(
        r"\b\w+\s+(murphy|smith|jones|brown|davis|wilson|taylor|anderson|thomas|jackson)\s+\w+\b",
        re.IGNORECASE,
    ),
)


def has_thematic_keyword(query: str) -> bool:
    lowered = query.lower()
    return any(keyword in lowered for keyword in THEMATIC_KEYWORDS)


def has_actor_pattern(query: str) -> bool:
    return any(pattern.search(query) for pattern in ACTOR_PATTERNS)


def classify(query: str) -> QueryKind:
    """Classify a search string as a thematic request or a direct title lookup."""
    if has_thematic_keyword(query) or has_actor_pattern(query):
        return QueryKind.THEMATIC
    return QueryKind.DIRECT


def is_thematic(query: str) -> bool:
    return classify(query) is QueryKind.THEMATIC


__all__ = ["ACTOR_PATTERNS", "THEMATIC_KEYWORDS", "classify", "is_thematic"]
