"""Curated title lists for common search themes.

The table is evaluated top to bottom and the first entry with a keyword
contained in the query wins. Order matters: "think" must be checked before
"adventure", and the catch-all "time" entry sits near the bottom so that
earlier themes are not shadowed by it.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CuratedTheme:
    """A theme keyword set and its canonical titles, in display order."""

    name: str
    keywords: tuple[str, ...]
    titles: tuple[str, ...]

    def matches(self, lowered_query: str) -> bool:
        return any(keyword in lowered_query for keyword in self.keywords)


THEME_TABLE: tuple[CuratedTheme, ...] = (
    CuratedTheme(
        name="mind-bending",
        keywords=("think", "thought-provoking", "mind-bending"),
        titles=(
            "Inception",
            "The Matrix",
            "Interstellar",
            "Blade Runner",
            "Eternal Sunshine of the Spotless Mind",
            "The Truman Show",
            "Fight Club",
            "Memento",
            "Donnie Darko",
            "The Prestige",
        ),
    ),
    CuratedTheme(
        name="romance",
        keywords=("love", "romance", "romantic"),
        titles=(
            "The Notebook",
            "Titanic",
            "La La Land",
            "Before Sunrise",
            "Eternal Sunshine of the Spotless Mind",
            "500 Days of Summer",
            "The Princess Bride",
            "Casablanca",
            "When Harry Met Sally",
            "About Time",
        ),
    ),
    CuratedTheme(
        name="action",
        keywords=("action",),
        titles=(
            "Mad Max: Fury Road",
            "John Wick",
            "The Dark Knight",
            "Mission: Impossible",
            "Die Hard",
            "The Avengers",
            "Black Panther",
            "Wonder Woman",
            "Top Gun: Maverick",
            "The Matrix",
        ),
    ),
    CuratedTheme(
        name="comedy",
        keywords=("comedy", "funny", "humor"),
        titles=(
            "The Grand Budapest Hotel",
            "Superbad",
            "Bridesmaids",
            "The Hangover",
            "Shaun of the Dead",
            "Hot Fuzz",
            "The Big Lebowski",
            "Groundhog Day",
            "Office Space",
            "Mean Girls",
        ),
    ),
    CuratedTheme(
        name="eddie-murphy",
        keywords=("eddie murphy",),
        titles=(
            "Coming to America",
            "Beverly Hills Cop",
            "The Nutty Professor",
            "Dr. Dolittle",
            "Shrek",
            "Mulan",
            "Beverly Hills Cop II",
            "Trading Places",
            "48 Hrs.",
            "Bowfinger",
        ),
    ),
    CuratedTheme(
        name="will-smith",
        keywords=("will smith",),
        titles=(
            "Men in Black",
            "Independence Day",
            "The Pursuit of Happyness",
            "I Am Legend",
            "Hitch",
            "Bad Boys",
            "Ali",
            "The Legend of Bagger Vance",
            "Enemy of the State",
            "Wild Wild West",
        ),
    ),
    CuratedTheme(
        name="tom-hanks",
        keywords=("tom hanks",),
        titles=(
            "Forrest Gump",
            "Cast Away",
            "Saving Private Ryan",
            "The Green Mile",
            "Big",
            "Philadelphia",
            "Apollo 13",
            "Toy Story",
            "The Terminal",
            "Sleepless in Seattle",
        ),
    ),
    CuratedTheme(
        name="leonardo-dicaprio",
        keywords=("leonardo dicaprio", "leo dicaprio"),
        titles=(
            "Titanic",
            "Inception",
            "The Wolf of Wall Street",
            "The Revenant",
            "Catch Me If You Can",
            "The Departed",
            "Shutter Island",
            "Django Unchained",
            "The Great Gatsby",
            "Once Upon a Time in Hollywood",
        ),
    ),
    CuratedTheme(
        name="sci-fi",
        keywords=("sci-fi", "science fiction", "space"),
        titles=(
            "Interstellar",
            "The Martian",
            "Blade Runner 2049",
            "Arrival",
            "Ex Machina",
            "Her",
            "Gravity",
            "The Fifth Element",
            "District 9",
            "Moon",
        ),
    ),
    CuratedTheme(
        name="horror",
        keywords=("horror", "scary"),
        titles=(
            "The Shining",
            "A Quiet Place",
            "Get Out",
            "Hereditary",
            "The Conjuring",
            "It Follows",
            "The Babadook",
            "The Witch",
            "Midsommar",
            "Us",
        ),
    ),
    CuratedTheme(
        name="adventure",
        keywords=("adventure",),
        titles=(
            "Indiana Jones and the Raiders of the Lost Ark",
            "The Lord of the Rings: The Fellowship of the Ring",
            "Jurassic Park",
            "Pirates of the Caribbean: The Curse of the Black Pearl",
            "The Princess Bride",
            "The Goonies",
            "Jumanji",
            "National Treasure",
            "The Mummy",
            "Romancing the Stone",
        ),
    ),
    CuratedTheme(
        name="time-travel",
        keywords=("time travel", "time"),
        titles=(
            "Back to the Future",
            "Interstellar",
            "Looper",
            "Edge of Tomorrow",
            "About Time",
            "The Time Traveler's Wife",
            "Primer",
            "12 Monkeys",
            "Source Code",
            "Arrival",
        ),
    ),
    CuratedTheme(
        name="emotional",
        keywords=("emotional", "heartwarming", "feel-good"),
        titles=(
            "The Shawshank Redemption",
            "Forrest Gump",
            "The Green Mile",
            "Big Fish",
            "The Secret Life of Walter Mitty",
            "Up",
            "The Pursuit of Happyness",
            "Good Will Hunting",
            "Dead Poets Society",
            "The Blind Side",
        ),
    ),
)

DEFAULT_TITLES: tuple[str, ...] = (
    "Inception",
    "The Matrix",
    "The Dark Knight",
    "Interstellar",
    "The Shawshank Redemption",
    "Forrest Gump",
    "Pulp Fiction",
    "Fight Club",
    "The Godfather",
    "Schindler's List",
)


def match_theme(query: str) -> CuratedTheme | None:
    """Return the first curated theme whose keywords appear in the query."""
    lowered = query.lower()
    for theme in THEME_TABLE:
        if theme.matches(lowered):
            return theme
    return None


def resolve_curated_titles(query: str) -> list[str]:
    """Map a thematic query to its curated titles, or the default list."""
    theme = match_theme(query)
    return list(theme.titles if theme else DEFAULT_TITLES)


__all__ = ["CuratedTheme", "DEFAULT_TITLES", "THEME_TABLE", "match_theme", "resolve_curated_titles"]
