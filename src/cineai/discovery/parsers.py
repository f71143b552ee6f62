"""Parser for the machine-readable title line appended to completions."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

TITLES_MARKER = "MOVIE_TITLES:"

# Case-sensitive; the titles may follow the marker on the next line
_TITLES_LINE = re.compile(r"MOVIE_TITLES:\s*(.+)$", re.MULTILINE)


@dataclass
class ParsedCompletion:
    """Prose for display plus the titles extracted from the marker line."""

    text: str
    movie_titles: list[str] = field(default_factory=list)


def split_titles(raw: str) -> list[str]:
    return [title.strip() for title in raw.split(",") if title.strip()]


def parse_completion(content: str) -> ParsedCompletion:
    """Split a completion into display text and its trailing title list.

    The last ``MOVIE_TITLES:`` line wins. It is removed from the text, and the
    remainder is trimmed so the blank line that usually precedes it goes too.
    Without a marker the whole trimmed response is returned with no titles.
    """
    matches = list(_TITLES_LINE.finditer(content))
    if not matches:
        return ParsedCompletion(text=content.strip())

    last = matches[-1]
    text = content[: last.start()] + content[last.end() :]
    return ParsedCompletion(text=text.strip(), movie_titles=split_titles(last.group(1)))


__all__ = ["ParsedCompletion", "TITLES_MARKER", "parse_completion", "split_titles"]
