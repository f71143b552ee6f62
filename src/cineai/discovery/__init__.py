"""Query routing, curated themes, prompts and completion parsing."""

from cineai.discovery.classifier import classify, is_thematic
from cineai.discovery.parsers import ParsedCompletion, parse_completion
from cineai.discovery.themes import THEME_TABLE, CuratedTheme, match_theme, resolve_curated_titles

__all__ = [
    "CuratedTheme",
    "ParsedCompletion",
    "THEME_TABLE",
    "classify",
    "is_thematic",
    "match_theme",
    "parse_completion",
    "resolve_curated_titles",
]
