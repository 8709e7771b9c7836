from __future__ import annotations

import html
import json
from collections.abc import Sequence
from pathlib import Path

from .models import DEFAULT_CATEGORY

UNKNOWN_TITLE = "Unknown"
UNKNOWN_CONTEXT = "Unknown Context"

_TITLE_OPEN = "<title>"
_TITLE_CLOSE = "</title>"

KeywordSets = tuple[tuple[str, tuple[str, ...]], ...]

# Checked in order; the first set with a matching keyword wins.
DEFAULT_KEYWORD_SETS: KeywordSets = (
    (
        "Games",
        ("game", "steam", "rpg", "fps", "multiplayer", "walkthrough", "metacritic", "ign"),
    ),
    (
        "Software",
        ("software", "download", "tool", "utility", "github", "version", "open source"),
    ),
    ("Movies", ("movie", "film", "imdb", "rotten tomatoes", "cast")),
    ("Music", ("album", "song", "lyrics", "spotify", "band")),
)


def extract_page_title(body: str, suffix: str = "") -> str:
    """
    Pull the text between the first <title> and </title> markers.

    Examples:
        >>> extract_page_title("<html><title>Hades - Google Search</title>", " - Google Search")
        'Hades'
        >>> extract_page_title("<html></html>")
        'Unknown Context'
    """
    start = body.find(_TITLE_OPEN)
    if start == -1:
        return UNKNOWN_CONTEXT
    start += len(_TITLE_OPEN)
    end = body.find(_TITLE_CLOSE, start)
    if end == -1:
        return UNKNOWN_CONTEXT
    title = body[start:end]
    if suffix:
        title = title.replace(suffix, "")
    return html.unescape(title).strip()


def categorize_context(title: str, keyword_sets: KeywordSets = DEFAULT_KEYWORD_SETS) -> str:
    lowered = title.lower()
    for category, keywords in keyword_sets:
        if any(keyword in lowered for keyword in keywords):
            return category
    return DEFAULT_CATEGORY


def parse_keyword_sets(data: object) -> KeywordSets:
    """
    Validate keyword sets loaded from JSON: a list of
    {"category": str, "keywords": [str, ...]} objects in priority order.
    """
    if not isinstance(data, Sequence) or isinstance(data, (str, bytes)):
        raise ValueError("keyword sets must be a list")
    parsed: list[tuple[str, tuple[str, ...]]] = []
    for item in data:
        if not isinstance(item, dict):
            raise ValueError("keyword set entries must be objects")
        category = str(item.get("category", "")).strip()
        keywords = item.get("keywords")
        if not category or not isinstance(keywords, list):
            raise ValueError("keyword set entries need a category and a keywords list")
        cleaned = tuple(
            str(keyword).strip().lower() for keyword in keywords if str(keyword).strip()
        )
        parsed.append((category, cleaned))
    return tuple(parsed)


def load_keyword_sets(path: Path) -> KeywordSets:
    """Read keyword sets from a JSON file; raises OSError or ValueError."""

    data = json.loads(path.read_text(encoding="utf-8"))
    return parse_keyword_sets(data)
