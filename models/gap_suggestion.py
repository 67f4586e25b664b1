"""Gap suggestion and missing-item cache records."""

from dataclasses import dataclass
from typing import Optional
from urllib.parse import quote

SHOPPING_SEARCH_URL = "https://www.google.com/search?tbm=shop&q="


def build_search_url(term: str) -> str:
    """Deterministic shopping search URL for a suggested item."""

    return SHOPPING_SEARCH_URL + quote(term, safe="-_.!~*'()")


@dataclass(frozen=True)
class GapSuggestion:
    term: str
    description: str
    search_url: str


@dataclass(frozen=True)
class MissingItemRecord:
    """Cached lookup for a suggested term, shared across users."""

    term: str
    search_url: str
    image_url: Optional[str] = None
