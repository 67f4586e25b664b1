"""Model package exports."""

from models.taxonomy import *  # noqa: F401,F403
from models.garment import Garment, from_raw_metadata
from models.gap_suggestion import GapSuggestion, MissingItemRecord
from models.preferences import PreferenceProfile, ShopProduct

__all__ = [
    "Garment",
    "from_raw_metadata",
    "GapSuggestion",
    "MissingItemRecord",
    "PreferenceProfile",
    "ShopProduct",
]
