"""Canonical vocabularies for garments, occasions and color harmony.

This module centralises the closed sets the engine reasons about: functional
slots, occasions, aesthetic styles and colors. Classification labels arrive as
free text from the vision pipeline. Every helper here normalises and lets
unknown values pass through instead of raising. An unknown value simply fails
to match anything downstream.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, FrozenSet, List, Optional, Tuple, Union


def _normalize_key(value: object) -> str:
    """Normalise a free-form value into a lookup key."""

    if isinstance(value, Enum):
        value = value.value
    return str(value).strip().lower()


class FunctionalSlot(str, Enum):
    TOPS = "tops"
    BOTTOMS = "bottoms"
    DRESSES = "dresses"
    OUTERWEAR = "outerwear"
    ACTIVEWEAR = "activewear"
    ETHNIC = "ethnic"
    SHOES = "shoes"
    SLEEPWEAR = "sleepwear"
    INNERWEAR = "innerwear"


class Occasion(str, Enum):
    PARTY = "party"
    OFFICE = "office"
    CASUAL = "casual"
    DATE = "date"
    WEDDING = "wedding"
    VACATION = "vacation"


class AestheticStyle(str, Enum):
    INDIE = "Indie"
    COTTAGECORE = "Cottagecore"
    Y2K = "Y2K"
    CLEAN_GIRL = "Clean Girl"
    OLD_MONEY = "Old Money"
    STREETWEAR = "Streetwear"
    COQUETTE = "Coquette"
    GRUNGE = "Grunge"
    MINIMALIST = "Minimalist"
    BOHO = "Boho"
    ATHLEISURE = "Athleisure"
    DARK_ACADEMIA = "Dark Academia"
    LIGHT_ACADEMIA = "Light Academia"
    COASTAL = "Coastal"
    PREPPY = "Preppy"
    BADDIE = "Baddie"
    SOFT_GIRL = "Soft Girl"
    E_GIRL = "E-Girl"
    ETHNIC_TRADITIONAL = "Ethnic/Traditional"
    WHIMSICAL = "Whimsical"
    OFFICE_SIREN = "Office Siren"
    CASUAL = "Casual"
    FORMAL = "Formal"
    PARTY = "Party"


class GarmentSource(str, Enum):
    OWNED = "owned"
    EXTERNAL = "external"


SLOT_ALIASES: Dict[str, FunctionalSlot] = {
    "top": FunctionalSlot.TOPS,
    "tops": FunctionalSlot.TOPS,
    "bottom": FunctionalSlot.BOTTOMS,
    "bottoms": FunctionalSlot.BOTTOMS,
    "dress": FunctionalSlot.DRESSES,
    "dresses": FunctionalSlot.DRESSES,
    "outerwear": FunctionalSlot.OUTERWEAR,
    "activewear": FunctionalSlot.ACTIVEWEAR,
    "ethnic": FunctionalSlot.ETHNIC,
    "sneakers": FunctionalSlot.SHOES,
    "heels": FunctionalSlot.SHOES,
    "flats": FunctionalSlot.SHOES,
    "boots": FunctionalSlot.SHOES,
    "sandals": FunctionalSlot.SHOES,
    "footwear": FunctionalSlot.SHOES,
    "shoes": FunctionalSlot.SHOES,
    "sleepwear": FunctionalSlot.SLEEPWEAR,
    "innerwear": FunctionalSlot.INNERWEAR,
}

COLORS: List[str] = [
    "black",
    "white",
    "gray",
    "navy",
    "blue",
    "red",
    "pink",
    "green",
    "yellow",
    "orange",
    "purple",
    "beige",
    "brown",
    "cream",
    "maroon",
    "olive",
    "teal",
    "coral",
    "burgundy",
    "gold",
    "silver",
    "multi",
]

COLOR_ALIASES: Dict[str, str] = {
    "grey": "gray",
    "navy blue": "navy",
    "off white": "white",
    "off-white": "white",
}

ANY_COLOR = "any"

COLOR_FAMILIES: Dict[str, Tuple[str, ...]] = {
    "neutral": ("black", "white", "gray", "beige", "cream", "navy", "brown", "khaki"),
    "warm": ("red", "orange", "yellow", "coral", "peach", "burgundy", "maroon", "rust"),
    "cool": ("blue", "green", "purple", "teal", "mint", "lavender", "cyan"),
    "earth": ("brown", "olive", "tan", "terracotta", "mustard", "forest green"),
    "pastel": ("pink", "baby blue", "mint", "peach", "lavender", "cream"),
}

# Keyed by the first color of a comparison only.
COMPLEMENTARY_PAIRS: Dict[str, Tuple[str, ...]] = {
    "blue": ("orange", "coral", "mustard", "beige", "white", "gray"),
    "red": ("green", "navy", "cream", "black", "white"),
    "yellow": ("purple", "navy", "gray", "denim"),
    "green": ("pink", "burgundy", "cream", "white"),
    "purple": ("yellow", "orange", "cream", "gray"),
    "pink": ("gray", "navy", "olive", "white", "cream"),
    "orange": ("blue", "navy", "teal", "cream"),
    "black": ("white", "red", "pink", "yellow", ANY_COLOR),
    "white": (ANY_COLOR,),
    "gray": (ANY_COLOR,),
    "navy": ("white", "cream", "coral", "pink", "mustard"),
    "beige": ("navy", "brown", "olive", "burgundy", "white"),
    "brown": ("cream", "white", "blue", "green"),
    "maroon": ("white", "cream", "beige", "gold"),
    "olive": ("cream", "white", "brown", "burgundy"),
    "teal": ("coral", "cream", "white", "gold"),
    "coral": ("navy", "teal", "white", "cream"),
    "burgundy": ("cream", "white", "gold", "beige"),
    "gold": ("black", "navy", "burgundy", "cream"),
    "silver": ("black", "navy", "white", "gray"),
}


@dataclass(frozen=True)
class OccasionProfile:
    """Slots, styles and colors that suit an occasion."""

    occasion: Occasion
    preferred_slots: Tuple[FunctionalSlot, ...]
    styles: Tuple[AestheticStyle, ...]
    colors: FrozenSet[str]

    def prefers_slot(self, slot: Union[FunctionalSlot, str]) -> bool:
        return normalize_slot(slot) in self.preferred_slots

    def prefers_color(self, color: str) -> bool:
        return ANY_COLOR in self.colors or (color or "").lower() in self.colors

    def prefers_style(self, style: Optional[str]) -> bool:
        key = _normalize_key(style or "")
        return any(key == candidate.value.lower() for candidate in self.styles)


def _profile(
    occasion: Occasion,
    slots: Tuple[FunctionalSlot, ...],
    styles: Tuple[AestheticStyle, ...],
    colors: Tuple[str, ...],
) -> OccasionProfile:
    return OccasionProfile(
        occasion=occasion,
        preferred_slots=slots,
        styles=styles,
        colors=frozenset(colors),
    )


OCCASION_PROFILES: Dict[Occasion, OccasionProfile] = {
    Occasion.PARTY: _profile(
        Occasion.PARTY,
        (FunctionalSlot.DRESSES, FunctionalSlot.TOPS, FunctionalSlot.ETHNIC, FunctionalSlot.OUTERWEAR),
        (AestheticStyle.BADDIE, AestheticStyle.Y2K, AestheticStyle.COQUETTE, AestheticStyle.E_GIRL),
        ("black", "red", "gold", "silver", "pink", "burgundy"),
    ),
    Occasion.OFFICE: _profile(
        Occasion.OFFICE,
        (FunctionalSlot.TOPS, FunctionalSlot.BOTTOMS, FunctionalSlot.OUTERWEAR, FunctionalSlot.DRESSES),
        (
            AestheticStyle.OLD_MONEY,
            AestheticStyle.MINIMALIST,
            AestheticStyle.CLEAN_GIRL,
            AestheticStyle.OFFICE_SIREN,
        ),
        ("navy", "black", "white", "gray", "beige", "cream"),
    ),
    Occasion.CASUAL: _profile(
        Occasion.CASUAL,
        (FunctionalSlot.TOPS, FunctionalSlot.BOTTOMS, FunctionalSlot.DRESSES, FunctionalSlot.ACTIVEWEAR),
        (AestheticStyle.CASUAL, AestheticStyle.ATHLEISURE, AestheticStyle.STREETWEAR, AestheticStyle.INDIE),
        (ANY_COLOR,),
    ),
    Occasion.DATE: _profile(
        Occasion.DATE,
        (FunctionalSlot.DRESSES, FunctionalSlot.TOPS, FunctionalSlot.ETHNIC),
        (
            AestheticStyle.COQUETTE,
            AestheticStyle.SOFT_GIRL,
            AestheticStyle.CLEAN_GIRL,
            AestheticStyle.OLD_MONEY,
        ),
        ("red", "pink", "black", "burgundy", "cream"),
    ),
    Occasion.WEDDING: _profile(
        Occasion.WEDDING,
        (FunctionalSlot.DRESSES, FunctionalSlot.ETHNIC, FunctionalSlot.OUTERWEAR),
        (AestheticStyle.ETHNIC_TRADITIONAL, AestheticStyle.FORMAL, AestheticStyle.OLD_MONEY),
        ("pink", "gold", "cream", "maroon", "teal"),
    ),
    Occasion.VACATION: _profile(
        Occasion.VACATION,
        (FunctionalSlot.DRESSES, FunctionalSlot.TOPS, FunctionalSlot.BOTTOMS, FunctionalSlot.ACTIVEWEAR),
        (AestheticStyle.COASTAL, AestheticStyle.BOHO, AestheticStyle.WHIMSICAL, AestheticStyle.INDIE),
        ("white", "beige", "blue", "coral", "yellow"),
    ),
}

# Occasions where a top+bottom outfit gets an outer layer added.
LAYERED_OCCASIONS: FrozenSet[Occasion] = frozenset({Occasion.OFFICE, Occasion.PARTY, Occasion.WEDDING})


def normalize_slot(raw_label: Optional[str]) -> Union[FunctionalSlot, str]:
    """Map a classification label to a functional slot.

    Unknown labels are returned unchanged so callers can still display them;
    they never match an occasion's preferred slots.
    """

    if not raw_label:
        return raw_label or ""
    if isinstance(raw_label, FunctionalSlot):
        return raw_label
    return SLOT_ALIASES.get(_normalize_key(raw_label), raw_label)


def normalize_color_name(raw_string: Optional[str]) -> str:
    """Map a raw color string to its canonical lower-case name."""

    key = _normalize_key(raw_string or "")
    return COLOR_ALIASES.get(key, key)


def normalize_style(raw_style: Optional[str]) -> Union[AestheticStyle, str, None]:
    """Resolve an aesthetic tag case-insensitively, passing unknown tags through."""

    if not raw_style:
        return None
    if isinstance(raw_style, AestheticStyle):
        return raw_style
    key = _normalize_key(raw_style)
    for style in AestheticStyle:
        if style.value.lower() == key:
            return style
    return raw_style


def parse_occasion(occasion: Union[Occasion, str, None]) -> Optional[Occasion]:
    """Return the :class:`Occasion` for a label, or ``None`` when unrecognised."""

    if occasion is None:
        return None
    if isinstance(occasion, Occasion):
        return occasion
    try:
        return Occasion(_normalize_key(occasion))
    except ValueError:
        return None


def get_occasion_profile(occasion: Union[Occasion, str, None]) -> Optional[OccasionProfile]:
    """Return the profile for an occasion, or ``None`` when it is not recognised."""

    parsed = parse_occasion(occasion)
    if parsed is None:
        return None
    return OCCASION_PROFILES[parsed]


__all__ = [
    "FunctionalSlot",
    "Occasion",
    "AestheticStyle",
    "GarmentSource",
    "OccasionProfile",
    "SLOT_ALIASES",
    "COLORS",
    "COLOR_ALIASES",
    "COLOR_FAMILIES",
    "COMPLEMENTARY_PAIRS",
    "ANY_COLOR",
    "OCCASION_PROFILES",
    "LAYERED_OCCASIONS",
    "normalize_slot",
    "normalize_color_name",
    "normalize_style",
    "parse_occasion",
    "get_occasion_profile",
]
