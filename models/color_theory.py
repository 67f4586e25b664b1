"""Color compatibility rules for outfit assembly."""
from __future__ import annotations

import logging
from typing import Optional

from models.taxonomy import (
    ANY_COLOR,
    COLOR_FAMILIES,
    COMPLEMENTARY_PAIRS,
    normalize_color_name,
)

logger = logging.getLogger(__name__)

_NEUTRALS = frozenset(COLOR_FAMILIES["neutral"])


def color_harmony_rule(color1: Optional[str], color2: Optional[str]) -> str:
    """Return the name of the rule that decides whether two colors work together.

    Rules are checked in order and the first hit wins: ``wildcard`` (a color is
    missing), ``monochrome``, ``neutral``, ``complementary`` (looked up by the
    first color only), ``family:<name>`` and finally ``none``. A first color
    with a complementary entry is decided by that entry alone, so it yields
    ``complementary`` or ``none`` without consulting the families.
    """

    if not color1 or not color2:
        return "wildcard"

    c1, c2 = normalize_color_name(color1), normalize_color_name(color2)
    if not c1 or not c2:
        return "wildcard"
    if c1 == c2:
        return "monochrome"
    if c1 in _NEUTRALS or c2 in _NEUTRALS:
        return "neutral"

    pairs = COMPLEMENTARY_PAIRS.get(c1)
    if pairs is not None:
        return "complementary" if ANY_COLOR in pairs or c2 in pairs else "none"

    for family, members in COLOR_FAMILIES.items():
        if c1 in members and c2 in members:
            return f"family:{family}"
    return "none"


def colors_match(color1: Optional[str], color2: Optional[str]) -> bool:
    """Return True when two garment colors can be worn together.

    The complementary table is directional, so ``colors_match(a, b)`` and
    ``colors_match(b, a)`` may disagree when only one side has an entry.
    """

    rule = color_harmony_rule(color1, color2)
    result = rule != "none"
    logger.debug("colors_match(%s, %s) -> %s via %s", color1, color2, result, rule)
    return result


__all__ = ["colors_match", "color_harmony_rule"]
