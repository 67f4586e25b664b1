"""Deterministic additive scoring for candidate outfits."""

from __future__ import annotations

from itertools import combinations
from typing import Dict, Sequence

from models.color_theory import colors_match
from models.garment import Garment
from models.taxonomy import Occasion, get_occasion_profile

WEIGHTS = {
    "presence": 5,
    "color_pair": 10,
    "occasion_slot": 15,
    "occasion_color": 5,
    "occasion_style": 20,
}


def score_breakdown(items: Sequence[Garment], occasion: Occasion | str | None = None) -> Dict[str, int]:
    """Return each scoring component and their ``total``.

    Scores are not normalised by outfit size: every extra item and every
    matched occasion facet adds points.
    """

    presence = len(items) * WEIGHTS["presence"]
    color_pairs = sum(
        WEIGHTS["color_pair"] for first, second in combinations(items, 2) if colors_match(first.color, second.color)
    )

    occasion_slot = occasion_color = occasion_style = 0
    profile = get_occasion_profile(occasion) if occasion else None
    if profile is not None:
        for item in items:
            if profile.prefers_slot(item.functional_slot):
                occasion_slot += WEIGHTS["occasion_slot"]
            if profile.prefers_color(item.color):
                occasion_color += WEIGHTS["occasion_color"]
            if profile.prefers_style(item.style):
                occasion_style += WEIGHTS["occasion_style"]

    return {
        "presence": presence,
        "color_pairs": color_pairs,
        "occasion_slot": occasion_slot,
        "occasion_color": occasion_color,
        "occasion_style": occasion_style,
        "total": presence + color_pairs + occasion_slot + occasion_color + occasion_style,
    }


def score_outfit(items: Sequence[Garment], occasion: Occasion | str | None = None) -> int:
    """Calculate the additive desirability score for a set of garments."""

    return score_breakdown(items, occasion)["total"]


__all__ = ["score_outfit", "score_breakdown", "WEIGHTS"]
