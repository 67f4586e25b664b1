"""Score and rank shop products against a user's preference profile."""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Set, Tuple

from models.preferences import PreferenceProfile, ShopProduct

logger = logging.getLogger(__name__)

WEIGHTS = {
    "gender": 20,
    "color": 15,
    "style": 15,
    "material": 10,
    "fit_type": 10,
    "size": 10,
}
MAX_SCORE = sum(WEIGHTS.values())
UNISEX = "unisex"


def _lowered(values: Iterable[object]) -> Set[str]:
    return {key for key in (_key(value) for value in values) if key}


def _key(value: object) -> str:
    if value is None:
        return ""
    return str(value).strip().lower()


def score_product(product: ShopProduct, preferences: Optional[PreferenceProfile]) -> int:
    """Additive preference match score between 0 and :data:`MAX_SCORE`.

    A facet only contributes when both the product and the profile carry a
    value for it. Missing preferences score 0.
    """

    if preferences is None:
        return 0
    score = 0

    product_gender, preferred_gender = _key(product.gender), _key(preferences.gender)
    if product_gender and preferred_gender and product_gender in {preferred_gender, UNISEX}:
        score += WEIGHTS["gender"]

    product_color = _key(product.color)
    if product_color and product_color in _lowered(preferences.preferred_colors):
        score += WEIGHTS["color"]

    preferred_styles = _lowered(preferences.preferred_styles)
    if preferred_styles:
        product_styles = _lowered(product.styles)
        if _key(product.style) in preferred_styles or product_styles & preferred_styles:
            score += WEIGHTS["style"]

    product_material = _key(product.material)
    if product_material and product_material in _lowered(preferences.materials):
        score += WEIGHTS["material"]

    product_fit = _key(product.fit_type)
    if product_fit and product_fit in _lowered(preferences.fit_types):
        score += WEIGHTS["fit_type"]

    if _lowered(product.sizes) & _lowered(preferences.sizes):
        score += WEIGHTS["size"]

    return score


def within_price_range(product: ShopProduct, preferences: Optional[PreferenceProfile]) -> bool:
    """Return True when the product price sits inside the preferred range.

    Unpriced products and open-ended bounds always pass.
    """

    if preferences is None or product.price is None:
        return True
    if preferences.min_price is not None and product.price < preferences.min_price:
        return False
    if preferences.max_price is not None and product.price > preferences.max_price:
        return False
    return True


def rank_products(
    products: Iterable[ShopProduct],
    preferences: Optional[PreferenceProfile],
    min_score: int = 0,
    limit: Optional[int] = None,
    respect_price_range: bool = False,
) -> List[Tuple[ShopProduct, int]]:
    """Return ``(product, score)`` pairs sorted by descending score."""

    scored: List[Tuple[ShopProduct, int]] = []
    for product in products:
        if respect_price_range and not within_price_range(product, preferences):
            continue
        score = score_product(product, preferences)
        if score >= min_score:
            scored.append((product, score))
    scored.sort(key=lambda pair: pair[1], reverse=True)
    if limit is not None:
        scored = scored[: max(limit, 0)]
    logger.info("Ranked %s products (min_score=%s)", len(scored), min_score)
    return scored


__all__ = ["score_product", "rank_products", "within_price_range", "WEIGHTS", "MAX_SCORE"]
