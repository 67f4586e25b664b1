"""Product preference ranking tests."""

from __future__ import annotations

import pytest

from logic.product_ranking import MAX_SCORE, rank_products, score_product, within_price_range
from models.preferences import PreferenceProfile, ShopProduct


@pytest.fixture()
def full_profile() -> PreferenceProfile:
    return PreferenceProfile(
        gender="Female",
        preferred_styles=["Old Money", "Minimalist"],
        preferred_colors=["Red", "cream"],
        materials=["silk"],
        fit_types=["slim"],
        sizes=["M", "L"],
        min_price=500,
        max_price=2500,
    )


def test_absent_preferences_score_zero() -> None:
    assert score_product(ShopProduct(product_id="p1", gender="female", color="red"), None) == 0


def test_gender_color_and_style_only_scores_fifty(full_profile: PreferenceProfile) -> None:
    product = ShopProduct(
        product_id="p1",
        gender="female",
        color="RED",
        style="old money",
        material="cotton",
        fit_type="relaxed",
        sizes=["XS"],
    )
    assert score_product(product, full_profile) == 50


def test_full_match_reaches_maximum(full_profile: PreferenceProfile) -> None:
    product = ShopProduct(
        product_id="p2",
        gender="unisex",
        color="cream",
        styles=["Streetwear", "minimalist"],
        material="Silk",
        fit_type="Slim",
        sizes=["s", "m"],
    )
    assert score_product(product, full_profile) == MAX_SCORE == 80


def test_facets_need_values_on_both_sides() -> None:
    product = ShopProduct(product_id="p3", gender="", color="red", sizes=["M"])
    profile = PreferenceProfile(gender="female", preferred_colors=[], sizes=[])
    assert score_product(product, profile) == 0


def test_rank_products_orders_and_filters(full_profile: PreferenceProfile) -> None:
    weak = ShopProduct(product_id="weak", gender="male")
    middle = ShopProduct(product_id="middle", gender="female", color="blue")
    strong = ShopProduct(product_id="strong", gender="female", color="red", style="Minimalist")

    ranked = rank_products([weak, middle, strong], full_profile)
    assert [(p.product_id, s) for p, s in ranked] == [("strong", 50), ("middle", 20), ("weak", 0)]

    assert [p.product_id for p, _ in rank_products([weak, middle, strong], full_profile, min_score=20)] == [
        "strong",
        "middle",
    ]
    assert len(rank_products([weak, middle, strong], full_profile, limit=1)) == 1


def test_price_range_filter(full_profile: PreferenceProfile) -> None:
    cheap = ShopProduct(product_id="cheap", price=100)
    fair = ShopProduct(product_id="fair", price=1200)
    unpriced = ShopProduct(product_id="unpriced")

    assert not within_price_range(cheap, full_profile)
    assert within_price_range(fair, full_profile)
    assert within_price_range(unpriced, full_profile)
    ranked = rank_products([cheap, fair, unpriced], full_profile, respect_price_range=True)
    assert {p.product_id for p, _ in ranked} == {"fair", "unpriced"}


def test_profile_and_product_from_raw_accept_app_field_names() -> None:
    profile = PreferenceProfile.from_raw(
        {
            "gender": "female",
            "preferredColors": ["Black"],
            "preferredStyles": "Y2K",
            "fitType": ["oversized"],
            "sizes": ["S"],
            "priceRange": {"min": 0, "max": "999"},
        }
    )
    assert profile.preferred_colors == ["Black"]
    assert profile.preferred_styles == ["Y2K"]
    assert profile.fit_types == ["oversized"]
    assert profile.min_price == 0.0 and profile.max_price == 999.0

    product = ShopProduct.from_raw(
        {"id": 11, "name": "Baby tee", "gender": "Female", "color": "black", "category4": "Y2K", "fit_type": "Oversized", "sizes": ["s"]}
    )
    assert product.product_id == "11"
    assert product.style == "Y2K"
    assert score_product(product, profile) == 20 + 15 + 15 + 10 + 10

    with pytest.raises(ValueError):
        ShopProduct.from_raw({"name": "no id"})


def test_non_string_catalog_fields_are_scored_not_rejected(full_profile: PreferenceProfile) -> None:
    product = ShopProduct.from_raw({"id": "p", "color": 5, "gender": "female", "material": None, "sizes": [38, "M"]})

    assert product.color == "5"
    assert product.material is None
    # gender and size still match; the numeric color simply does not
    assert score_product(product, full_profile) == 20 + 10

    numeric_prefs = PreferenceProfile(preferred_colors=["5"])
    assert score_product(ShopProduct(product_id="q", color=5), numeric_prefs) == 15
