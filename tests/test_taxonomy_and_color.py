"""Attribute model and color compatibility tests."""

from __future__ import annotations

import pytest

from models import taxonomy
from models.color_theory import color_harmony_rule, colors_match
from models.garment import Garment, from_raw_metadata
from models.taxonomy import (
    AestheticStyle,
    FunctionalSlot,
    GarmentSource,
    Occasion,
    get_occasion_profile,
    normalize_color_name,
    normalize_slot,
    normalize_style,
)

ALL_COLORS = sorted(
    set(taxonomy.COLORS)
    | {color for members in taxonomy.COLOR_FAMILIES.values() for color in members}
    | set(taxonomy.COMPLEMENTARY_PAIRS)
)


@pytest.mark.parametrize("label", ["sneakers", "Heels", "FLATS", "boots", "sandals", "footwear", "Shoes"])
def test_footwear_labels_normalise_to_shoes(label: str) -> None:
    assert normalize_slot(label) is FunctionalSlot.SHOES


def test_normalize_slot_singular_and_plural() -> None:
    assert normalize_slot("Top") is FunctionalSlot.TOPS
    assert normalize_slot("bottoms") is FunctionalSlot.BOTTOMS
    assert normalize_slot("Dress") is FunctionalSlot.DRESSES
    assert normalize_slot("ethnic") is FunctionalSlot.ETHNIC
    assert normalize_slot(FunctionalSlot.OUTERWEAR) is FunctionalSlot.OUTERWEAR


def test_unknown_slot_passes_through_unchanged() -> None:
    assert normalize_slot("Accessories") == "Accessories"
    assert normalize_slot("") == ""
    assert normalize_slot(None) == ""
    assert not get_occasion_profile("office").prefers_slot("Accessories")


def test_color_and_style_normalisation() -> None:
    assert normalize_color_name(" Grey ") == "gray"
    assert normalize_color_name("Navy Blue") == "navy"
    assert normalize_color_name("Teal") == "teal"
    assert normalize_style("old money") is AestheticStyle.OLD_MONEY
    assert normalize_style("Vaporwave") == "Vaporwave"
    assert normalize_style("") is None


def test_occasion_profiles_cover_every_occasion() -> None:
    for occasion in Occasion:
        profile = get_occasion_profile(occasion)
        assert profile is not None
        assert profile.preferred_slots
        assert profile.styles
    assert get_occasion_profile("OFFICE").occasion is Occasion.OFFICE
    assert get_occasion_profile("funeral") is None
    assert get_occasion_profile(None) is None


def test_occasion_profile_matching_rules() -> None:
    office = get_occasion_profile("office")
    assert office.prefers_color("Navy")
    assert not office.prefers_color("red")
    assert office.prefers_style("minimalist")
    assert not office.prefers_style(None)
    assert get_occasion_profile("casual").prefers_color("chartreuse")


def test_garment_from_raw_metadata_accepts_classifier_fields() -> None:
    garment = from_raw_metadata(
        {"id": 7, "name": "Linen shirt", "color": "Off White", "category3": "Top", "category4": "Coastal"}
    )
    assert garment.item_id == "7"
    assert garment.title == "Linen shirt"
    assert garment.color == "white"
    assert garment.functional_slot is FunctionalSlot.TOPS
    assert garment.style == "Coastal"
    assert garment.source is GarmentSource.OWNED
    assert garment.summary() == "Linen shirt (white, tops)"

    external = from_raw_metadata({"item_id": "p1", "category": "Heels", "source": "shop"})
    assert external.source is GarmentSource.EXTERNAL
    assert external.functional_slot is FunctionalSlot.SHOES

    with pytest.raises(ValueError):
        from_raw_metadata({"color": "red"})


def test_garment_blank_style_is_none() -> None:
    assert Garment(item_id="x", style="  ").style is None


@pytest.mark.parametrize("color", ALL_COLORS)
def test_every_color_matches_itself(color: str) -> None:
    assert colors_match(color, color)
    assert colors_match(color.upper(), color)


@pytest.mark.parametrize("color", ALL_COLORS)
def test_missing_color_is_a_wildcard(color: str) -> None:
    assert colors_match("", color)
    assert colors_match(color, "")
    assert colors_match(None, color)
    assert colors_match(color, None)


@pytest.mark.parametrize("neutral", taxonomy.COLOR_FAMILIES["neutral"])
def test_neutrals_match_everything(neutral: str) -> None:
    for other in ALL_COLORS:
        assert colors_match(neutral, other)
        assert colors_match(other, neutral)


def test_complementary_lookup_is_directional() -> None:
    # green lists pink, pink does not list green.
    assert colors_match("green", "pink") is True
    assert colors_match("pink", "green") is False
    # blue has an entry without mint, so the family check is never reached.
    assert colors_match("blue", "mint") is False
    assert colors_match("mint", "blue") is True
    assert color_harmony_rule("mint", "blue") == "family:cool"


def test_family_membership_and_incompatible_colors() -> None:
    assert colors_match("peach", "coral")
    assert color_harmony_rule("peach", "coral") == "family:warm"
    assert colors_match("lavender", "mustard") is False
    assert colors_match("red", "blue") is False
    assert color_harmony_rule("red", "blue") == "none"


def test_harmony_rule_names() -> None:
    assert color_harmony_rule("", "red") == "wildcard"
    assert color_harmony_rule("Grey", "gray") == "monochrome"
    assert color_harmony_rule("khaki", "purple") == "neutral"
    assert color_harmony_rule("orange", "teal") == "complementary"
    assert colors_match("black", "purple")


def test_color_oracle_is_total_for_non_string_input() -> None:
    assert colors_match(5, "red") is False
    assert colors_match(5, 5) is True
    assert colors_match(5, "black") is True
    assert color_harmony_rule(0, "red") == "wildcard"
    assert normalize_slot(7) == 7
    assert normalize_color_name(AestheticStyle.BOHO) == "boho"
