"""Outfit scoring, candidate generation and selection tests."""
from __future__ import annotations

import random

from conftest import NoShuffle
from logic.outfit_builder import (
    COMPLETE_LOOK_BONUS,
    EXTENSION_BONUS,
    OutfitCandidate,
    build_candidates,
    partition_by_slot,
)
from logic.outfit_scoring import score_breakdown, score_outfit
from logic.outfit_selector import generate_outfits, select_outfits


def test_score_two_incompatible_items_without_occasion(garment) -> None:
    assert score_outfit([garment("Top", "red"), garment("Bottom", "blue")], None) == 10


def test_score_two_compatible_items_without_occasion(garment) -> None:
    assert score_outfit([garment("Top", "red"), garment("Bottom", "white")], None) == 20


def test_score_counts_every_pair_not_just_neighbours(garment) -> None:
    items = [garment("Top", "white"), garment("Bottom", "black"), garment("Shoes", "red")]
    assert score_outfit(items) == 15 + 30


def test_score_breakdown_for_office(garment) -> None:
    top = garment("Top", "white", style="Minimalist")
    bottom = garment("Bottom", "navy")
    breakdown = score_breakdown([top, bottom], "office")
    assert breakdown == {
        "presence": 10,
        "color_pairs": 10,
        "occasion_slot": 30,
        "occasion_color": 10,
        "occasion_style": 20,
        "total": 80,
    }


def test_unknown_occasion_scores_like_no_occasion(garment) -> None:
    items = [garment("Top", "white"), garment("Bottom", "navy")]
    assert score_outfit(items, "funeral") == score_outfit(items, None) == 20


def test_casual_accepts_any_color(garment) -> None:
    assert score_outfit([garment("Tops", "purple")], "casual") == 5 + 15 + 5


def test_generate_needs_at_least_two_items(garment) -> None:
    assert generate_outfits([], "office", 3) == []
    assert generate_outfits([garment("Top", "white")], "party", 3) == []
    assert build_candidates([], "office").diagnostics["reason"] == "insufficient_wardrobe"


def test_office_scenario_builds_top_bottom_and_shoe(garment) -> None:
    top = garment("Top", "white")
    bottom = garment("Bottom", "navy")
    shoe = garment("Shoes", "white")

    outfits = generate_outfits([top, bottom, shoe], "office", count=1, rng=random.Random(3))

    assert len(outfits) == 1
    outfit = outfits[0]
    assert outfit.items == [top, bottom, shoe]
    assert outfit.strategy == "top_bottom"
    # 10 presence + 10 pair + 30 slots + 10 office colors + 5 shoe bonus
    assert outfit.score == 65
    assert outfit.score >= 60


def test_first_compatible_shoe_is_used(garment) -> None:
    top = garment("Top", "red")
    bottom = garment("Bottom", "green")
    clashing = garment("Heels", "pink")
    matching = garment("Sneakers", "black")

    result = build_candidates([top, bottom, clashing, matching], "casual")

    assert [c.items for c in result.candidates] == [[top, bottom, matching]]


def test_outerwear_only_for_layered_occasions_on_top_bottom(garment) -> None:
    wardrobe = [garment("Top", "white"), garment("Bottom", "navy"), garment("Outerwear", "beige")]

    office = build_candidates(wardrobe, "office").candidates
    casual = build_candidates(wardrobe, "casual").candidates

    assert [item.item_id for item in office[0].items] == [w.item_id for w in wardrobe]
    assert len(casual[0].items) == 2
    assert office[0].score == score_outfit(wardrobe[:2], "office") + EXTENSION_BONUS


def test_complete_look_gets_shoes_and_outerwear_on_any_occasion(garment) -> None:
    dress = garment("Dress", "red")
    shoe = garment("Boots", "black")
    coat = garment("Outerwear", "gray")

    candidates = build_candidates([dress, shoe, coat], "casual").candidates

    assert len(candidates) == 1
    look = candidates[0]
    assert look.strategy == "complete_look"
    assert look.items == [dress, shoe, coat]
    assert look.score == score_outfit([dress], "casual") + COMPLETE_LOOK_BONUS + 2 * EXTENSION_BONUS == 45


def test_ethnic_wear_counts_as_complete_look(garment) -> None:
    partition = partition_by_slot([garment("Ethnic", "gold"), garment("Dresses", "pink"), garment("Top", "red")])
    assert len(partition.complete_looks) == 2
    assert len(partition.tops) == 1


def test_color_pair_fallback_when_no_standard_outfit(garment) -> None:
    top = garment("Top", "pink")
    bottom = garment("Bottom", "green")
    bag = garment("Accessories", "gray")

    result = build_candidates([top, bottom, bag], None)

    assert result.diagnostics["strategies"] == ["color_pair_fallback"]
    assert [[i.item_id for i in c.items] for c in result.candidates] == [
        [top.item_id, bag.item_id],
        [bottom.item_id, bag.item_id],
    ]
    assert all(c.score == 20 for c in result.candidates)


def test_random_fallback_ignores_color(garment) -> None:
    wardrobe = [garment("Bag", "pink"), garment("Belt", "green")]

    result = build_candidates(wardrobe, "date", rng=random.Random(7))

    assert result.diagnostics["strategies"] == ["random_fallback"]
    assert len(result.candidates) == 1
    candidate = result.candidates[0]
    assert candidate.score == 0
    assert sorted(i.item_id for i in candidate.items) == sorted(i.item_id for i in wardrobe)


def test_random_fallback_caps_at_three_items(garment) -> None:
    wardrobe = [garment("Bag", color) for color in ("pink", "green", "lavender", "mustard")]
    result = build_candidates(wardrobe, None, rng=random.Random(1))
    assert result.diagnostics["strategies"] == ["random_fallback"]
    assert len(result.candidates[0].items) == 3


def _candidates(scores):
    return [OutfitCandidate(items=[], score=score, strategy="test") for score in scores]


def test_selector_keeps_only_top_twenty() -> None:
    candidates = _candidates(range(25))
    for seed in range(10):
        picked = select_outfits(candidates, count=20, rng=random.Random(seed))
        assert len(picked) == 20
        assert min(c.score for c in picked) == 5


def test_selector_without_shuffle_returns_best_first() -> None:
    picked = select_outfits(_candidates([3, 9, 1, 7]), count=2, rng=NoShuffle())
    assert [c.score for c in picked] == [9, 7]


def test_selector_is_deterministic_with_seeded_rng() -> None:
    candidates = _candidates([5, 5, 5, 5, 4])
    first = select_outfits(candidates, count=3, rng=random.Random(42))
    second = select_outfits(candidates, count=3, rng=random.Random(42))
    assert [id(c) for c in first] == [id(c) for c in second]


def test_selector_handles_small_pools_and_zero_count() -> None:
    assert len(select_outfits(_candidates([1, 2]), count=5, rng=NoShuffle())) == 2
    assert select_outfits(_candidates([1, 2]), count=0) == []
