"""Randomized top-K outfit selection.

Candidates are ranked by score, the best ``top_k`` are shuffled and the first
``count`` returned. Asking twice for the same occasion therefore usually gives
a different but comparably good outfit.
"""
from __future__ import annotations

import logging
import random
from typing import List, Optional, Sequence

from logic.outfit_builder import OutfitCandidate, Shuffler, build_candidates
from models.garment import Garment
from models.taxonomy import Occasion

logger = logging.getLogger(__name__)

DEFAULT_TOP_K = 20


def select_outfits(
    candidates: Sequence[OutfitCandidate],
    count: int,
    rng: Optional[Shuffler] = None,
    top_k: int = DEFAULT_TOP_K,
) -> List[OutfitCandidate]:
    """Return ``count`` outfits drawn from the ``top_k`` best candidates."""

    ranked = sorted(candidates, key=lambda candidate: candidate.score, reverse=True)
    shortlist = ranked[: min(top_k, len(ranked))]
    (rng or random.Random()).shuffle(shortlist)
    return shortlist[: max(count, 0)]


def generate_outfits(
    wardrobe: Sequence[Garment],
    occasion: Occasion | str | None,
    count: int = 1,
    rng: Optional[Shuffler] = None,
    top_k: int = DEFAULT_TOP_K,
) -> List[OutfitCandidate]:
    """Assemble, score and pick ``count`` outfits from a wardrobe."""

    shuffler = rng or random.Random()
    build = build_candidates(wardrobe, occasion, rng=shuffler)
    selected = select_outfits(build.candidates, count, rng=shuffler, top_k=top_k)
    logger.info(
        "Selected %s of %s candidates for occasion=%s",
        len(selected),
        len(build.candidates),
        occasion,
    )
    return selected


__all__ = ["select_outfits", "generate_outfits", "DEFAULT_TOP_K"]
