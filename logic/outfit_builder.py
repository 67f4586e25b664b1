"""Combinatorial outfit assembly with transparent diagnostics."""
from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Protocol, Sequence

from logic.outfit_scoring import score_outfit
from models.color_theory import colors_match
from models.garment import Garment
from models.taxonomy import LAYERED_OCCASIONS, FunctionalSlot, Occasion, parse_occasion

logger = logging.getLogger(__name__)

EXTENSION_BONUS = 5
COMPLETE_LOOK_BONUS = 10
RANDOM_FALLBACK_SIZE = 3


class Shuffler(Protocol):
    """Anything exposing ``random.Random.shuffle``."""

    def shuffle(self, x: list) -> None:  # pragma: no cover - protocol
        ...


@dataclass
class OutfitCandidate:
    items: List[Garment]
    score: int
    strategy: str

    def to_dict(self) -> Dict[str, object]:
        return {
            "items": [item.to_dict() for item in self.items],
            "score": self.score,
            "strategy": self.strategy,
        }


@dataclass(frozen=True)
class CandidateBuildResult:
    candidates: List[OutfitCandidate]
    diagnostics: Dict[str, object] = field(default_factory=dict)


@dataclass(frozen=True)
class SlotPartition:
    tops: List[Garment]
    bottoms: List[Garment]
    complete_looks: List[Garment]
    shoes: List[Garment]
    outerwear: List[Garment]

    def counts(self) -> Dict[str, int]:
        return {
            "tops": len(self.tops),
            "bottoms": len(self.bottoms),
            "complete_looks": len(self.complete_looks),
            "shoes": len(self.shoes),
            "outerwear": len(self.outerwear),
        }


def partition_by_slot(wardrobe: Sequence[Garment]) -> SlotPartition:
    """Group garments by normalised slot, keeping wardrobe order within groups."""

    def having(*slots: FunctionalSlot) -> List[Garment]:
        return [item for item in wardrobe if item.functional_slot in slots]

    return SlotPartition(
        tops=having(FunctionalSlot.TOPS),
        bottoms=having(FunctionalSlot.BOTTOMS),
        complete_looks=having(FunctionalSlot.DRESSES, FunctionalSlot.ETHNIC),
        shoes=having(FunctionalSlot.SHOES),
        outerwear=having(FunctionalSlot.OUTERWEAR),
    )


def _first_matching(pool: Sequence[Garment], anchors: Sequence[Garment]) -> Optional[Garment]:
    for candidate in pool:
        if any(colors_match(candidate.color, anchor.color) for anchor in anchors):
            return candidate
    return None


def _extend(candidate: OutfitCandidate, pool: Sequence[Garment], anchors: Sequence[Garment]) -> None:
    match = _first_matching(pool, anchors)
    if match is not None:
        candidate.items.append(match)
        candidate.score += EXTENSION_BONUS


def _top_bottom_candidates(partition: SlotPartition, occasion: Optional[Occasion]) -> List[OutfitCandidate]:
    candidates: List[OutfitCandidate] = []
    layered = occasion in LAYERED_OCCASIONS
    for top in partition.tops:
        for bottom in partition.bottoms:
            if not colors_match(top.color, bottom.color):
                continue
            candidate = OutfitCandidate(
                items=[top, bottom], score=score_outfit([top, bottom], occasion), strategy="top_bottom"
            )
            _extend(candidate, partition.shoes, (top, bottom))
            if layered:
                _extend(candidate, partition.outerwear, (top, bottom))
            candidates.append(candidate)
    return candidates


def _complete_look_candidates(partition: SlotPartition, occasion: Optional[Occasion]) -> List[OutfitCandidate]:
    candidates: List[OutfitCandidate] = []
    for look in partition.complete_looks:
        candidate = OutfitCandidate(
            items=[look],
            score=score_outfit([look], occasion) + COMPLETE_LOOK_BONUS,
            strategy="complete_look",
        )
        _extend(candidate, partition.shoes, (look,))
        # Outer layers go on any complete look, whatever the occasion.
        _extend(candidate, partition.outerwear, (look,))
        candidates.append(candidate)
    return candidates


def _color_pair_candidates(wardrobe: Sequence[Garment], occasion: Optional[Occasion]) -> List[OutfitCandidate]:
    candidates: List[OutfitCandidate] = []
    for index, first in enumerate(wardrobe):
        for second in wardrobe[index + 1:]:
            if colors_match(first.color, second.color):
                candidates.append(
                    OutfitCandidate(
                        items=[first, second],
                        score=score_outfit([first, second], occasion),
                        strategy="color_pair_fallback",
                    )
                )
    return candidates


def _random_candidate(wardrobe: Sequence[Garment], rng: Shuffler) -> OutfitCandidate:
    shuffled = list(wardrobe)
    rng.shuffle(shuffled)
    return OutfitCandidate(
        items=shuffled[: min(RANDOM_FALLBACK_SIZE, len(shuffled))], score=0, strategy="random_fallback"
    )


def build_candidates(
    wardrobe: Sequence[Garment],
    occasion: Occasion | str | None,
    rng: Optional[Shuffler] = None,
) -> CandidateBuildResult:
    """Enumerate unranked outfit candidates for an occasion.

    Top+bottom pairs and complete looks are tried first. Only when both yield
    nothing does the builder fall back to any color-compatible pair, and
    after that to a random handful of items.
    """

    diagnostics: Dict[str, object] = {"wardrobe_size": len(wardrobe), "strategies": []}
    if len(wardrobe) < 2:
        logger.info("Wardrobe has %s items; no outfit possible", len(wardrobe))
        diagnostics["reason"] = "insufficient_wardrobe"
        return CandidateBuildResult(candidates=[], diagnostics=diagnostics)

    parsed_occasion = parse_occasion(occasion)
    partition = partition_by_slot(wardrobe)
    diagnostics["slot_counts"] = partition.counts()
    logger.info("Outfit generation slot counts: %s", diagnostics["slot_counts"])

    candidates = _top_bottom_candidates(partition, parsed_occasion)
    candidates.extend(_complete_look_candidates(partition, parsed_occasion))
    if candidates:
        diagnostics["strategies"].append("primary")

    if not candidates:
        logger.info("No standard combinations, trying color pair fallback")
        candidates = _color_pair_candidates(wardrobe, parsed_occasion)
        if candidates:
            diagnostics["strategies"].append("color_pair_fallback")

    if not candidates:
        logger.info("Using random combination fallback")
        candidates = [_random_candidate(wardrobe, rng or random.Random())]
        diagnostics["strategies"].append("random_fallback")

    diagnostics["candidate_count"] = len(candidates)
    logger.info("Generated %s outfit candidates", len(candidates))
    return CandidateBuildResult(candidates=candidates, diagnostics=diagnostics)


__all__ = [
    "OutfitCandidate",
    "CandidateBuildResult",
    "SlotPartition",
    "Shuffler",
    "partition_by_slot",
    "build_candidates",
    "EXTENSION_BONUS",
    "COMPLETE_LOOK_BONUS",
]
