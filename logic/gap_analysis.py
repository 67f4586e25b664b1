"""Wardrobe gap analysis: what is missing to complete an outfit."""

from __future__ import annotations

import json
import logging
import re
from typing import Any, Dict, List, Sequence

from pydantic import ValidationError

from engine_app.config import DEFAULT_GAP_MAX_TOKENS, DEFAULT_GAP_TEMPERATURE
from engine_app.errors import OracleNotConfiguredError, OracleUnavailableError
from engine_app.logging_config import log_event
from logic.safety import gap_analysis_prompts
from logic.validation import GapSuggestionPayload
from models.gap_suggestion import GapSuggestion, build_search_url
from models.garment import Garment
from models.taxonomy import FunctionalSlot, Occasion, get_occasion_profile
from tools.text_oracle import TextCompletionOracle

logger = logging.getLogger(__name__)

MAX_SUGGESTIONS = 3
_CODE_FENCE = re.compile(r"```(?:json)?\n?")


def _summarise(items: Sequence[Garment]) -> str:
    return ", ".join(item.summary() for item in items)


def strip_code_fences(content: str) -> str:
    return _CODE_FENCE.sub("", content or "").strip()


def parse_gap_response(content: str) -> List[GapSuggestion]:
    """Turn raw oracle text into validated suggestions.

    Anything that is not a JSON array yields no suggestions. Entries without a
    usable ``term`` are skipped.
    """

    try:
        parsed = json.loads(strip_code_fences(content))
    except (json.JSONDecodeError, TypeError):
        logger.warning("Gap analysis response was not valid JSON")
        return []
    if not isinstance(parsed, list):
        logger.warning("Gap analysis response was not a list")
        return []

    suggestions: List[GapSuggestion] = []
    for entry in parsed:
        try:
            payload = GapSuggestionPayload.model_validate(entry)
        except ValidationError as exc:
            logger.debug("Skipping malformed gap entry: %s", exc.errors())
            continue
        suggestions.append(
            GapSuggestion(
                term=payload.term,
                description=payload.description,
                search_url=build_search_url(payload.term),
            )
        )
        if len(suggestions) >= MAX_SUGGESTIONS:
            break
    return suggestions


class GapIdentifier:
    """Asks a text-completion oracle which items would complete an outfit."""

    def __init__(
        self,
        oracle: TextCompletionOracle,
        max_tokens: int = DEFAULT_GAP_MAX_TOKENS,
        temperature: float = DEFAULT_GAP_TEMPERATURE,
    ) -> None:
        self.oracle = oracle
        self.max_tokens = max_tokens
        self.temperature = temperature

    async def identify_gaps(
        self,
        wardrobe: Sequence[Garment],
        outfit_items: Sequence[Garment],
        occasion_label: str,
    ) -> List[GapSuggestion]:
        """Return up to three suggested purchases; never raises for oracle problems."""

        if not self.oracle.is_configured():
            logger.info("Text oracle not configured; skipping gap analysis")
            return []

        system_prompt, user_prompt = gap_analysis_prompts(
            occasion_label, _summarise(outfit_items), _summarise(wardrobe)
        )
        try:
            content = await self.oracle.complete(
                system_prompt, user_prompt, max_tokens=self.max_tokens, temperature=self.temperature
            )
        except OracleNotConfiguredError:
            logger.info("Text oracle reported missing configuration")
            return []
        except OracleUnavailableError as exc:
            log_event(logger, logging.WARNING, "gap_analysis_failed", error=str(exc))
            return []
        except Exception as exc:  # noqa: BLE001
            # Oracle adapters are pluggable and may leak their own client errors.
            log_event(logger, logging.ERROR, "gap_analysis_failed", error=str(exc), exc_info=True)
            return []

        suggestions = parse_gap_response(content)
        log_event(
            logger,
            logging.INFO,
            "gap_analysis_completed",
            occasion=occasion_label,
            suggestion_count=len(suggestions),
        )
        return suggestions


def suggest_missing_categories(
    wardrobe: Sequence[Garment], occasion: Occasion | str | None = None
) -> List[Dict[str, Any]]:
    """Offline gap heuristic: slots an occasion favours that the wardrobe lacks."""

    owned = {item.functional_slot for item in wardrobe}
    suggestions: List[Dict[str, Any]] = []

    profile = get_occasion_profile(occasion) if occasion else None
    if profile is not None:
        for slot in profile.preferred_slots:
            if slot not in owned:
                suggestions.append(
                    {
                        "category": slot.value,
                        "reason": f"Perfect for {profile.occasion.value}",
                        "styles": [style.value for style in profile.styles],
                    }
                )

    staples = (
        (FunctionalSlot.TOPS, "Wardrobe staple"),
        (FunctionalSlot.BOTTOMS, "Wardrobe staple"),
        (FunctionalSlot.SHOES, "Complete your look"),
    )
    for slot, reason in staples:
        if slot not in owned:
            suggestions.append({"category": slot.value, "reason": reason})
    return suggestions


__all__ = [
    "GapIdentifier",
    "parse_gap_response",
    "strip_code_fences",
    "suggest_missing_categories",
    "MAX_SUGGESTIONS",
]
