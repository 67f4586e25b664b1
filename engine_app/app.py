"""Styling engine bootstrap: wires stores, the oracle and the matching logic."""

from __future__ import annotations

import logging
import random
from typing import Any, Dict, Iterable, List, Optional, Sequence

from engine_app.config import EngineConfig
from engine_app.logging_config import configure_logging, get_logger, log_event
from logic.gap_analysis import GapIdentifier, suggest_missing_categories
from logic.outfit_builder import OutfitCandidate, Shuffler
from logic.outfit_scoring import score_breakdown
from logic.outfit_selector import generate_outfits
from logic.product_ranking import rank_products
from memory.preference_store import PreferenceStore
from models.gap_suggestion import GapSuggestion, MissingItemRecord
from models.garment import Garment
from models.preferences import PreferenceProfile, ShopProduct
from tools.missing_item_cache import MissingItemCache, SQLiteMissingItemCache
from tools.observability import instrument_operation
from tools.text_oracle import GeminiTextOracle, TextCompletionOracle
from tools.wardrobe_store import SQLiteWardrobeStore, WardrobeStore

LOGGER = get_logger(__name__)


class StylingEngineApp:
    """Entry point used by the HTTP layer and the demo script.

    Collaborators default to the local SQLite/JSON stores and the Gemini
    oracle, and can be swapped for tests.
    """

    def __init__(
        self,
        config: EngineConfig | None = None,
        wardrobe_store: WardrobeStore | None = None,
        preference_store: PreferenceStore | None = None,
        missing_item_cache: MissingItemCache | None = None,
        oracle: TextCompletionOracle | None = None,
        rng: Shuffler | None = None,
    ) -> None:
        self.config = config or EngineConfig.from_env()
        configure_logging()
        self.wardrobe_store = wardrobe_store or SQLiteWardrobeStore(self.config.wardrobe_db_path)
        self.preference_store = preference_store or PreferenceStore(self.config.preferences_dir)
        self.missing_item_cache = missing_item_cache or SQLiteMissingItemCache(self.config.missing_items_db_path)
        self.oracle = oracle or GeminiTextOracle(api_key=self.config.api_key, model=self.config.model)
        self.gap_identifier = GapIdentifier(
            self.oracle,
            max_tokens=self.config.gap_max_tokens,
            temperature=self.config.gap_temperature,
        )
        self.rng = rng or random.Random()

    def _resolve_wardrobe(self, user_id: Optional[str], wardrobe: Optional[Sequence[Garment]]) -> List[Garment]:
        if wardrobe is not None:
            return list(wardrobe)
        if not user_id:
            return []
        return self.wardrobe_store.list_garments(user_id)

    @instrument_operation("suggest_outfits")
    def suggest_outfits(
        self,
        occasion: str,
        user_id: Optional[str] = None,
        count: int = 1,
        wardrobe: Optional[Sequence[Garment]] = None,
        rng: Optional[Shuffler] = None,
    ) -> Dict[str, Any]:
        """Generate outfits for an occasion from a stored or supplied wardrobe."""

        garments = self._resolve_wardrobe(user_id, wardrobe)
        outfits: List[OutfitCandidate] = generate_outfits(
            garments, occasion, count=count, rng=rng or self.rng, top_k=self.config.selection_top_k
        )
        log_event(
            LOGGER,
            logging.INFO,
            "outfits_suggested",
            occasion=occasion,
            wardrobe_size=len(garments),
            returned=len(outfits),
        )
        return {
            "occasion": occasion,
            "outfits": [
                {**outfit.to_dict(), "breakdown": score_breakdown(outfit.items, occasion)} for outfit in outfits
            ],
            "missing_categories": suggest_missing_categories(garments, occasion),
        }

    @instrument_operation("rank_shop_products")
    def rank_shop_products(
        self,
        products: Iterable[ShopProduct],
        user_id: Optional[str] = None,
        preferences: Optional[PreferenceProfile] = None,
        min_score: int = 0,
        limit: Optional[int] = None,
        respect_price_range: bool = False,
    ) -> List[Dict[str, Any]]:
        """Rank catalog products against explicit or stored preferences."""

        profile = preferences
        if profile is None and user_id:
            profile = self.preference_store.get(user_id)
        ranked = rank_products(
            products, profile, min_score=min_score, limit=limit, respect_price_range=respect_price_range
        )
        return [{"product": product.to_dict(), "score": score} for product, score in ranked]

    @instrument_operation("find_wardrobe_gaps")
    async def find_wardrobe_gaps(
        self,
        outfit_items: Sequence[Garment],
        occasion: str,
        user_id: Optional[str] = None,
        wardrobe: Optional[Sequence[Garment]] = None,
        cache_results: bool = True,
    ) -> List[GapSuggestion]:
        """Ask the oracle for missing pieces and optionally cache their terms."""

        garments = self._resolve_wardrobe(user_id, wardrobe)
        suggestions = await self.gap_identifier.identify_gaps(garments, outfit_items, occasion)
        if cache_results:
            for suggestion in suggestions:
                self.missing_item_cache.cache_missing_item(suggestion.term)
        return suggestions

    def cached_missing_items(self, terms: Iterable[str]) -> List[MissingItemRecord]:
        return self.missing_item_cache.get_cached_missing_items(terms)

    def healthcheck(self) -> Dict[str, Any]:
        return {
            "status": "ok",
            "service": "outfit-engine",
            "environment": self.config.environment or "local",
            "model": self.config.model,
            "oracle_configured": self.oracle.is_configured(),
        }


__all__ = ["StylingEngineApp"]
