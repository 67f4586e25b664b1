"""Pydantic schemas for HTTP payloads and oracle output."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, field_validator


class GapSuggestionPayload(BaseModel):
    """One entry of the oracle's gap analysis JSON array."""

    term: str = Field(min_length=1)
    description: str = ""

    @field_validator("term")
    @classmethod
    def _strip_term(cls, term: str) -> str:
        stripped = term.strip()
        if not stripped:
            raise ValueError("term cannot be blank")
        return stripped

    @field_validator("description", mode="before")
    @classmethod
    def _coerce_description(cls, value: Any) -> str:
        return "" if value is None else str(value)


class OutfitRequest(BaseModel):
    """Request body for outfit generation."""

    user_id: Optional[str] = None
    occasion: str = Field(min_length=1)
    count: int = Field(default=1, ge=1, le=20)
    wardrobe: Optional[List[Dict[str, Any]]] = None
    seed: Optional[int] = None


class ProductRankRequest(BaseModel):
    """Request body for shop product ranking."""

    user_id: Optional[str] = None
    products: List[Dict[str, Any]]
    preferences: Optional[Dict[str, Any]] = None
    min_score: int = 0
    limit: Optional[int] = Field(default=None, ge=1)
    respect_price_range: bool = False


class GapRequest(BaseModel):
    """Request body for wardrobe gap analysis."""

    user_id: Optional[str] = None
    occasion: str = Field(min_length=1)
    outfit_items: List[Dict[str, Any]]
    wardrobe: Optional[List[Dict[str, Any]]] = None
    cache_results: bool = True


__all__ = [
    "GapSuggestionPayload",
    "OutfitRequest",
    "ProductRankRequest",
    "GapRequest",
]
