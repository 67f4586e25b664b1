"""FastAPI server exposing the styling engine to the surrounding application."""

from __future__ import annotations

import random
from dataclasses import asdict
from typing import List

from fastapi import FastAPI, HTTPException, Query, Request
from fastapi.responses import JSONResponse

from engine_app.app import StylingEngineApp
from engine_app.errors import CollaboratorUnavailableError
from engine_app.logging_config import correlation_context
from logic.validation import GapRequest, OutfitRequest, ProductRankRequest
from models.garment import Garment, from_raw_metadata
from models.preferences import PreferenceProfile, ShopProduct


def _garments(records: List[dict]) -> List[Garment]:
    try:
        return [from_raw_metadata(record) for record in records]
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc


def create_app(engine: StylingEngineApp | None = None) -> FastAPI:
    """Build the FastAPI app around a (possibly injected) engine."""

    styling_engine = engine or StylingEngineApp()
    app = FastAPI(title="Outfit Engine", version="0.1.0")
    app.state.engine = styling_engine

    @app.middleware("http")
    async def bind_correlation_id(request: Request, call_next):
        with correlation_context(request.headers.get("x-request-id")) as correlation_id:
            response = await call_next(request)
        response.headers["x-request-id"] = correlation_id
        return response

    @app.exception_handler(CollaboratorUnavailableError)
    async def collaborator_unavailable(_: Request, exc: CollaboratorUnavailableError) -> JSONResponse:
        return JSONResponse(status_code=503, content={"status": "unavailable", "message": str(exc)})

    @app.get("/healthz")
    async def healthcheck() -> dict:
        """Lightweight readiness probe."""

        return styling_engine.healthcheck()

    @app.post("/outfits")
    async def suggest_outfits(request: OutfitRequest) -> dict:
        """Generate outfits for an occasion."""

        if request.wardrobe is None and not request.user_id:
            raise HTTPException(status_code=422, detail="Provide a user_id or an explicit wardrobe")
        wardrobe = _garments(request.wardrobe) if request.wardrobe is not None else None
        rng = random.Random(request.seed) if request.seed is not None else None
        return styling_engine.suggest_outfits(
            request.occasion, user_id=request.user_id, count=request.count, wardrobe=wardrobe, rng=rng
        )

    @app.post("/products/rank")
    async def rank_products(request: ProductRankRequest) -> dict:
        """Rank shop products against the user's preferences."""

        try:
            products = [ShopProduct.from_raw(raw) for raw in request.products]
        except ValueError as exc:
            raise HTTPException(status_code=422, detail=str(exc)) from exc
        preferences = PreferenceProfile.from_raw(request.preferences) if request.preferences is not None else None
        ranked = styling_engine.rank_shop_products(
            products,
            user_id=request.user_id,
            preferences=preferences,
            min_score=request.min_score,
            limit=request.limit,
            respect_price_range=request.respect_price_range,
        )
        return {"products": ranked}

    @app.post("/gaps")
    async def find_gaps(request: GapRequest) -> dict:
        """Suggest items that would complete an outfit."""

        wardrobe = _garments(request.wardrobe) if request.wardrobe is not None else None
        suggestions = await styling_engine.find_wardrobe_gaps(
            _garments(request.outfit_items),
            request.occasion,
            user_id=request.user_id,
            wardrobe=wardrobe,
            cache_results=request.cache_results,
        )
        return {"suggestions": [asdict(suggestion) for suggestion in suggestions]}

    @app.get("/gaps/cache")
    async def cached_gaps(terms: List[str] = Query(default=[])) -> dict:
        """Return cached missing-item records for the given terms."""

        return {"items": [asdict(record) for record in styling_engine.cached_missing_items(terms)]}

    return app


def get_app() -> FastAPI:
    """Expose a FastAPI instance for ASGI servers."""

    return create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("server.api:get_app", factory=True, host="0.0.0.0", port=int("8080"), reload=False)
