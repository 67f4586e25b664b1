"""Shared fixtures for the outfit engine tests."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Callable, List, Optional

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from engine_app.config import EngineConfig
from models.garment import Garment
from tools.text_oracle import TextCompletionOracle


class FakeOracle(TextCompletionOracle):
    """Records prompts and replays a canned response or error."""

    def __init__(self, response: str = "[]", configured: bool = True, error: Optional[Exception] = None) -> None:
        self.response = response
        self.configured = configured
        self.error = error
        self.calls: List[dict] = []

    def is_configured(self) -> bool:
        return self.configured

    async def complete(self, system_prompt: str, user_prompt: str, max_tokens: int, temperature: float) -> str:
        self.calls.append(
            {
                "system_prompt": system_prompt,
                "user_prompt": user_prompt,
                "max_tokens": max_tokens,
                "temperature": temperature,
            }
        )
        if self.error is not None:
            raise self.error
        return self.response


class NoShuffle:
    """Shuffler that keeps the ranked order."""

    def shuffle(self, x: list) -> None:
        return None


@pytest.fixture()
def garment() -> Callable[..., Garment]:
    counter = {"n": 0}

    def _make(slot: str, color: str, style: str | None = None, **overrides) -> Garment:
        counter["n"] += 1
        item_id = overrides.pop("item_id", f"{slot.lower()}-{counter['n']}")
        title = overrides.pop("title", f"{color} {slot}".strip())
        return Garment(item_id=item_id, title=title, color=color, slot=slot, style=style, **overrides)

    return _make


@pytest.fixture()
def engine_config(tmp_path: Path) -> EngineConfig:
    return EngineConfig(
        wardrobe_db_path=str(tmp_path / "wardrobe.db"),
        preferences_dir=str(tmp_path / "preferences"),
        missing_items_db_path=str(tmp_path / "missing_items.db"),
    )
