"""Text-completion oracle interface and the Gemini-backed implementation."""

from __future__ import annotations

import logging
from typing import Optional

import google.generativeai as genai
from google.api_core import exceptions as google_exceptions

from engine_app.config import DEFAULT_GEMINI_MODEL
from engine_app.errors import OracleNotConfiguredError, OracleUnavailableError

logger = logging.getLogger(__name__)


class TextCompletionOracle:
    """Prompt in, text out."""

    def is_configured(self) -> bool:
        raise NotImplementedError

    async def complete(
        self, system_prompt: str, user_prompt: str, max_tokens: int, temperature: float
    ) -> str:
        raise NotImplementedError


class GeminiTextOracle(TextCompletionOracle):
    """Completion oracle backed by ``google.generativeai``.

    Without an API key the oracle reports itself unconfigured and
    :meth:`complete` raises :class:`OracleNotConfiguredError`.
    """

    def __init__(self, api_key: Optional[str] = None, model: str = DEFAULT_GEMINI_MODEL) -> None:
        self.api_key = api_key
        self.model = model
        if api_key:
            genai.configure(api_key=api_key)

    def is_configured(self) -> bool:
        return bool(self.api_key)

    async def complete(
        self, system_prompt: str, user_prompt: str, max_tokens: int, temperature: float
    ) -> str:
        if not self.is_configured():
            raise OracleNotConfiguredError("Gemini API key not configured")

        model = genai.GenerativeModel(self.model, system_instruction=system_prompt or None)
        config = genai.GenerationConfig(max_output_tokens=max_tokens, temperature=temperature)
        try:
            response = await model.generate_content_async(user_prompt, generation_config=config)
        except google_exceptions.GoogleAPIError as exc:
            logger.error("Gemini request failed: %s", exc)
            raise OracleUnavailableError(f"Gemini request failed: {exc}") from exc
        except Exception as exc:  # noqa: BLE001
            logger.error("Unexpected Gemini client error: %s", exc)
            raise OracleUnavailableError(f"Gemini client error: {exc}") from exc

        try:
            return response.text or ""
        except ValueError:
            # Blocked or empty candidates have no text part.
            logger.warning("Gemini returned no text candidates")
            return ""


__all__ = ["TextCompletionOracle", "GeminiTextOracle"]
