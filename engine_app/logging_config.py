"""Structured JSON logging for the styling engine.

Every record carries the service name and the correlation id of the current
request. Wardrobe contents, prompts and URLs are scrubbed before they reach
the log stream: collections of garments or products are reduced to counts.
"""

from __future__ import annotations

import contextlib
import contextvars
import json
import logging
import os
import re
import uuid
from typing import Any, Dict, Iterator, Mapping

SERVICE_NAME = "outfit-engine"
CORRELATION_ID: contextvars.ContextVar[str | None] = contextvars.ContextVar("correlation_id", default=None)

# Attributes every LogRecord has; anything else came in through ``extra``.
_RECORD_ATTRIBUTES = frozenset(vars(logging.LogRecord("", 0, "", 0, "", (), None))) | {"message", "asctime"}
_REDACT_KEYS = frozenset({"user_id", "email", "title", "prompt", "system_prompt", "user_prompt", "preferences"})
_COUNT_KEYS = frozenset({"wardrobe", "outfit_items", "items", "products", "candidates"})
_EMAIL_PATTERN = re.compile(r"[\w.\-]+@[\w.\-]+")
_URL_PATTERN = re.compile(r"https?://\S+", re.IGNORECASE)


class JsonFormatter(logging.Formatter):
    """Render records as one JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:  # noqa: D401
        message = record.getMessage()
        payload: Dict[str, Any] = {
            "timestamp": self.formatTime(record, datefmt="%Y-%m-%dT%H:%M:%S%z"),
            "level": record.levelname,
            "service": SERVICE_NAME,
            "logger": record.name,
            "event": getattr(record, "event", None) or message,
            "message": message,
            "correlation_id": getattr(record, "correlation_id", None) or CORRELATION_ID.get(),
        }
        for key, value in record.__dict__.items():
            if key in _RECORD_ATTRIBUTES or key in payload:
                continue
            payload[key] = redact_for_log(value, key)
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


def configure_logging(level: int | str | None = None) -> None:
    """Install the JSON stream handler on the root logger.

    Safe to call repeatedly: an existing JSON handler is reused and handlers
    installed by someone else (test harnesses, uvicorn) are left alone.
    """

    root = logging.getLogger()
    root.setLevel(level or os.getenv("LOG_LEVEL", "INFO"))
    if any(isinstance(handler.formatter, JsonFormatter) for handler in root.handlers):
        return
    handler = logging.StreamHandler()
    handler.setFormatter(JsonFormatter())
    root.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """Return a module logger, configuring JSON output on first use."""

    if not logging.getLogger().handlers:
        configure_logging()
    return logging.getLogger(name)


def _redact_string(value: str) -> str:
    value = _EMAIL_PATTERN.sub("[redacted-email]", value)
    return _URL_PATTERN.sub("[redacted-url]", value)


def redact_for_log(payload: Any, key: str | None = None) -> Any:
    """Scrub user details from a log field.

    ``key`` is the field name the value was logged under. Garment and product
    collections become ``"<n items>"`` so log volume stays flat regardless of
    wardrobe size.
    """

    if key in _REDACT_KEYS and payload is not None:
        return "[redacted]"
    if key in _COUNT_KEYS and isinstance(payload, (list, tuple)):
        return f"<{len(payload)} items>"
    if payload is None or isinstance(payload, (bool, int, float)):
        return payload
    if isinstance(payload, str):
        return _redact_string(payload)
    if isinstance(payload, (list, tuple)):
        return [redact_for_log(item) for item in payload]
    if isinstance(payload, Mapping):
        return {name: redact_for_log(value, name) for name, value in payload.items()}
    return _redact_string(str(payload))


def ensure_correlation_id(correlation_id: str | None = None) -> str:
    """Return the active correlation id, assigning one when none is set."""

    if correlation_id:
        CORRELATION_ID.set(correlation_id)
        return correlation_id
    current = CORRELATION_ID.get()
    if current:
        return current
    new_id = uuid.uuid4().hex
    CORRELATION_ID.set(new_id)
    return new_id


@contextlib.contextmanager
def correlation_context(correlation_id: str | None = None) -> Iterator[str]:
    """Scope a correlation id to one request and restore the previous one after."""

    token = CORRELATION_ID.set(correlation_id or uuid.uuid4().hex)
    try:
        yield CORRELATION_ID.get()
    finally:
        CORRELATION_ID.reset(token)


def log_event(logger: logging.Logger, level: int, event: str, **fields: Any) -> None:
    """Log a named event with structured fields under the active correlation id."""

    correlation_id = ensure_correlation_id(fields.pop("correlation_id", None))
    exc_info = fields.pop("exc_info", None)
    extra = {name: redact_for_log(value, name) for name, value in fields.items() if name not in _RECORD_ATTRIBUTES}
    logger.log(level, event, exc_info=exc_info, extra={"event": event, "correlation_id": correlation_id, **extra})


__all__ = [
    "SERVICE_NAME",
    "JsonFormatter",
    "configure_logging",
    "correlation_context",
    "ensure_correlation_id",
    "get_logger",
    "log_event",
    "redact_for_log",
]
