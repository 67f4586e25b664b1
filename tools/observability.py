"""Observability helpers for instrumenting collaborator and facade calls."""

from __future__ import annotations

import functools
import inspect
import logging
import time
from typing import Any, Callable, TypeVar

from engine_app.logging_config import ensure_correlation_id, get_logger, log_event, redact_for_log

LOGGER = get_logger(__name__)
F = TypeVar("F", bound=Callable[..., Any])


def _preview_kwargs(kwargs: dict, max_keys: int = 6) -> dict:
    preview: dict = {}
    for idx, (key, value) in enumerate(kwargs.items()):
        if idx >= max_keys:
            preview["truncated"] = True
            break
        preview[key] = value if isinstance(value, (str, int, float, bool, type(None))) else type(value).__name__
    return redact_for_log(preview)


def instrument_operation(operation: str) -> Callable[[F], F]:
    """Wrap a sync or async callable to emit structured start/finish/failure logs."""

    def _started(kwargs: dict) -> tuple[str, float]:
        correlation_id = ensure_correlation_id()
        log_event(
            LOGGER,
            logging.INFO,
            "operation_started",
            operation=operation,
            correlation_id=correlation_id,
            kwargs=_preview_kwargs(kwargs),
        )
        return correlation_id, time.perf_counter()

    def _finished(event: str, correlation_id: str, start: float, level: int = logging.INFO, **extra: Any) -> None:
        log_event(
            LOGGER,
            level,
            event,
            operation=operation,
            correlation_id=correlation_id,
            duration_ms=round((time.perf_counter() - start) * 1000, 2),
            **extra,
        )

    def decorator(func: F) -> F:
        if inspect.iscoroutinefunction(func):

            @functools.wraps(func)
            async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
                correlation_id, start = _started(kwargs)
                try:
                    result = await func(*args, **kwargs)
                except Exception:
                    _finished("operation_failed", correlation_id, start, logging.ERROR, exc_info=True)
                    raise
                _finished("operation_completed", correlation_id, start)
                return result

            return async_wrapper  # type: ignore[return-value]

        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            correlation_id, start = _started(kwargs)
            try:
                result = func(*args, **kwargs)
            except Exception:
                _finished("operation_failed", correlation_id, start, logging.ERROR, exc_info=True)
                raise
            _finished("operation_completed", correlation_id, start)
            return result

        return wrapper  # type: ignore[return-value]

    return decorator


__all__ = ["instrument_operation"]
