"""Structured logging tests."""

from __future__ import annotations

import json
import logging

from engine_app.logging_config import (
    JsonFormatter,
    correlation_context,
    ensure_correlation_id,
    log_event,
    redact_for_log,
)


def test_redaction_counts_collections_and_masks_details() -> None:
    scrubbed = redact_for_log(
        {
            "user_id": "user-9",
            "wardrobe": [{"id": 1}, {"id": 2}],
            "note": "mail jane@example.org or see https://shop.example/p/1",
            "occasion": "office",
        }
    )

    assert scrubbed == {
        "user_id": "[redacted]",
        "wardrobe": "<2 items>",
        "note": "mail [redacted-email] or see [redacted-url]",
        "occasion": "office",
    }


def test_correlation_context_restores_previous_id() -> None:
    with correlation_context("outer"):
        with correlation_context("inner") as inner:
            assert inner == "inner"
            assert ensure_correlation_id() == "inner"
        assert ensure_correlation_id() == "outer"


def test_log_event_renders_json_with_fields() -> None:
    logger = logging.getLogger("tests.logging")
    records = []

    class _Capture(logging.Handler):
        def emit(self, record: logging.LogRecord) -> None:
            records.append(record)

    handler = _Capture()
    logger.addHandler(handler)
    try:
        with correlation_context("req-1"):
            log_event(logger, logging.WARNING, "gap_analysis_failed", error="timeout", outfit_items=[1, 2, 3])
    finally:
        logger.removeHandler(handler)

    payload = json.loads(JsonFormatter().format(records[0]))
    assert payload["event"] == "gap_analysis_failed"
    assert payload["correlation_id"] == "req-1"
    assert payload["service"] == "outfit-engine"
    assert payload["error"] == "timeout"
    assert payload["outfit_items"] == "<3 items>"
