"""Structured logging — JSONFormatter output shape."""

import json
import logging

from honc_api.infrastructure.observability import JSONFormatter


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "honc_api.test", logging.INFO, __file__, 1, "hello %s", ("world",), None,
    )
    record.__dict__.update(extra)
    return record


def test_json_formatter_base_fields():
    log = json.loads(JSONFormatter().format(_record()))
    assert log["level"] == "INFO"
    assert log["logger"] == "honc_api.test"
    assert log["message"] == "hello world"
    assert "timestamp" in log


def test_json_formatter_surfaces_known_extras_only():
    log = json.loads(JSONFormatter().format(
        _record(call_sid="CA123", error_code="EXTRACTION_FAILED", unrelated="x"),
    ))
    assert log["call_sid"] == "CA123"
    assert log["error_code"] == "EXTRACTION_FAILED"
    assert "unrelated" not in log
    assert "user_id" not in log
