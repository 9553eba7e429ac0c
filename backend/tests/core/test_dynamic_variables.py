"""Dynamic Variables — tests for pure webhook extraction.

Tests cover:
    - normalize_caller_id keeps exactly the last 10 characters of long ids
    - normalize_caller_id leaves short ids untouched and is idempotent
    - extract_dynamic_variables renames fields and only truncates caller_id
    - extract_dynamic_variables returns an error dict instead of raising
"""

import pytest

from honc_api.core.dynamic_variables import (
    extract_dynamic_variables,
    normalize_caller_id,
)


# ─── normalize_caller_id ─────────────────────────────────────────

@pytest.mark.parametrize("caller_id, expected", [
    ("+15551234567", "5551234567"),
    ("5551234567", "5551234567"),
    ("+445551234567", "5551234567"),
    ("abcdefghijklmnop", "ghijklmnop"),
])
def test_normalize_caller_id_keeps_last_ten(caller_id, expected):
    result = normalize_caller_id(caller_id)
    assert result == expected
    assert len(result) == 10


@pytest.mark.parametrize("caller_id", ["", "1", "123", "+1555123"])
def test_normalize_caller_id_short_input_unchanged(caller_id):
    assert normalize_caller_id(caller_id) == caller_id


def test_normalize_caller_id_is_idempotent():
    once = normalize_caller_id("+15551234567")
    assert normalize_caller_id(once) == once


# ─── extract_dynamic_variables ───────────────────────────────────

def test_extract_maps_fields_to_camel_case():
    result = extract_dynamic_variables({
        "caller_id": "+15551234567",
        "agent_id": "A1",
        "called_number": "+15559876543",
        "call_sid": "CA123",
    })
    assert result["status"] == "ok"
    assert result["dynamic_variables"] == {
        "callerId": "5551234567",
        "agentId": "A1",
        "calledNumber": "+15559876543",
        "callSid": "CA123",
    }


def test_extract_does_not_truncate_called_number():
    result = extract_dynamic_variables({
        "caller_id": "123",
        "agent_id": "agent",
        "called_number": "+4420700000000",
        "call_sid": "CA-long-session-id",
    })
    variables = result["dynamic_variables"]
    assert variables["callerId"] == "123"
    assert variables["calledNumber"] == "+4420700000000"
    assert variables["callSid"] == "CA-long-session-id"


def test_extract_missing_field_returns_error():
    result = extract_dynamic_variables({"caller_id": "+15551234567"})
    assert result["status"] == "error"
    assert result["error_code"] == "EXTRACTION_FAILED"
    assert "dynamic_variables" not in result


def test_extract_non_string_caller_id_returns_error():
    result = extract_dynamic_variables({
        "caller_id": 15551234567,
        "agent_id": "A1",
        "called_number": "+15559876543",
        "call_sid": "CA123",
    })
    assert result["status"] == "error"


def test_extract_contains_any_exception_from_payload():
    class _BrokenCallerId(str):
        def __getitem__(self, key):
            raise ValueError("unreadable caller id")

    result = extract_dynamic_variables({
        "caller_id": _BrokenCallerId("+15551234567"),
        "agent_id": "A1",
        "called_number": "+15559876543",
        "call_sid": "CA123",
    })
    assert result["status"] == "error"
    assert result["error_code"] == "EXTRACTION_FAILED"
    assert "unreadable caller id" in result["message"]
