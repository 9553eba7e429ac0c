"""Dynamic Variable Extraction — normalizes voice-agent webhook metadata.

Invariants:
    - All functions are PURE: no IO, no async, no DB, no side effects
    - extract_dynamic_variables never raises: any failure comes back as an error dict
    - Only caller_id is transformed; agent_id, called_number, call_sid pass through

Design Decisions:
    - Return dicts (not exceptions): the webhook route maps any error result to a
      generic 500 without inspecting it, keeping detail out of the response
    - snake_case in, camelCase out: the voice platform's variable naming is decoupled
      from the webhook wire contract
"""

from collections.abc import Mapping

from honc_api.core.domain_types import CALLER_ID_LENGTH, ExtractionStatus

_FIELD_MAP = {
    "caller_id": "callerId",
    "agent_id": "agentId",
    "called_number": "calledNumber",
    "call_sid": "callSid",
}


def normalize_caller_id(caller_id: str) -> str:
    """Keep the last 10 characters, dropping any country-code prefix.

    Strings already shorter than 10 characters are returned unchanged.
    """
    return caller_id[-CALLER_ID_LENGTH:]


def extract_dynamic_variables(payload: Mapping[str, str]) -> dict:
    """Build the dynamic_variables set for a webhook payload.

    Returns {"status": "ok", "dynamic_variables": {...}} on success,
    {"status": "error", "error_code": ..., "message": ...} otherwise.
    """
    try:
        variables = {
            camel: payload[snake] for snake, camel in _FIELD_MAP.items()
        }
        variables["callerId"] = normalize_caller_id(payload["caller_id"])
    except Exception as e:
        return {
            "status": ExtractionStatus.ERROR.value,
            "error_code": "EXTRACTION_FAILED",
            "message": f"Cannot extract dynamic variables: {e!r}",
        }
    return {
        "status": ExtractionStatus.OK.value,
        "dynamic_variables": variables,
    }
