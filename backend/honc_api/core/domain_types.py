"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - UserId wraps the storage-assigned integer key — clients never supply it
    - CALLER_ID_LENGTH is the canonical local phone-number width (digits after country code)

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", int)


# ─── Value Types ─────────────────────────────────────────────────

CALLER_ID_LENGTH = 10


# ─── Enums ───────────────────────────────────────────────────────

class ExtractionStatus(str, Enum):
    """Outcome of a webhook dynamic-variable extraction."""
    OK = "ok"
    ERROR = "error"
