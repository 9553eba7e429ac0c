"""Errors raised by handlers and the storage layer, rendered by api/error_handlers.py.

Invariants:
    - Each error carries the HTTP status it maps to and a stable machine code
    - to_response() never includes driver messages or stack traces
    - Request validation failures are not HoncErrors; FastAPI raises those itself
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum


class ErrorSeverity(str, Enum):
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Which user the failing request was about, and when it failed."""
    user_id: int | None = None
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


class HoncError(Exception):
    """An error the API knows how to report."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        http_status: int,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.http_status = http_status
        self.severity = severity
        self.context = context or ErrorContext()

    def to_response(self) -> dict:
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {"user_id": self.context.user_id},
            }
        }


class ResourceNotFoundError(HoncError):
    """Lookup by id matched no row."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND, 404,
            context=context,
        )


class DatabaseError(HoncError):
    """The store rejected or could not run a statement."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE, 503,
            severity=ErrorSeverity.CRITICAL, context=context,
        )
        self.operation = operation
