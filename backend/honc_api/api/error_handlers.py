"""Global exception handlers — every failure leaves as a JSON error envelope.

Invariants:
    - HoncError → its own status and to_response() body
    - RequestValidationError → 400 VALIDATION_ERROR with one entry per bad field
    - Anything else → 500 INTERNAL_ERROR, logged with traceback, body carries no detail
    - The webhook route answers its own failures and never reaches these handlers
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from honc_api.core.errors import ErrorCategory, ErrorSeverity, HoncError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(HoncError, _handle_honc_error)
    app.add_exception_handler(RequestValidationError, _handle_validation_error)
    app.add_exception_handler(Exception, _handle_unexpected_error)


def _envelope(
    code: str, message: str, category: ErrorCategory, severity: ErrorSeverity, **extra,
) -> dict:
    return {
        "error": {
            "code": code,
            "message": message,
            "category": category.value,
            "severity": severity.value,
            **extra,
        },
    }


def field_errors(exc: RequestValidationError) -> list[dict]:
    """Flatten Pydantic errors to {field, message, type}; field is the dotted loc."""
    return [
        {
            "field": ".".join(str(part) for part in err["loc"]),
            "message": err["msg"],
            "type": err["type"],
        }
        for err in exc.errors()
    ]


async def _handle_honc_error(request: Request, exc: HoncError) -> JSONResponse:
    logger.error(
        f"{exc.code} on {request.url.path}: {exc.message}",
        extra={
            "error_code": exc.code,
            "path": request.url.path,
            "user_id": exc.context.user_id,
        },
    )
    return JSONResponse(status_code=exc.http_status, content=exc.to_response())


async def _handle_validation_error(
    request: Request, exc: RequestValidationError,
) -> JSONResponse:
    details = field_errors(exc)
    logger.warning(
        f"Rejected {request.method} {request.url.path}: "
        f"{', '.join(d['field'] for d in details)}",
        extra={"error_code": "VALIDATION_ERROR", "path": request.url.path},
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=_envelope(
            "VALIDATION_ERROR", "Invalid request data",
            ErrorCategory.VALIDATION, ErrorSeverity.ERROR, details=details,
        ),
    )


async def _handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        f"Unhandled {type(exc).__name__} on {request.url.path}",
        exc_info=exc,
        extra={"error_code": "INTERNAL_ERROR", "path": request.url.path},
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_envelope(
            "INTERNAL_ERROR", "An unexpected error occurred",
            ErrorCategory.INTERNAL, ErrorSeverity.CRITICAL,
        ),
    )
