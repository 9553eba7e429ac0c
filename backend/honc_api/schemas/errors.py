"""Error Schemas — documented shapes of the envelopes in api/error_handlers.py.

Only used for OpenAPI; handlers build the JSON themselves.
"""

from pydantic import BaseModel


class FieldError(BaseModel):
    field: str
    message: str
    type: str


class ValidationErrorBody(BaseModel):
    code: str = "VALIDATION_ERROR"
    message: str
    category: str = "validation"
    severity: str = "error"
    details: list[FieldError]


class ValidationErrorResponse(BaseModel):
    """400 — request failed validation before reaching the handler."""
    error: ValidationErrorBody


class DomainErrorBody(BaseModel):
    code: str
    message: str
    category: str
    severity: str
    timestamp: str
    context: dict


class DomainErrorResponse(BaseModel):
    """404 / 503 — raised HoncError rendered by the global handler."""
    error: DomainErrorBody
