"""User Schemas — request and response bodies for the users routes.

Invariants:
    - Stored values are exactly what the client sent: name and email are
      checked, never rewritten (no stripping, no email normalization)
    - NewUser.name must contain at least one non-whitespace character
    - NewUser.email must be a syntactically valid address
    - NewUser has no id field — ids are assigned by storage only

Design Decisions:
    - Class names match the OpenAPI component names (User, NewUser); the ORM
      model is imported as UserModel where both are needed
    - Singular `example` in json_schema_extra: valid in an OpenAPI 3.0 schema
"""

from typing import Annotated

from email_validator import EmailNotValidError, validate_email
from pydantic import AfterValidator, BaseModel, ConfigDict, Field


def _require_text(value: str) -> str:
    if not value.strip():
        raise ValueError("name cannot be empty or whitespace")
    return value


def _require_email_syntax(value: str) -> str:
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError as e:
        raise ValueError(f"value is not a valid email address: {e}") from e
    return value


UserName = Annotated[str, AfterValidator(_require_text)]
EmailAddress = Annotated[str, AfterValidator(_require_email_syntax)]


class NewUser(BaseModel):
    """User creation body."""
    name: UserName = Field(json_schema_extra={"example": "Matthew"})
    email: EmailAddress = Field(
        json_schema_extra={"example": "matthew@cloudflare.com", "format": "email"},
    )


class User(BaseModel):
    """User response — a stored row as the client sees it."""
    model_config = ConfigDict(from_attributes=True)

    id: int = Field(json_schema_extra={"example": 1})
    name: str = Field(json_schema_extra={"example": "Matthew"})
    email: str = Field(
        json_schema_extra={"example": "matthew@cloudflare.com", "format": "email"},
    )
