"""Users — list, fetch, and create rows in the users table.

Invariants:
    - User input is validated by Pydantic before reaching the route handler
    - Handlers receive the repository explicitly (Depends), never via request state
    - A missing user id yields 404 RESOURCE_NOT_FOUND, not an empty 200
    - name and email are stored exactly as sent

Design Decisions:
    - Collection under /api/users, creation under /api/user: public contract kept as-is
    - Storage faults are not caught here; the session manager maps them to DatabaseError
"""

import logging

from fastapi import APIRouter, Depends, status

from honc_api.core.domain_types import UserId
from honc_api.core.errors import ErrorContext, ResourceNotFoundError
from honc_api.core.repository_protocols import UserRepository
from honc_api.infrastructure.user_repository import get_user_repository
from honc_api.schemas.errors import DomainErrorResponse, ValidationErrorResponse
from honc_api.schemas.user import NewUser, User

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["users"])

_STORAGE_FAULT = {503: {"model": DomainErrorResponse, "description": "Database unavailable"}}
_INVALID_INPUT = {400: {"model": ValidationErrorResponse, "description": "Invalid request data"}}


@router.get(
    "/users", response_model=list[User],
    responses={
        200: {"description": "Users fetched successfully"},
        **_STORAGE_FAULT,
    },
)
async def list_users(
    users: UserRepository = Depends(get_user_repository),
):
    """List every user in storage order."""
    return await users.list_all()


@router.get(
    "/users/{id}", response_model=User,
    responses={
        200: {"description": "User fetched successfully"},
        404: {"model": DomainErrorResponse, "description": "User not found"},
        **_INVALID_INPUT,
        **_STORAGE_FAULT,
    },
)
async def get_user(
    id: int, users: UserRepository = Depends(get_user_repository),
):
    """Get a single user by id."""
    user = await users.get_by_id(UserId(id))
    if user is None:
        raise ResourceNotFoundError(
            "User", str(id), ErrorContext(user_id=id),
        )
    return user


@router.post(
    "/user", response_model=User,
    status_code=status.HTTP_201_CREATED,
    responses={
        201: {"description": "User created successfully"},
        **_INVALID_INPUT,
        **_STORAGE_FAULT,
    },
)
async def create_user(
    body: NewUser, users: UserRepository = Depends(get_user_repository),
):
    """Create a user; the database assigns the id."""
    return await users.create(name=body.name, email=body.email)
