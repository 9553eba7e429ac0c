"""User Repository — SQLAlchemy implementation of the UserRepository protocol.

Invariants:
    - One repository per request, bound to that request's AsyncSession
    - Every operation is a single statement; create commits its own insert
    - id is always assigned by the database, never by the caller

Design Decisions:
    - Explicit dependency (get_user_repository) instead of a handle stored on
      request state: handlers declare exactly what they touch
    - get_by_id returns None on a miss; the route decides the HTTP shape
"""

import logging
from typing import Sequence

from fastapi import Depends
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from honc_api.core.domain_types import UserId
from honc_api.infrastructure.database import get_db
from honc_api.models.user import User

logger = logging.getLogger(__name__)


class SqlUserRepository:
    """Typed select/insert over the users table."""

    def __init__(self, db: AsyncSession):
        self._db = db

    async def list_all(self) -> Sequence[User]:
        result = await self._db.execute(select(User))
        return result.scalars().all()

    async def get_by_id(self, user_id: UserId) -> User | None:
        result = await self._db.execute(
            select(User).where(User.id == user_id),
        )
        return result.scalar_one_or_none()

    async def create(self, name: str, email: str) -> User:
        user = User(name=name, email=email)
        self._db.add(user)
        await self._db.commit()
        await self._db.refresh(user)
        logger.info("User created", extra={"user_id": user.id})
        return user


async def get_user_repository(
    db: AsyncSession = Depends(get_db),
) -> SqlUserRepository:
    """FastAPI dependency for the request-scoped user repository."""
    return SqlUserRepository(db)
