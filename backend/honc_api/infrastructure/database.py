"""Engine and per-request sessions for the users store.

Invariants:
    - One AsyncSession per request (get_db), closed when the request ends
    - A SQLAlchemy failure inside a session is rolled back and re-raised as
      DatabaseError; the driver text goes to the log, never to the client
    - db_manager is None until the app lifespan calls init_db

Design Decisions:
    - SQLite (default) gets SQLAlchemy's own pool choice; pool sizing only
      applies to server databases such as Postgres
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy import text
from sqlalchemy.exc import IntegrityError, OperationalError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from honc_api.core.errors import DatabaseError
from honc_api.db.base import Base
import honc_api.models  # noqa: F401  (populate Base.metadata for create_all)

logger = logging.getLogger(__name__)

# Most specific first; anything else is reported as a generic "query" failure
_FAILED_OPERATION = (
    (IntegrityError, "commit", "Integrity constraint violated"),
    (OperationalError, "execute", "Store unavailable or schema missing"),
)


def _describe_failure(exc: SQLAlchemyError) -> tuple[str, str]:
    for exc_type, operation, message in _FAILED_OPERATION:
        if isinstance(exc, exc_type):
            return operation, message
    return "query", "Statement failed"


class DatabaseSessionManager:
    """Owns the async engine and hands out sessions."""

    def __init__(
        self, database_url: str, pool_size: int = 20, max_overflow: int = 10,
    ):
        options: dict = {"pool_pre_ping": True}
        if not database_url.startswith("sqlite"):
            options.update(pool_size=pool_size, max_overflow=max_overflow)
        self.engine = create_async_engine(database_url, **options)
        self._session_factory = async_sessionmaker(
            self.engine, expire_on_commit=False,
        )

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        async with self._session_factory() as session:
            try:
                yield session
            except SQLAlchemyError as e:
                await session.rollback()
                operation, message = _describe_failure(e)
                logger.error(f"Storage {operation} failed: {e}")
                raise DatabaseError(message, operation) from e

    async def create_tables(self) -> None:
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("users table ready")

    async def health_check(self) -> bool:
        try:
            async with self.session() as db:
                await db.execute(text("SELECT 1"))
        except DatabaseError:
            return False
        return True

    async def close(self) -> None:
        await self.engine.dispose()


db_manager: DatabaseSessionManager | None = None


def init_db(database_url: str, **kwargs) -> DatabaseSessionManager:
    global db_manager
    db_manager = DatabaseSessionManager(database_url, **kwargs)
    return db_manager


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency: the request's session."""
    if db_manager is None:
        raise RuntimeError("Database not initialized")
    async with db_manager.session() as session:
        yield session
