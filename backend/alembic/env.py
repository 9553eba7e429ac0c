"""Alembic environment for the users schema.

The database URL comes from honc_api.config (DATABASE_URL / .env), so
migrations hit the same store as the running API, with the same
postgresql:// → postgresql+asyncpg:// rewrite. SQLite runs in batch mode
so ALTER-style operations work there too.
"""

import asyncio
from logging.config import fileConfig

from alembic import context
from sqlalchemy import pool
from sqlalchemy.ext.asyncio import create_async_engine

from honc_api.config import get_settings
from honc_api.db.base import Base
import honc_api.models  # noqa: F401

if context.config.config_file_name is not None:
    fileConfig(context.config.config_file_name)

DATABASE_URL = get_settings().database_url
IS_SQLITE = DATABASE_URL.startswith("sqlite")


def _configure(**kwargs) -> None:
    context.configure(
        target_metadata=Base.metadata,
        render_as_batch=IS_SQLITE,
        **kwargs,
    )
    with context.begin_transaction():
        context.run_migrations()


async def _migrate_online() -> None:
    engine = create_async_engine(DATABASE_URL, poolclass=pool.NullPool)
    async with engine.connect() as connection:
        await connection.run_sync(lambda sync_conn: _configure(connection=sync_conn))
    await engine.dispose()


if context.is_offline_mode():
    _configure(url=DATABASE_URL, literal_binds=True, dialect_opts={"paramstyle": "named"})
else:
    asyncio.run(_migrate_online())
