"""HTTP fixtures — the app served over httpx with a throwaway SQLite store.

Invariants:
    - Requests go through the real get_db dependency; only db_manager is swapped
    - Each test gets its own in-memory database (single shared connection)
    - `client` has the users table; `client_without_tables` does not, so every
      users query fails inside the store
"""

import pytest
from httpx import ASGITransport, AsyncClient

import honc_api.infrastructure.database as database
from honc_api.infrastructure.database import DatabaseSessionManager
from honc_api.main import app
from honc_api.models.user import User as UserModel

MEMORY_URL = "sqlite+aiosqlite:///:memory:"


async def _serve(manager: DatabaseSessionManager, monkeypatch):
    monkeypatch.setattr(database, "db_manager", manager)
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as http:
        yield http
    app.dependency_overrides.clear()
    await manager.close()


@pytest.fixture
async def store():
    manager = DatabaseSessionManager(MEMORY_URL)
    await manager.create_tables()
    return manager


@pytest.fixture
async def client(store, monkeypatch):
    async for http in _serve(store, monkeypatch):
        yield http


@pytest.fixture
async def client_without_tables(monkeypatch):
    async for http in _serve(DatabaseSessionManager(MEMORY_URL), monkeypatch):
        yield http


@pytest.fixture
async def seed_user(store):
    """One row written straight through the store, bypassing the API."""
    async with store.session() as db:
        user = UserModel(name="Matthew", email="matthew@cloudflare.com")
        db.add(user)
        await db.commit()
        await db.refresh(user)
    return user
