"""Pytest configuration and fixtures for bookhaven.

Every DB-backed test gets its own in-memory SQLite database (aiosqlite,
StaticPool): tables are created before the test and the engine is
disposed after it. Env is set before bookhaven.main is imported because
create_app() reads settings at import.
"""

import os

os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["CREATE_TABLES_ON_STARTUP"] = "false"

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession  # noqa: E402

from bookhaven.core.config import get_settings  # noqa: E402

get_settings.cache_clear()

from bookhaven.infrastructure.persistence import database  # noqa: E402
from bookhaven.main import app  # noqa: E402


@pytest.fixture
async def store():
    """Fresh schema on a fresh in-memory database; dropped with the engine afterwards."""
    await database.init_models()
    yield
    await database.dispose_engine()


@pytest.fixture
async def client(store) -> AsyncClient:
    """Async HTTP client against the FastAPI app (ASGI)."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
async def db_session(store) -> AsyncSession:
    """Database session for repository/integration tests. Rolls back after test."""
    async with database.AsyncSessionLocal() as session:
        yield session
        await session.rollback()
