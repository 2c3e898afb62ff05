"""
Shared test fixtures.

Uses an in-memory SQLite database (via aiosqlite) so tests run without a
MySQL server.  The ``schools`` table uses only portable column types, so
the production models are created as-is.
"""

from typing import AsyncGenerator

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from src.config import Settings
from src.infrastructure.database import Base


# ── Test DB (SQLite in-memory) ────────────────────────────────────────

TEST_DB_URL = "sqlite+aiosqlite:///:memory:"

# One shared connection, otherwise every checkout sees a fresh empty DB.
test_engine = create_async_engine(TEST_DB_URL, echo=False, poolclass=StaticPool)
TestSessionFactory = async_sessionmaker(
    test_engine, class_=AsyncSession, expire_on_commit=False
)


# ── Fixtures ──────────────────────────────────────────────────────────


@pytest_asyncio.fixture
async def db_session() -> AsyncGenerator[AsyncSession, None]:
    """Create tables, yield a session, then drop everything."""
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with TestSessionFactory() as session:
        yield session

    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


@pytest_asyncio.fixture
async def client() -> AsyncGenerator[AsyncClient, None]:
    """AsyncClient backed by the SQLite test database.

    ``ASGITransport`` does not run the lifespan, so the session factory the
    lifespan would create is placed on ``app.state`` directly.  App
    exceptions are returned as responses so the catch-all 500 is testable.
    """
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    from src.api.app import create_app

    app = create_app(Settings(database_url=TEST_DB_URL))
    app.state.session_factory = TestSessionFactory

    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
