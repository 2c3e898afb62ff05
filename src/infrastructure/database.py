"""
Async SQLAlchemy engine and session factory.

Uses ``aiomysql`` as the MySQL driver for non-blocking I/O.  The engine is
not created at import time: the application lifespan builds it once from
``Settings`` and disposes it on shutdown.
"""

from sqlalchemy import URL, make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from src.config import Settings


class Base(DeclarativeBase):
    """Shared declarative base for all ORM models."""


def database_url(settings: Settings) -> URL:
    """``DATABASE_URL`` if set, else a MySQL URL assembled from ``DB_*``."""
    if settings.database_url:
        return make_url(settings.database_url)
    return URL.create(
        "mysql+aiomysql",
        username=settings.db_user,
        password=settings.db_password,
        host=settings.db_host,
        port=settings.db_port,
        database=settings.db_name,
    )


def create_engine(settings: Settings) -> AsyncEngine:
    url = database_url(settings)
    if url.get_backend_name() == "sqlite":
        # SQLite pools don't accept sizing arguments.
        return create_async_engine(url, echo=False)
    return create_async_engine(
        url,
        echo=False,
        pool_size=settings.db_pool_size,
        max_overflow=settings.db_max_overflow,
        pool_pre_ping=True,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )
