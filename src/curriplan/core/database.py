"""
Database Engine and Session Management

One process-wide async engine owns the fixed-size connection pool.
Request handlers get a session through ``get_db``, which returns the
connection to the pool on every exit path.
"""

from __future__ import annotations

import logging
from collections.abc import AsyncGenerator
from typing import Any

from sqlalchemy import text
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from curriplan.config import settings
from curriplan.core.models import Base

logger = logging.getLogger(__name__)


def _engine_options(url: str) -> dict[str, Any]:
    """Pool configuration for the given URL.

    SQLite (used by the test suite) runs on a single static connection and
    rejects queue pool arguments.
    """
    options: dict[str, Any] = {"echo": settings.DEBUG, "pool_pre_ping": True}
    if make_url(url).get_backend_name() != "sqlite":
        options.update(
            pool_size=settings.DB_POOL_SIZE,
            max_overflow=0,
            pool_timeout=settings.DB_POOL_TIMEOUT,
            pool_recycle=1800,
        )
    return options


engine: AsyncEngine = create_async_engine(
    settings.database_url, **_engine_options(settings.database_url)
)

AsyncSessionLocal = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autoflush=False,
)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency yielding one session per request.

    Rolls back on error; the session (and its pooled connection) is always
    closed before the request finishes.
    """
    async with AsyncSessionLocal() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise


async def ping(session: AsyncSession) -> None:
    """Run a trivial query, raising if no connection can be used."""
    await session.execute(text("SELECT 1"))


async def init_db() -> None:
    """Create any missing curriculum tables."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database tables created/verified")


async def close_db() -> None:
    """Drain the connection pool."""
    await engine.dispose()
    logger.info("Database connection pool closed")
