"""
Pytest Configuration and Fixtures

Shared test fixtures for unit and API tests. The suite runs against an
in-memory SQLite database (aiosqlite) so no database server is needed.
"""

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import configure_mappers
from sqlalchemy.pool import StaticPool

from curriplan.core.database import get_db
from curriplan.core.models import Base
from curriplan.main import app

# Ensure all mappers are configured
configure_mappers()

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
async def async_engine():
    """Create a fresh in-memory database with all tables."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
def session_factory(async_engine):
    return async_sessionmaker(async_engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def db_session(session_factory) -> AsyncSession:
    """Create database session for testing."""
    async with session_factory() as session:
        yield session


@pytest.fixture
async def client(session_factory):
    """Create test client; each request gets its own session on the test database."""

    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
async def unreachable_client(tmp_path):
    """Test client whose database file cannot be opened."""
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path}/missing/dir/curriculum.db", echo=False
    )
    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    async def override_get_db():
        async with factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
    await engine.dispose()
