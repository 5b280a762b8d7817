"""
Tests for database session management and pool configuration.
"""

import pytest

from curriplan.core import database
from curriplan.core.database import AsyncSessionLocal, _engine_options, close_db, get_db, init_db


class TestSessionMakerConfiguration:
    """Test AsyncSessionLocal configuration."""

    def test_session_maker_configuration(self) -> None:
        assert AsyncSessionLocal.kw.get("expire_on_commit") is False
        assert AsyncSessionLocal.kw.get("autoflush") is False


class TestDatabaseConnectionPool:
    """Test database connection pool configuration."""

    def test_engine_pool_is_fixed_size(self) -> None:
        if database.engine.dialect.name == "sqlite":
            pytest.skip("configured database has no queue pool")
        pool = database.engine.pool
        assert pool.size() == database.settings.DB_POOL_SIZE
        assert pool._max_overflow == 0

    def test_engine_has_pre_ping(self) -> None:
        assert database.engine.pool._pre_ping is True

    def test_queue_pool_options_for_server_databases(self) -> None:
        options = _engine_options("postgresql+asyncpg://u@localhost/db")

        assert options["pool_size"] == database.settings.DB_POOL_SIZE
        assert options["max_overflow"] == 0
        assert options["pool_pre_ping"] is True

    def test_sqlite_skips_queue_pool_options(self) -> None:
        options = _engine_options("sqlite+aiosqlite:///:memory:")

        assert "pool_size" not in options
        assert "max_overflow" not in options


class TestGetDb:
    """Test the per-request session dependency."""

    async def test_get_db_reraises_errors(self) -> None:
        """The session is closed and the exception propagates."""
        with pytest.raises(ValueError):
            async for _session in get_db():
                raise ValueError("Test error")

    def test_lifecycle_functions_exist(self) -> None:
        # Not called: they would touch the configured (non-test) database
        assert callable(init_db)
        assert callable(close_db)
