"""
Shared fixtures for integration tests.

Database-backed tests need PostgreSQL at settings.database_url and are
skipped when it is unreachable.
"""

from collections.abc import AsyncGenerator

import psycopg
import pytest
import pytest_asyncio
from psycopg_pool import AsyncConnectionPool

from src.adapters.repository.postgres import run_migrations
from src.config.settings import get_settings


@pytest.fixture(scope="session")
def database_url() -> str:
    """Database URL, or skip when PostgreSQL is not running."""
    url = get_settings().database_url
    try:
        with psycopg.connect(url, connect_timeout=2):
            pass
    except psycopg.OperationalError as e:
        pytest.skip(f"PostgreSQL not available: {e}")
    return url


@pytest_asyncio.fixture
async def pool(database_url: str) -> AsyncGenerator[AsyncConnectionPool, None]:
    """Migrated connection pool with an empty users table."""
    pool = AsyncConnectionPool(conninfo=database_url, min_size=1, max_size=10, open=False)
    await pool.open()
    await run_migrations(pool)
    async with pool.connection() as conn:
        await conn.execute("DELETE FROM users")
        await conn.commit()
    yield pool
    await pool.close()
