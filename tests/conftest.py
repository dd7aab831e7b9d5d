"""Root conftest - shared test configuration and database fixtures.

Invariants:
    - Environment is set before any devconnect module reads settings
    - Every test gets a fresh in-memory SQLite database

Design Decisions:
    - SQLite in-memory via aiosqlite: fast, no external dependency, sufficient for
      handler and route tests (no PostgreSQL-specific features are used)
    - StaticPool: all sessions share the one in-memory connection
"""

import os

# Never sign test tokens with a real secret or touch a real database
os.environ.setdefault("JWT_SECRET", "test-secret-not-for-production-use-only-0123456789")
os.environ.setdefault(
    "DATABASE_URL",
    "sqlite+aiosqlite:///test.db",
)
os.environ.setdefault("BCRYPT_ROUNDS", "4")

import pytest  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.pool import StaticPool  # noqa: E402

from devconnect.db.base import Base  # noqa: E402
import devconnect.models  # noqa: E402,F401


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False, poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session
