"""
Noteful Backend — Test Configuration (conftest.py)
====================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy (all function-scoped, fresh for each test):
    ├── db_engine:        SQLite database in tmp_path, schema from Base.metadata
    ├── session_factory:  async_sessionmaker bound to db_engine
    ├── insert_rows:      writes fixture rows straight into a table (bypasses the API)
    ├── test_client:      HTTPX AsyncClient against a fresh app whose
    │                     get_db_session dependency uses session_factory
    └── mock_db_session:  AsyncMock session for service unit tests
"""

import os

# Override settings for testing BEFORE any noteful imports
# Why: noteful.config builds its singleton at import time
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///./noteful_test.db"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["ENVIRONMENT"] = "test"

from typing import Any, Callable, Dict, List  # noqa: E402
from unittest.mock import AsyncMock, MagicMock  # noqa: E402

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy import Table, insert  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

import noteful.models  # noqa: E402,F401
from noteful.database import (  # noqa: E402
    Base,
    enable_sqlite_foreign_keys,
    get_db_session,
    session_scope,
)
from noteful.main import create_app  # noqa: E402


# ══════════════════════════════════════════════════════════════════════════
# Database Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest_asyncio.fixture
async def db_engine(tmp_path):
    """
    A throwaway SQLite database with both tables and foreign keys enforced.

    Each test gets its own file, which plays the role of
    TRUNCATE folders, notes RESTART IDENTITY CASCADE between tests.
    """
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'noteful.db'}")
    enable_sqlite_foreign_keys(engine)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(db_engine):
    return async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
def insert_rows(session_factory) -> Callable:
    """
    Insert raw rows into a table, bypassing validation and sanitization.

    Usage:
        await insert_rows(Folder.__table__, make_folders_array())
    """

    async def _insert(table: Table, rows: List[Dict[str, Any]]) -> None:
        async with session_factory() as session:
            await session.execute(insert(table), rows)
            await session.commit()

    return _insert


@pytest_asyncio.fixture
async def test_client(session_factory):
    """
    HTTPX AsyncClient talking to a fresh app through ASGITransport.

    The app's session dependency is swapped for one bound to the test
    database, through the same session_scope the production dependency uses.
    """
    app = create_app()

    async def override_get_db_session():
        async with session_scope(session_factory) as session:
            yield session

    app.dependency_overrides[get_db_session] = override_get_db_session

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


# ══════════════════════════════════════════════════════════════════════════
# Unit Test Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def mock_db_session():
    """
    A MagicMock that simulates AsyncSession behavior.

    Service tests patch the repositories, so the session only has to be
    something that can be passed along.
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.flush = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.add = MagicMock()
    return session
