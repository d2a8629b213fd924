"""
Thoughts API — Test Configuration (conftest.py)
=================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy (all function-scoped):
    ├── mock_db_session: AsyncMock session for service unit tests
    ├── db_engine:       In-memory SQLite engine with all tables created
    ├── db_session:      Session on that engine for arranging test data
    ├── test_client:     HTTPX AsyncClient wired to a fresh app whose
    │                    get_db_session dependency uses db_engine
    ├── register_user:   Helper that registers an account over HTTP
    └── add_thought:     Helper that inserts a thought with a chosen timestamp
"""

import os

# Override settings for testing BEFORE any application imports
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["BCRYPT_ROUNDS"] = "4"  # Fastest legal bcrypt cost
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["LOG_LEVEL"] = "WARNING"

from datetime import datetime, timedelta, timezone
from typing import AsyncGenerator
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from thoughts_api.database import Base, get_db_session
from thoughts_api.main import create_app
from thoughts_api.models import Thought


@pytest.fixture
def mock_db_session():
    """
    Provides a mock async database session.

    Usage:
        async def test_get(mock_db_session):
            mock_db_session.execute.return_value.scalar_one_or_none.return_value = thought
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.flush = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.get = AsyncMock()
    session.delete = AsyncMock()
    session.add = MagicMock()
    return session


@pytest_asyncio.fixture
async def db_engine():
    """
    Fresh in-memory SQLite database per test.

    StaticPool keeps a single connection, so every session sees the same
    in-memory database.
    """
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def session_factory(db_engine):
    return async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db_session(session_factory) -> AsyncGenerator[AsyncSession, None]:
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def test_client(session_factory):
    """
    HTTPX AsyncClient talking to a fresh app through ASGITransport.

    get_db_session is overridden with the same commit/rollback behaviour,
    bound to the test engine.
    """
    app = create_app()

    async def override_get_db_session() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db_session] = override_get_db_session

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def register_user(test_client):
    """Register an account and return the response JSON ({email, id, accessToken})."""

    async def _register(email: str = "ada@example.com", password: str = "secret123") -> dict:
        response = await test_client.post("/register", json={"email": email, "password": password})
        assert response.status_code == 201, response.text
        return response.json()

    return _register


@pytest.fixture
def add_thought(session_factory):
    """
    Insert a thought directly, `minutes_ago` before now.

    Explicit timestamps make "newest first" assertions deterministic.
    """

    async def _add(message: str, minutes_ago: int = 0, hearts: int = 0, created_by=None) -> Thought:
        async with session_factory() as session:
            thought = Thought(
                message=message,
                hearts=hearts,
                created_by=created_by,
                created_at=datetime.now(timezone.utc) - timedelta(minutes=minutes_ago),
            )
            session.add(thought)
            await session.commit()
            return thought

    return _add
