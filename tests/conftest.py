"""Shared test configuration and fixtures.

Uses a transactional rollback strategy per test for full isolation:
- Each test gets its own transaction that rolls back after the test.
- ``TEST_DATABASE_URL`` selects the database; without it the suite runs
  against an in-memory SQLite database through aiosqlite.
"""

import os
from collections.abc import AsyncGenerator

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.pool import StaticPool

import deskbooking.models  # noqa: F401  (registers all tables on Base.metadata)
from deskbooking.database import Base, get_db
from deskbooking.main import app
from deskbooking.models.desk import Desk
from deskbooking.models.user import User

_test_db_url = os.environ.get("TEST_DATABASE_URL", "sqlite+aiosqlite://")


def _make_engine():
    if _test_db_url.startswith("sqlite"):
        # One shared connection so every session sees the same in-memory database.
        return create_async_engine(
            _test_db_url,
            echo=False,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    return create_async_engine(
        _test_db_url,
        echo=False,
        pool_pre_ping=True,
    )


# ---------------------------------------------------------------------------
# Session-scoped: create / drop all tables once per test session
# ---------------------------------------------------------------------------


@pytest_asyncio.fixture(scope="session", loop_scope="session")
async def test_engine():
    """Create a session-scoped engine tied to the session event loop."""
    engine = _make_engine()
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture(scope="session", loop_scope="session")
async def setup_test_db(test_engine):
    """Create all tables at the start of the session and drop them at the end."""
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


# ---------------------------------------------------------------------------
# Per-test: transactional rollback for isolation
# ---------------------------------------------------------------------------


@pytest_asyncio.fixture
async def db_session(test_engine, setup_test_db) -> AsyncGenerator[AsyncSession, None]:
    """Yield an async session wrapped in a transaction that always rolls back."""
    async with test_engine.connect() as connection:
        transaction = await connection.begin()
        session = AsyncSession(bind=connection, expire_on_commit=False)

        try:
            yield session
        finally:
            await session.close()
            await transaction.rollback()


@pytest_asyncio.fixture
async def client(db_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """Provide an httpx AsyncClient wired to use the test DB session."""

    async def override_get_db() -> AsyncGenerator[AsyncSession, None]:
        yield db_session

    app.dependency_overrides[get_db] = override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as ac:
        yield ac

    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# Convenience fixtures: users and desks
# ---------------------------------------------------------------------------


async def _create_user(db_session: AsyncSession, first_name: str, last_name: str) -> User:
    user = User(first_name=first_name, last_name=last_name)
    db_session.add(user)
    await db_session.flush()
    return user


def headers_for(user: User) -> dict[str, str]:
    """Request headers that make ``user`` the acting user."""
    return {"X-User-Id": str(user.id)}


@pytest_asyncio.fixture
async def john(db_session: AsyncSession) -> User:
    return await _create_user(db_session, "John", "Smith")


@pytest_asyncio.fixture
async def jane(db_session: AsyncSession) -> User:
    return await _create_user(db_session, "Jane", "Doe")


@pytest_asyncio.fixture
async def john_headers(john: User) -> dict[str, str]:
    return headers_for(john)


@pytest_asyncio.fixture
async def jane_headers(jane: User) -> dict[str, str]:
    return headers_for(jane)


@pytest_asyncio.fixture
async def desks(db_session: AsyncSession) -> list[Desk]:
    """Three desks: two bookable, the third under maintenance."""
    created = [
        Desk(number=1, is_in_maintenance=False),
        Desk(number=2, is_in_maintenance=False),
        Desk(number=3, is_in_maintenance=True, maintenance_message="Fixed soon"),
    ]
    db_session.add_all(created)
    await db_session.flush()
    return created


@pytest_asyncio.fixture
async def desk(desks: list[Desk]) -> Desk:
    return desks[0]


@pytest_asyncio.fixture
async def other_desk(desks: list[Desk]) -> Desk:
    return desks[1]


@pytest_asyncio.fixture
async def maintenance_desk(desks: list[Desk]) -> Desk:
    return desks[2]
