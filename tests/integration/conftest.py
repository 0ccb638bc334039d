"""Shared fixtures for integration tests: an in-memory SQLite database."""

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

import roster_identity.infrastructure.persistence.sqlalchemy.models  # noqa: F401
from roster.infrastructure.persistence.sqlalchemy.models import Base


@pytest.fixture
async def test_db_engine():
    """Create an in-memory SQLite database shared by every session."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        echo=False,
        poolclass=StaticPool,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
def test_session_maker(test_db_engine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        test_db_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


@pytest.fixture
async def test_db_session(test_session_maker):
    """Create a test database session."""
    async with test_session_maker() as session:
        yield session
