"""
Shared test fixtures and configuration for entire test suite.

Provides: In-memory database sessions, scripted language model, in-memory Redis double
Dependencies: pytest, sqlalchemy, aiosqlite
System role: Test infrastructure and fixture management
"""

import pytest

from tests.doubles import InMemoryRedis, ScriptedLanguageModel


@pytest.fixture
def scripted_llm() -> ScriptedLanguageModel:
    """Provide language model double answering every prompt with 'finding'."""
    return ScriptedLanguageModel()


@pytest.fixture
def in_memory_redis() -> InMemoryRedis:
    """Provide in-memory Redis double."""
    return InMemoryRedis()


@pytest.fixture
async def test_engine():
    """
    Create in-memory SQLite async engine with all tables.

    Yields:
        AsyncEngine: Engine shared by every session of the test
    """
    from sqlalchemy.ext.asyncio import create_async_engine
    from sqlalchemy.pool import StaticPool
    from tos_checker.boundary.db.base import Base

    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
def test_session_factory(test_engine):
    """Provide session factory bound to the in-memory engine."""
    from tos_checker.boundary.db.connection import get_async_session_factory

    return get_async_session_factory(test_engine)


@pytest.fixture
async def test_async_db(test_session_factory):
    """
    Create in-memory SQLite async database session for testing.

    Yields:
        AsyncSession: Test database session with cleanup
    """
    async with test_session_factory() as session:
        yield session
        await session.rollback()
