"""
Database connection management.

Provides the async SQLAlchemy engine, session factory and the FastAPI
dependency for request-scoped sessions.

Dependencies: sqlalchemy, asyncpg, tos_checker.configs
System role: Database connection lifecycle management
"""

import asyncio
from typing import AsyncGenerator

from fastapi import Request
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from tos_checker.configs.database import DatabaseSettings

# Refused asyncpg connects and pool timeouts surface as OSError or
# TimeoutError, not wrapped by SQLAlchemy.
DATABASE_UNAVAILABLE_ERRORS = (SQLAlchemyError, OSError, asyncio.TimeoutError)


def get_async_engine(db_config: DatabaseSettings) -> AsyncEngine:
    """
    Create async SQLAlchemy engine with connection pooling.

    pool_pre_ping=True verifies connections before use to detect
    stale/broken connections early.

    Args:
        db_config: Database settings

    Returns:
        AsyncEngine: Configured async SQLAlchemy engine

    Usage:
        engine = get_async_engine(get_settings().database)
        async with engine.connect() as conn:
            result = await conn.execute(text("SELECT 1"))
    """
    return create_async_engine(
        db_config.async_database_url,
        echo=db_config.echo_sql,
        pool_size=db_config.pool_size,
        max_overflow=db_config.max_overflow,
        pool_timeout=db_config.pool_timeout,
        pool_pre_ping=True,
    )


def get_async_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """
    Create async session factory for database operations.

    autoflush=False and expire_on_commit=False keep transaction control
    explicit and let returned rows be read after commit.

    Args:
        engine: Async engine to bind

    Returns:
        async_sessionmaker: Async session factory

    Usage:
        SessionFactory = get_async_session_factory(engine)
        async with SessionFactory() as session:
            session.add(obj)
            await session.commit()
    """
    return async_sessionmaker(
        bind=engine,
        autoflush=False,
        expire_on_commit=False,
    )


async def get_async_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency for async database session injection with automatic cleanup.

    Uses the session factory built at startup and stored on app state.

    Yields:
        AsyncSession: Session scoped to the request lifetime

    Usage:
        @router.get("/caution/{identity:path}")
        async def get_result(identity: str, db: AsyncSession = Depends(get_async_db)):
            ...
    """
    SessionFactory = request.app.state.services.session_factory
    async with SessionFactory() as session:
        yield session
