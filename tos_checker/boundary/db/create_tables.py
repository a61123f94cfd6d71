"""
Database table creation.

Creates all tables defined in ORM models using SQLAlchemy metadata.

Dependencies: sqlalchemy, tos_checker.configs
System role: Database schema initialization

Usage:
    python -m tos_checker.boundary.db.create_tables
"""

import asyncio
import logging

from sqlalchemy.ext.asyncio import AsyncEngine

from tos_checker.boundary.db.base import Base

# Import all models to register them with Base.metadata
from tos_checker.boundary.db.models.analysis_result_model import AnalysisResultModel  # noqa: F401

logger = logging.getLogger(__name__)


async def create_all_tables(engine: AsyncEngine) -> None:
    """
    Create all database tables from registered ORM models.

    Idempotent: existing tables remain unchanged.

    Args:
        engine: Async engine to run DDL on

    Raises:
        SQLAlchemyError: If the connection or DDL fails
    """
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database tables created", extra={"tables": sorted(Base.metadata.tables)})


async def _main() -> None:
    from tos_checker.boundary.db.connection import get_async_engine
    from tos_checker.configs import get_settings
    from tos_checker.observability.logger import configure_logging

    configure_logging()
    engine = get_async_engine(get_settings().database)
    try:
        await create_all_tables(engine)
    finally:
        await engine.dispose()


if __name__ == "__main__":
    asyncio.run(_main())
