"""
Database table creation.

Creates all tables defined in ORM models using SQLAlchemy metadata.

Dependencies: sqlalchemy, chat_backend.configs
System role: Database schema initialization

Usage:
    python -m chat_backend.boundary.db.create_tables
"""

import asyncio
import logging

from sqlalchemy.ext.asyncio import AsyncEngine

from chat_backend.boundary.db.base import Base
from chat_backend.boundary.db.connection import get_async_engine
from chat_backend.configs import get_settings

# Import all models to register them with Base.metadata
from chat_backend.boundary.db.models.session_model import SessionModel  # noqa: F401

logger = logging.getLogger(__name__)


async def create_all_tables(engine: AsyncEngine) -> None:
    """
    Create all database tables from registered ORM models.

    Idempotent: calls CREATE TABLE IF NOT EXISTS for each model, so safe
    to run multiple times. Existing tables remain unchanged.

    Args:
        engine: Async engine to create tables on

    Raises:
        SQLAlchemyError: If database connection fails or table creation fails
    """
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Session tables created")


async def _main() -> None:
    engine = get_async_engine(get_settings().database)
    try:
        await create_all_tables(engine)
    finally:
        await engine.dispose()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    asyncio.run(_main())
