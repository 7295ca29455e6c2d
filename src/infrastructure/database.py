"""
Async SQLAlchemy engine and session factory for the ``runs`` table.

The engine talks to PostgreSQL/PostGIS through ``asyncpg``.  Pool sizing is
configurable (``DB_POOL_SIZE`` / ``DB_MAX_OVERFLOW``); run listings are a
read-mostly workload, so the defaults stay small.
"""

import logging

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from src.config import settings

logger = logging.getLogger(__name__)


def build_engine(url: str = settings.database_url) -> AsyncEngine:
    kwargs = {"echo": settings.db_echo, "pool_pre_ping": True}
    # SQLite (tests, local tinkering) has no sized connection pool
    if not url.startswith("sqlite"):
        kwargs.update(
            pool_size=settings.db_pool_size,
            max_overflow=settings.db_max_overflow,
        )
    return create_async_engine(url, **kwargs)


engine = build_engine()

async_session_factory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


async def dispose_engine() -> None:
    """Close every pooled connection (application shutdown, end of seeding)."""
    await engine.dispose()
    logger.debug("Database engine disposed")


class Base(DeclarativeBase):
    """Declarative base for the run listing models."""
