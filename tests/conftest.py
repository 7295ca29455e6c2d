"""
Shared test fixtures.

Uses an in-memory SQLite database (via aiosqlite) so tests run without
Docker / PostgreSQL / Redis.  PostGIS-specific features (Geometry columns)
are mocked by using plain String columns in the test models.
"""

from typing import AsyncGenerator

import pytest_asyncio
from sqlalchemy import JSON, Boolean, Column, DateTime, Float, Integer, String, Text, func
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import StaticPool

from src.domain.entities import Location, PaceGroups, Run


# ── Test DB (SQLite in-memory) ────────────────────────────────────────

TEST_DB_URL = "sqlite+aiosqlite:///:memory:"

test_engine = create_async_engine(TEST_DB_URL, echo=False, poolclass=StaticPool)
TestSessionFactory = async_sessionmaker(
    test_engine, class_=AsyncSession, expire_on_commit=False
)


class TestBase(DeclarativeBase):
    pass


# Mirror the production model but without the PostGIS Geometry column
# (SQLite doesn't support it).

class TestRunModel(TestBase):
    __tablename__ = "runs"
    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(Text, nullable=False)
    day_of_week = Column(String(10), nullable=False)
    start_time = Column(Text, nullable=False)
    location_name = Column(Text, nullable=False)
    meeting_point = Column(String, nullable=True)  # stub for Geometry
    latitude = Column(Float, nullable=False)
    longitude = Column(Float, nullable=False)
    typical_distances = Column(Text, nullable=False)
    terrain = Column(String(10), nullable=False)
    pace_groups = Column(JSON, nullable=False)
    contact_name = Column(Text, nullable=True)
    contact_email = Column(Text, nullable=True)
    contact_phone = Column(Text, nullable=True)
    notes = Column(Text, nullable=True)
    is_active = Column(Boolean, default=True, nullable=False)
    edit_token = Column(String(64), unique=True, nullable=False)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now())


# ── Domain helpers ────────────────────────────────────────────────────

RARELY_EVERYWHERE = {
    "sub_8": "rarely",
    "8_to_9": "rarely",
    "9_to_10": "rarely",
    "10_plus": "rarely",
}


def make_run(
    run_id: int,
    lat: float = 39.14,
    lng: float = -77.15,
    pace_groups: dict[str, str] | None = None,
) -> Run:
    """Domain ``Run``; every pace range is ``rarely`` unless overridden."""
    levels = {**RARELY_EVERYWHERE, **(pace_groups or {})}
    return Run(
        id=run_id,
        name=f"Run {run_id}",
        location=Location(lat, lng),
        pace_groups=PaceGroups.from_mapping(levels),
    )


# ── Fixtures ──────────────────────────────────────────────────────────


@pytest_asyncio.fixture
async def db_session() -> AsyncGenerator[AsyncSession, None]:
    """Create tables, yield a session, then drop everything."""
    async with test_engine.begin() as conn:
        await conn.run_sync(TestBase.metadata.create_all)

    async with TestSessionFactory() as session:
        yield session

    async with test_engine.begin() as conn:
        await conn.run_sync(TestBase.metadata.drop_all)
