"""FastAPI dependency injection helpers."""

from typing import AsyncIterator

import httpx
from sqlalchemy.ext.asyncio import AsyncSession

from src.config import settings
from src.infrastructure.database import async_session_factory
from src.infrastructure.geocoding import NominatimGeocoder
from src.infrastructure.locks import RequestThrottle
from src.infrastructure.redis_client import get_redis


async def get_db() -> AsyncSession:  # type: ignore[misc]
    """Yield an async DB session; commit on success, rollback on error."""
    async with async_session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


async def get_geocoder() -> AsyncIterator[NominatimGeocoder]:
    """Yield a Nominatim client throttled through the shared Redis key."""
    redis = await get_redis()
    throttle = RequestThrottle(
        redis, "nominatim", interval_ms=settings.geocode_min_interval_ms
    )
    async with httpx.AsyncClient(
        timeout=settings.geocode_timeout_seconds
    ) as client:
        yield NominatimGeocoder(client, throttle=throttle)
