"""
Shared Redis connection pool.

Redis only backs the cross-process geocoding throttle, so the pool is
bounded by ``REDIS_MAX_CONNECTIONS`` rather than sized for general caching.
"""

import logging

import redis.asyncio as aioredis

from src.config import settings

logger = logging.getLogger(__name__)

_pool = aioredis.ConnectionPool.from_url(
    settings.redis_url,
    decode_responses=True,
    max_connections=settings.redis_max_connections,
)


async def get_redis() -> aioredis.Redis:
    """Client for the geocoding throttle, backed by the shared pool."""
    return aioredis.Redis(connection_pool=_pool)


async def close_redis() -> None:
    """Drop pooled connections (called on application shutdown)."""
    await _pool.disconnect()
    logger.debug("Redis pool disconnected")
