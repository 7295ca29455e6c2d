"""
Redis-based request throttle.

Used by the geocoding client so that every API process together sends at
most one request per interval to the upstream service (Nominatim allows one
request per second per application).

Implementation uses SET NX PX: whoever sets the key owns the current slot,
and the key's expiry opens the next one.  Nothing needs to be released.
"""

from __future__ import annotations

import asyncio
import logging
import time
import uuid

import redis.asyncio as aioredis

logger = logging.getLogger(__name__)


class ThrottleTimeout(RuntimeError):
    """Raised when no request slot became free within ``max_wait_seconds``."""


class RequestThrottle:
    def __init__(
        self,
        client: aioredis.Redis,
        key: str,
        interval_ms: int = 1000,
        max_wait_seconds: float = 10.0,
    ):
        self.redis = client
        self.key = f"throttle:{key}"
        self.interval_ms = interval_ms
        self.max_wait = max_wait_seconds
        self.token = str(uuid.uuid4())

    async def try_acquire(self) -> bool:
        """Claim the current slot. Returns True on success."""
        return bool(
            await self.redis.set(
                self.key, self.token, nx=True, px=self.interval_ms
            )
        )

    async def wait_for_slot(self) -> None:
        """Block until a slot is claimed, or raise ``ThrottleTimeout``."""
        deadline = time.monotonic() + self.max_wait
        while not await self.try_acquire():
            remaining_ms = await self.redis.pttl(self.key)
            # -2: key vanished between SET and PTTL; retry almost at once
            delay = max(remaining_ms, 10) / 1000
            if time.monotonic() + delay > deadline:
                raise ThrottleTimeout(f"Timed out waiting for {self.key}")
            logger.debug("Throttled on %s, waiting %.3fs", self.key, delay)
            await asyncio.sleep(delay)
