"""
Room lock implementations that close the capacity race.

Both implement RoomLock. The local lock is enough for a single uvicorn
worker; as soon as several processes serve bookings the lock has to live in
Redis.

Circuit Breaker Pattern (RedisRoomLock):
  On Redis failure, the lock "fails open" and the request proceeds
  unguarded. A Redis outage degrades to the original check-then-write
  behaviour instead of rejecting every booking. Lock contention is not a
  failure: a request that cannot get the lock within the blocking timeout
  is rejected with 409 so the client can retry.
"""

import asyncio
import time
from collections import defaultdict
from contextlib import asynccontextmanager
from typing import AsyncIterator, Dict, Optional

import redis.asyncio as redis

from hotel_booking.core.logging import get_logger
from hotel_booking.core.metrics import redis_connection_errors, room_lock_wait
from hotel_booking.services.errors import ConflictError
from hotel_booking.services.interfaces.room_lock import RoomLock

logger = get_logger(__name__)


class LocalRoomLock(RoomLock):
    """One asyncio.Lock per room id, shared by all requests of this process."""

    name = "local"

    def __init__(self):
        self._locks: Dict[int, asyncio.Lock] = defaultdict(asyncio.Lock)

    @asynccontextmanager
    async def hold(self, room_id: int) -> AsyncIterator[None]:
        lock = self._locks[room_id]
        started = time.perf_counter()
        async with lock:
            room_lock_wait.labels(strategy=self.name).observe(time.perf_counter() - started)
            yield


class RedisRoomLock(RoomLock):
    """
    Distributed lock per room using redis-py's Lock.

    timeout: seconds before Redis expires a lock whose holder died
    blocking_timeout: seconds a request waits for the lock before giving up
    """

    name = "redis"
    key_prefix = "room-lock:"

    def __init__(self, client: redis.Redis, timeout: float, blocking_timeout: float):
        self.redis = client
        self.timeout = timeout
        self.blocking_timeout = blocking_timeout

    @asynccontextmanager
    async def hold(self, room_id: int) -> AsyncIterator[None]:
        lock = self.redis.lock(
            f"{self.key_prefix}{room_id}",
            timeout=self.timeout,
            blocking_timeout=self.blocking_timeout,
        )
        started = time.perf_counter()
        acquired: Optional[bool]
        try:
            acquired = await lock.acquire()
        except redis.RedisError as e:
            redis_connection_errors.inc()
            logger.warning("room_lock_unavailable", room_id=room_id, error=str(e))
            acquired = None

        if acquired is None:
            # Fail open
            yield
            return

        room_lock_wait.labels(strategy=self.name).observe(time.perf_counter() - started)
        if not acquired:
            logger.warning("room_lock_timeout", room_id=room_id, waited=self.blocking_timeout)
            raise ConflictError("room is busy, try again")

        try:
            yield
        finally:
            try:
                await lock.release()
            except redis.RedisError as e:
                # Expired or connection lost; the key expires on its own
                redis_connection_errors.inc()
                logger.warning("room_lock_release_failed", room_id=room_id, error=str(e))
