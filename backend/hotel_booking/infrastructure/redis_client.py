"""
Async Redis client used by the distributed room lock.
Separated from business logic for clean architecture.
"""

from typing import Optional

import redis.asyncio as redis

from hotel_booking.core.config import get_settings
from hotel_booking.core.logging import get_logger

logger = get_logger(__name__)

_redis_client: Optional[redis.Redis] = None


def get_redis() -> redis.Redis:
    """Get or create the shared Redis client. Connects lazily on first command."""
    global _redis_client

    if _redis_client is None:
        settings = get_settings()
        _redis_client = redis.from_url(
            settings.REDIS_URL,
            encoding="utf-8",
            decode_responses=True,
            socket_connect_timeout=5,
            socket_timeout=5,
            retry_on_timeout=True,
            health_check_interval=30,
        )
    return _redis_client


async def ping_redis() -> bool:
    """Return True if Redis answers, logging the failure otherwise."""
    try:
        return bool(await get_redis().ping())
    except redis.RedisError as e:
        logger.error("redis_connection_failed", error=str(e))
        return False


async def close_redis() -> None:
    """Close Redis connection on shutdown."""
    global _redis_client
    if _redis_client is not None:
        await _redis_client.aclose()
        _redis_client = None
