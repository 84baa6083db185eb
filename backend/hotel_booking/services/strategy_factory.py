"""
Room lock factory.
Configures which capacity serialization strategy to use.
"""

from hotel_booking.core.config import get_settings
from hotel_booking.infrastructure.redis_client import get_redis
from hotel_booking.services.interfaces.room_lock import RoomLock
from hotel_booking.services.interfaces.unguarded_room_lock import UnguardedRoomLock
from hotel_booking.services.room_lock_service import LocalRoomLock, RedisRoomLock


def get_room_lock_strategy() -> RoomLock:
    """
    Build the configured room lock.

    ROOM_LOCK_STRATEGY:
    - none: UnguardedRoomLock (original behaviour, race possible)
    - local: LocalRoomLock (default, one worker process)
    - redis: RedisRoomLock (several worker processes)
    """
    settings = get_settings()
    strategy = settings.ROOM_LOCK_STRATEGY

    if strategy == "redis":
        return RedisRoomLock(
            get_redis(),
            timeout=settings.ROOM_LOCK_TIMEOUT,
            blocking_timeout=settings.ROOM_LOCK_BLOCKING_TIMEOUT,
        )
    if strategy == "none":
        return UnguardedRoomLock()
    return LocalRoomLock()


# Singleton instance: local locks only serialize if every request shares them
_room_lock: RoomLock = None


def get_room_lock() -> RoomLock:
    """Get room lock singleton."""
    global _room_lock
    if _room_lock is None:
        _room_lock = get_room_lock_strategy()
    return _room_lock


def reset_room_lock() -> None:
    """Drop the singleton so the next call honours changed settings."""
    global _room_lock
    _room_lock = None
