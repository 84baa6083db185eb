"""
Room lock interface.
Allows swapping between different capacity serialization approaches.
"""

from abc import ABC, abstractmethod
from contextlib import AbstractAsyncContextManager


class RoomLock(ABC):
    """
    Serializes the "count occupancy, write booking, commit" section per room.

    Implementations:
    - UnguardedRoomLock: no serialization, concurrent requests may overbook
    - LocalRoomLock: asyncio.Lock per room, single worker process
    - RedisRoomLock: distributed lock per room, multiple workers
    """

    name: str

    @abstractmethod
    def hold(self, room_id: int) -> AbstractAsyncContextManager[None]:
        """
        Async context manager that owns the room for its duration.

        Usage:
            async with room_lock.hold(room_id):
                ...
        """
