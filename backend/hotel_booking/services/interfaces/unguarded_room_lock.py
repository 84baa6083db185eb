"""
Unguarded room lock - no serialization.
Reproduces the original check-then-write behaviour.
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator

from hotel_booking.services.interfaces.room_lock import RoomLock


class UnguardedRoomLock(RoomLock):
    """
    Never blocks. Two requests can both see a free slot and both book it.

    Use when:
    - Behavioural parity with the original service is required
    - The database enforces capacity some other way
    """

    name = "none"

    @asynccontextmanager
    async def hold(self, room_id: int) -> AsyncIterator[None]:
        yield
