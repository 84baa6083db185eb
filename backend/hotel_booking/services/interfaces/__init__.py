"""
Service interfaces for dependency inversion.
Allows swapping implementations without changing business logic.
"""

from .booking_store import BookingStore
from .eligibility_source import EligibilitySource
from .room_lock import RoomLock
from .unguarded_room_lock import UnguardedRoomLock

__all__ = ['BookingStore', 'EligibilitySource', 'RoomLock', 'UnguardedRoomLock']
