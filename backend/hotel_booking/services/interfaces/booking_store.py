"""
Booking store interface.
Persistence boundary consumed by the rule engine and availability checker.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from hotel_booking.models import Booking, Room


class BookingStore(ABC):
    """
    Reads and writes booking records.

    Implementations:
    - BookingRepository: SQLAlchemy async session
    - in-memory fakes in the test suite
    """

    @abstractmethod
    async def list_by_user(self, user_id: int) -> List[Booking]:
        """Bookings of a user, most recent first, with Room loaded."""

    @abstractmethod
    async def find_by_id(self, booking_id: int) -> Optional[Booking]:
        pass

    @abstractmethod
    async def count_by_room(self, room_id: int) -> int:
        """Number of bookings referencing the room."""

    @abstractmethod
    async def create(self, room_id: int, user_id: int) -> Booking:
        """Create a booking and return it with its generated id."""

    @abstractmethod
    async def update(self, booking_id: int, new_room_id: int) -> Booking:
        """Move an existing booking to another room."""

    @abstractmethod
    async def find_room_by_id(self, room_id: int) -> Optional[Room]:
        pass

    @abstractmethod
    async def commit(self) -> None:
        """Make pending writes visible to other requests."""
