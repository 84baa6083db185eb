"""
Room existence and capacity checks.
"""

from hotel_booking.models import Room
from hotel_booking.services.errors import NotFoundError
from hotel_booking.services.interfaces.booking_store import BookingStore


class RoomAvailabilityChecker:

    def __init__(self, store: BookingStore):
        self.store = store

    async def find_room(self, room_id: int) -> Room:
        room = await self.store.find_room_by_id(room_id)
        if room is None:
            raise NotFoundError("room doesn't exist")
        return room

    async def occupancy(self, room_id: int) -> int:
        return await self.store.count_by_room(room_id)

    @staticmethod
    def is_full(room: Room, occupancy: int) -> bool:
        # >= rather than ==: a room overbooked by an earlier race stays full
        return occupancy >= room.capacity

    @staticmethod
    def remaining(room: Room, occupancy: int) -> int:
        return max(room.capacity - occupancy, 0)
