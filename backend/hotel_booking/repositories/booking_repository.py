"""
SQLAlchemy implementation of the booking store.
"""

from typing import List, Optional

from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from hotel_booking.models import Booking, Room
from hotel_booking.services.interfaces.booking_store import BookingStore


class BookingRepository(BookingStore):

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_by_user(self, user_id: int) -> List[Booking]:
        result = await self.db.execute(
            select(Booking)
            .where(Booking.user_id == user_id)
            .options(selectinload(Booking.room))
            .order_by(Booking.id.desc())
        )
        return list(result.scalars().all())

    async def find_by_id(self, booking_id: int) -> Optional[Booking]:
        result = await self.db.execute(select(Booking).where(Booking.id == booking_id))
        return result.scalar_one_or_none()

    async def count_by_room(self, room_id: int) -> int:
        result = await self.db.execute(
            select(func.count()).select_from(Booking).where(Booking.room_id == room_id)
        )
        return result.scalar_one()

    async def create(self, room_id: int, user_id: int) -> Booking:
        booking = Booking(user_id=user_id, room_id=room_id)
        self.db.add(booking)
        await self.db.flush()
        await self.db.refresh(booking)
        return booking

    async def update(self, booking_id: int, new_room_id: int) -> Booking:
        booking = await self.find_by_id(booking_id)
        if booking is None:
            raise LookupError(f"Booking {booking_id} not found")

        booking.room_id = new_room_id
        await self.db.flush()
        await self.db.refresh(booking, attribute_names=["room"])
        return booking

    async def find_room_by_id(self, room_id: int) -> Optional[Room]:
        result = await self.db.execute(select(Room).where(Room.id == room_id))
        return result.scalar_one_or_none()

    async def commit(self) -> None:
        await self.db.commit()
