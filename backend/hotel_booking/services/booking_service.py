"""
Booking rule engine: decides whether a booking request may succeed.

RULE ORDER
==========

create_booking(user_id, room_id)
  1. room_id missing               -> 400 "room is required"
  2. room not in catalog           -> 404 "room doesn't exist"
  3. hotel eligibility (ticket)    -> 404 / 402 / 403, propagated unchanged
  4. existing booking (optional)   -> 409 "user already has a booking"
  5. room full                     -> 403 "room is filled"
  6. create booking

update_booking(user_id, new_room_id, booking_id)
  1. new_room_id missing           -> 400 "room is required"
  2. booking not found             -> 401 "booking doesn't exist"
  3. booking owned by someone else -> 401 "user doesn't have a booking"
  4. room not in catalog           -> 404 "room doesn't exist"
  5. room full                     -> 403 "room is filled"
  6. move booking to new room

Eligibility is only checked on create. A user who already holds a booking
keeps the right to move it even if their ticket changed afterwards.

All checks run before the single write, so a rejected request leaves no
trace in the store.

CONCURRENCY
===========

Problem:
  Two users try to book the last slot of a room simultaneously.
  Both count occupancy = capacity - 1, both insert, both succeed.
  Result: Overbooking.

Solution:
  The "count, write, commit" section for the target room runs inside
  RoomLock.hold(room_id). The lock implementation is chosen by
  ROOM_LOCK_STRATEGY (see strategy_factory). Commit happens inside the lock
  so the next holder counts the new row.

  The unguarded strategy keeps the original race for parity testing.
"""

from typing import Optional

from hotel_booking.core.config import get_settings
from hotel_booking.core.logging import get_logger
from hotel_booking.core.metrics import booking_latency, record_booking_decision
from hotel_booking.models import Booking
from hotel_booking.services.eligibility import EligibilityValidator
from hotel_booking.services.errors import (
    BookingError,
    ConflictError,
    ForbiddenError,
    InputMissingError,
    NotFoundError,
    UnauthorizedError,
)
from hotel_booking.services.interfaces.booking_store import BookingStore
from hotel_booking.services.interfaces.room_lock import RoomLock
from hotel_booking.services.room_availability import RoomAvailabilityChecker

logger = get_logger(__name__)


class BookingRuleEngine:
    """Orders availability, eligibility and ownership checks around booking writes."""

    def __init__(
        self,
        store: BookingStore,
        availability: RoomAvailabilityChecker,
        eligibility: EligibilityValidator,
        room_lock: RoomLock,
        enforce_single_booking: Optional[bool] = None,
    ):
        self.store = store
        self.availability = availability
        self.eligibility = eligibility
        self.room_lock = room_lock
        if enforce_single_booking is None:
            enforce_single_booking = get_settings().ENFORCE_SINGLE_BOOKING
        self.enforce_single_booking = enforce_single_booking

    async def get_booking(self, user_id: int) -> Booking:
        """Return the user's most recent booking with its Room loaded."""
        bookings = await self.store.list_by_user(user_id)
        if not bookings:
            raise NotFoundError("user has no booking")
        return bookings[0]

    async def create_booking(self, user_id: int, room_id: Optional[int]) -> Booking:
        with booking_latency.labels(operation="create").time():
            try:
                booking = await self._create(user_id, room_id)
            except BookingError as e:
                self._rejected("create", user_id, room_id, e)
                raise

        record_booking_decision("create", "success")
        logger.info(
            "booking_created",
            booking_id=booking.id,
            user_id=user_id,
            room_id=room_id,
        )
        return booking

    async def update_booking(
        self,
        user_id: int,
        new_room_id: Optional[int],
        booking_id: int,
    ) -> Booking:
        with booking_latency.labels(operation="update").time():
            try:
                booking, previous_room_id = await self._update(user_id, new_room_id, booking_id)
            except BookingError as e:
                self._rejected("update", user_id, new_room_id, e, booking_id=booking_id)
                raise

        record_booking_decision("update", "success")
        logger.info(
            "booking_updated",
            booking_id=booking.id,
            user_id=user_id,
            from_room_id=previous_room_id,
            to_room_id=new_room_id,
        )
        return booking

    async def _create(self, user_id: int, room_id: Optional[int]) -> Booking:
        if not room_id:
            raise InputMissingError("room is required")

        room = await self.availability.find_room(room_id)
        await self.eligibility.check_hotel_eligibility(user_id)

        if self.enforce_single_booking and await self.store.list_by_user(user_id):
            raise ConflictError("user already has a booking")

        async with self.room_lock.hold(room_id):
            await self._ensure_not_full(room)
            booking = await self.store.create(room_id=room_id, user_id=user_id)
            await self.store.commit()
        return booking

    async def _update(
        self,
        user_id: int,
        new_room_id: Optional[int],
        booking_id: int,
    ) -> tuple[Booking, int]:
        if not new_room_id:
            raise InputMissingError("room is required")

        booking = await self.store.find_by_id(booking_id)
        if booking is None:
            raise UnauthorizedError("booking doesn't exist")
        if booking.user_id != user_id:
            raise UnauthorizedError("user doesn't have a booking")

        room = await self.availability.find_room(new_room_id)
        previous_room_id = booking.room_id

        async with self.room_lock.hold(new_room_id):
            await self._ensure_not_full(room)
            booking = await self.store.update(booking_id, new_room_id)
            await self.store.commit()
        return booking, previous_room_id

    async def _ensure_not_full(self, room) -> None:
        occupancy = await self.availability.occupancy(room.id)
        if self.availability.is_full(room, occupancy):
            logger.info(
                "room_full",
                room_id=room.id,
                capacity=room.capacity,
                occupancy=occupancy,
            )
            raise ForbiddenError("room is filled")
        logger.debug(
            "room_has_capacity",
            room_id=room.id,
            remaining=self.availability.remaining(room, occupancy),
        )

    @staticmethod
    def _rejected(
        operation: str,
        user_id: int,
        room_id: Optional[int],
        error: BookingError,
        **extra,
    ) -> None:
        record_booking_decision(operation, error.category.value.lower())
        logger.warning(
            "booking_rejected",
            operation=operation,
            user_id=user_id,
            room_id=room_id,
            reason=error.message,
            category=error.category.value,
            **extra,
        )
