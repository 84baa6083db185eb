"""
Wires the rule engine to the request's database session.
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from hotel_booking.db.session import get_db
from hotel_booking.repositories import BookingRepository, EnrollmentRepository
from hotel_booking.services.booking_service import BookingRuleEngine
from hotel_booking.services.eligibility import EligibilityValidator
from hotel_booking.services.interfaces.room_lock import RoomLock
from hotel_booking.services.room_availability import RoomAvailabilityChecker
from hotel_booking.services.strategy_factory import get_room_lock


def get_booking_engine(
    db: AsyncSession = Depends(get_db),
    room_lock: RoomLock = Depends(get_room_lock),
) -> BookingRuleEngine:
    store = BookingRepository(db)
    return BookingRuleEngine(
        store=store,
        availability=RoomAvailabilityChecker(store),
        eligibility=EligibilityValidator(EnrollmentRepository(db)),
        room_lock=room_lock,
    )
