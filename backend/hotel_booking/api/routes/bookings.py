"""
Booking endpoints: view, create and move the current user's hotel room.
"""

from typing import Optional

from fastapi import APIRouter, Depends

from hotel_booking.api.dependencies import get_booking_engine
from hotel_booking.core.security import get_current_user_id
from hotel_booking.schemas.booking import (
    BookingErrorResponse,
    BookingIdResponse,
    BookingRoomRequest,
    UserBookingResponse,
)
from hotel_booking.services.booking_service import BookingRuleEngine

router = APIRouter(prefix="/booking", tags=["Bookings"])

_rule_errors = {
    code: {"model": BookingErrorResponse}
    for code in (400, 401, 402, 403, 404, 409)
}


@router.get("", response_model=UserBookingResponse, responses={404: {"model": BookingErrorResponse}})
async def get_user_booking(
    user_id: int = Depends(get_current_user_id),
    engine: BookingRuleEngine = Depends(get_booking_engine),
):
    """Get the authenticated user's booking together with its room."""
    return await engine.get_booking(user_id)


@router.post("", response_model=BookingIdResponse, responses=_rule_errors)
async def book_room(
    booking_data: Optional[BookingRoomRequest] = None,
    user_id: int = Depends(get_current_user_id),
    engine: BookingRuleEngine = Depends(get_booking_engine),
):
    """
    Book a hotel room.

    Requires a paid, in-person ticket that includes the hotel, and a room
    with free capacity.
    """
    room_id = booking_data.room_id if booking_data else None
    booking = await engine.create_booking(user_id, room_id)
    return BookingIdResponse(booking_id=booking.id)


@router.put("/{booking_id}", response_model=BookingIdResponse, responses=_rule_errors)
async def change_room(
    booking_id: int,
    booking_data: Optional[BookingRoomRequest] = None,
    user_id: int = Depends(get_current_user_id),
    engine: BookingRuleEngine = Depends(get_booking_engine),
):
    """Move an existing booking owned by the user to another room."""
    room_id = booking_data.room_id if booking_data else None
    booking = await engine.update_booking(user_id, room_id, booking_id)
    return BookingIdResponse(booking_id=booking.id)
