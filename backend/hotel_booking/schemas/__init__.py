from hotel_booking.schemas.booking import (
    BookingErrorResponse,
    BookingIdResponse,
    BookingRoomRequest,
    RoomResponse,
    UserBookingResponse,
)

__all__ = [
    "BookingRoomRequest", "BookingIdResponse",
    "RoomResponse", "UserBookingResponse", "BookingErrorResponse",
]
