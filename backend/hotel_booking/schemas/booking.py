"""
Pydantic schemas for booking-related request/response validation.

Wire names are camelCase (roomId, bookingId, hotelId, Room) to stay
compatible with the platform's existing clients.
"""

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class BookingRoomRequest(BaseModel):
    # Optional on purpose: a missing room is a booking rule (400), not a 422
    room_id: Optional[int] = Field(default=None, alias="roomId")

    model_config = ConfigDict(populate_by_name=True)


class BookingIdResponse(BaseModel):
    booking_id: int = Field(serialization_alias="bookingId")


class RoomResponse(BaseModel):
    id: int
    name: str
    capacity: int
    hotel_id: int = Field(serialization_alias="hotelId")

    model_config = ConfigDict(from_attributes=True)


class UserBookingResponse(BaseModel):
    id: int
    room: RoomResponse = Field(serialization_alias="Room")

    model_config = ConfigDict(from_attributes=True)


class BookingErrorResponse(BaseModel):
    detail: str
    category: str
