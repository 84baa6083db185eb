"""
Booking model linking a user to a reserved room.

Key design decisions:
- No unique constraint on user_id: one booking per user is a business
  convention, optionally enforced by the rule engine (ENFORCE_SINGLE_BOOKING)
- Index on room_id backs the occupancy COUNT query
- Bookings are never deleted; updates only move room_id
"""

from sqlalchemy import Column, Integer, ForeignKey
from sqlalchemy.orm import relationship

from hotel_booking.db.base import Base, TimestampMixin


class Booking(Base, TimestampMixin):
    __tablename__ = "bookings"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    room_id = Column(Integer, ForeignKey("rooms.id"), nullable=False, index=True)

    # Relationships
    user = relationship("User", back_populates="bookings", lazy="noload")
    room = relationship("Room", lazy="selectin")

    def __repr__(self) -> str:
        return f"<Booking(id={self.id}, user={self.user_id}, room={self.room_id})>"
