"""
User model. Accounts are owned by the platform's auth service; this table
only anchors foreign keys.
"""

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from hotel_booking.db.base import Base, TimestampMixin


class User(Base, TimestampMixin):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String(255), unique=True, index=True, nullable=False)

    bookings = relationship("Booking", back_populates="user", lazy="noload")

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email={self.email})>"
