"""
Enrollment, ticket and ticket type: the read-only inputs of hotel
eligibility.

A user has at most one enrollment, an enrollment at most one ticket.
"""

from enum import Enum

from sqlalchemy import Column, Integer, String, Boolean, ForeignKey, CheckConstraint

from hotel_booking.db.base import Base, TimestampMixin


class TicketStatus(str, Enum):
    RESERVED = "RESERVED"
    PAID = "PAID"


class TicketType(Base, TimestampMixin):
    __tablename__ = "ticket_types"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    price = Column(Integer, nullable=False)
    is_remote = Column(Boolean, nullable=False, default=False)
    includes_hotel = Column(Boolean, nullable=False, default=False)

    __table_args__ = (
        CheckConstraint("price >= 0", name="check_ticket_type_price_non_negative"),
    )

    def __repr__(self) -> str:
        return f"<TicketType(id={self.id}, remote={self.is_remote}, hotel={self.includes_hotel})>"


class Enrollment(Base, TimestampMixin):
    __tablename__ = "enrollments"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, unique=True)

    def __repr__(self) -> str:
        return f"<Enrollment(id={self.id}, user={self.user_id})>"


class Ticket(Base, TimestampMixin):
    __tablename__ = "tickets"

    id = Column(Integer, primary_key=True, index=True)
    enrollment_id = Column(Integer, ForeignKey("enrollments.id"), nullable=False, unique=True)
    ticket_type_id = Column(Integer, ForeignKey("ticket_types.id"), nullable=False, index=True)
    status = Column(String(20), nullable=False, default=TicketStatus.RESERVED.value)

    __table_args__ = (
        CheckConstraint("status IN ('RESERVED', 'PAID')", name="check_ticket_status"),
    )

    def __repr__(self) -> str:
        return f"<Ticket(id={self.id}, enrollment={self.enrollment_id}, status={self.status})>"
