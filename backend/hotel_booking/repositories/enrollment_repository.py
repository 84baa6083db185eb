"""
SQLAlchemy implementation of the eligibility source.
"""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from hotel_booking.models import Enrollment, Ticket, TicketType
from hotel_booking.services.interfaces.eligibility_source import EligibilitySource


class EnrollmentRepository(EligibilitySource):

    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_enrollment_by_user(self, user_id: int) -> Optional[Enrollment]:
        result = await self.db.execute(select(Enrollment).where(Enrollment.user_id == user_id))
        return result.scalar_one_or_none()

    async def find_ticket_by_enrollment(self, enrollment_id: int) -> Optional[Ticket]:
        result = await self.db.execute(select(Ticket).where(Ticket.enrollment_id == enrollment_id))
        return result.scalar_one_or_none()

    async def find_ticket_type_by_id(self, ticket_type_id: int) -> Optional[TicketType]:
        result = await self.db.execute(select(TicketType).where(TicketType.id == ticket_type_id))
        return result.scalar_one_or_none()
