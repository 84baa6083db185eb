"""
Read-only source of enrollment, ticket and ticket type records.
"""

from abc import ABC, abstractmethod
from typing import Optional

from hotel_booking.models import Enrollment, Ticket, TicketType


class EligibilitySource(ABC):

    @abstractmethod
    async def find_enrollment_by_user(self, user_id: int) -> Optional[Enrollment]:
        pass

    @abstractmethod
    async def find_ticket_by_enrollment(self, enrollment_id: int) -> Optional[Ticket]:
        pass

    @abstractmethod
    async def find_ticket_type_by_id(self, ticket_type_id: int) -> Optional[TicketType]:
        pass
