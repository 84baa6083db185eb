"""
Hotel eligibility derived from the user's ticket.

A user may book a room only with a paid, in-person ticket whose type
includes the hotel. Checks run in a fixed order and the first failure is
raised; the caller sees exactly one reason.
"""

from dataclasses import dataclass

from hotel_booking.core.logging import get_logger
from hotel_booking.models import Ticket, TicketStatus, TicketType
from hotel_booking.services.errors import ForbiddenError, NotFoundError, PaymentRequiredError
from hotel_booking.services.interfaces.eligibility_source import EligibilitySource

logger = get_logger(__name__)


@dataclass(frozen=True)
class HotelEligibility:
    ticket: Ticket
    ticket_type: TicketType


class EligibilityValidator:

    def __init__(self, source: EligibilitySource):
        self.source = source

    async def check_hotel_eligibility(self, user_id: int) -> HotelEligibility:
        """
        Resolve enrollment -> ticket -> ticket type and validate each step.

        Raises:
            NotFoundError: the user has no enrollment or no ticket
            PaymentRequiredError: the ticket is not paid
            ForbiddenError: the ticket is for the remote event, or its type
                does not include the hotel
        """
        enrollment = await self.source.find_enrollment_by_user(user_id)
        if enrollment is None:
            raise NotFoundError("enrollment not found")

        ticket = await self.source.find_ticket_by_enrollment(enrollment.id)
        if ticket is None:
            raise NotFoundError("ticket not found")

        if ticket.status != TicketStatus.PAID:
            raise PaymentRequiredError("payment required")

        ticket_type = await self.source.find_ticket_type_by_id(ticket.ticket_type_id)
        if ticket_type is None:
            # Ticket rows reference ticket_types by foreign key
            raise NotFoundError("ticket type not found")

        if ticket_type.is_remote:
            raise ForbiddenError("remote event")

        if not ticket_type.includes_hotel:
            raise ForbiddenError("hotel not included")

        logger.debug("hotel_eligibility_confirmed", user_id=user_id, ticket_id=ticket.id)
        return HotelEligibility(ticket=ticket, ticket_type=ticket_type)
