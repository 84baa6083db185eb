"""
Tests for hotel eligibility derived from enrollment, ticket and ticket type.
"""

import pytest

from hotel_booking.models import TicketStatus
from hotel_booking.services.eligibility import EligibilityValidator
from hotel_booking.services.errors import ForbiddenError, NotFoundError, PaymentRequiredError


@pytest.mark.asyncio
async def test_paid_hotel_ticket_is_eligible(tickets):
    tickets.add_ticket_holder(1)

    result = await EligibilityValidator(tickets).check_hotel_eligibility(1)

    assert result.ticket.status == TicketStatus.PAID
    assert result.ticket_type.includes_hotel is True
    assert tickets.lookups == ["enrollment", "ticket", "ticket_type"]


@pytest.mark.asyncio
async def test_missing_enrollment(tickets):
    with pytest.raises(NotFoundError, match="enrollment not found"):
        await EligibilityValidator(tickets).check_hotel_eligibility(1)


@pytest.mark.asyncio
async def test_missing_ticket(tickets):
    tickets.add_ticket_holder(1, with_ticket=False)

    with pytest.raises(NotFoundError, match="ticket not found"):
        await EligibilityValidator(tickets).check_hotel_eligibility(1)


@pytest.mark.asyncio
async def test_payment_is_checked_before_ticket_type(tickets):
    tickets.add_ticket_holder(1, status=TicketStatus.RESERVED, is_remote=True, includes_hotel=False)

    with pytest.raises(PaymentRequiredError):
        await EligibilityValidator(tickets).check_hotel_eligibility(1)

    assert "ticket_type" not in tickets.lookups


@pytest.mark.asyncio
async def test_remote_is_checked_before_hotel(tickets):
    tickets.add_ticket_holder(1, is_remote=True, includes_hotel=False)

    with pytest.raises(ForbiddenError, match="remote event"):
        await EligibilityValidator(tickets).check_hotel_eligibility(1)


@pytest.mark.asyncio
async def test_ticket_without_hotel(tickets):
    tickets.add_ticket_holder(1, includes_hotel=False)

    with pytest.raises(ForbiddenError, match="hotel not included"):
        await EligibilityValidator(tickets).check_hotel_eligibility(1)
