"""
Booking rule violations.

Every rejection is a BookingError tagged with an ErrorCategory. Rules raise
the most specific subclass at the point of violation; the API layer maps
the category to an HTTP status in exactly one place.
"""

from enum import Enum


class ErrorCategory(str, Enum):
    BAD_REQUEST = "BAD_REQUEST"
    UNAUTHORIZED = "UNAUTHORIZED"
    PAYMENT_REQUIRED = "PAYMENT_REQUIRED"
    FORBIDDEN = "FORBIDDEN"
    NOT_FOUND = "NOT_FOUND"
    CONFLICT = "CONFLICT"

    @property
    def status_code(self) -> int:
        return _STATUS_CODES[self]


_STATUS_CODES = {
    ErrorCategory.BAD_REQUEST: 400,
    ErrorCategory.UNAUTHORIZED: 401,
    ErrorCategory.PAYMENT_REQUIRED: 402,
    ErrorCategory.FORBIDDEN: 403,
    ErrorCategory.NOT_FOUND: 404,
    ErrorCategory.CONFLICT: 409,
}


class BookingError(Exception):
    """Base class for all rejected booking requests."""

    category: ErrorCategory

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r})"


class InputMissingError(BookingError):
    """Raised when a required request field is absent or falsy."""

    category = ErrorCategory.BAD_REQUEST


class UnauthorizedError(BookingError):
    """Raised when a booking is missing or not owned by the requester on update."""

    category = ErrorCategory.UNAUTHORIZED


class PaymentRequiredError(BookingError):
    category = ErrorCategory.PAYMENT_REQUIRED


class ForbiddenError(BookingError):
    """Raised for remote tickets, tickets without hotel and full rooms."""

    category = ErrorCategory.FORBIDDEN


class NotFoundError(BookingError):
    category = ErrorCategory.NOT_FOUND


class ConflictError(BookingError):
    category = ErrorCategory.CONFLICT
