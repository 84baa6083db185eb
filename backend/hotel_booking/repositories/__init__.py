from hotel_booking.repositories.booking_repository import BookingRepository
from hotel_booking.repositories.enrollment_repository import EnrollmentRepository

__all__ = ["BookingRepository", "EnrollmentRepository"]
