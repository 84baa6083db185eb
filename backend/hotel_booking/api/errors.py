"""
Translates booking rule violations into HTTP responses.
"""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from hotel_booking.services.errors import BookingError


async def booking_error_handler(request: Request, exc: BookingError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.category.status_code,
        content={"detail": exc.message, "category": exc.category.value},
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(BookingError, booking_error_handler)
