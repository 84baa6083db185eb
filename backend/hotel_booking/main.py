"""
Hotel Booking API - Main Application Entry Point

Room bookings for event attendees:
- Ordered booking rules over ticket payment, ticket type and room capacity
- Per-room locking so concurrent bookings cannot overfill a room
- Structured logging with request correlation
- Prometheus metrics for booking decisions
"""

from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from hotel_booking.core.config import get_settings
from hotel_booking.core.logging import setup_logging, get_logger
from hotel_booking.core.metrics import metrics_endpoint
from hotel_booking.api.errors import register_error_handlers
from hotel_booking.api.router import api_router
from hotel_booking.api.middleware import RequestLoggingMiddleware
from hotel_booking.infrastructure.redis_client import ping_redis, close_redis
from hotel_booking.services.strategy_factory import get_room_lock

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifecycle: startup and shutdown hooks."""
    setup_logging()
    logger = get_logger(__name__)

    room_lock = get_room_lock()
    logger.info(
        "application_starting",
        app=settings.APP_NAME,
        version=settings.APP_VERSION,
        environment=settings.ENVIRONMENT,
        room_lock=room_lock.name,
    )

    if room_lock.name == "redis":
        if await ping_redis():
            logger.info("redis_ready")
        else:
            logger.warning("redis_unavailable", message="Room locks will fail open")

    yield

    if room_lock.name == "redis":
        await close_redis()
    logger.info("application_shutdown")


app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Hotel room booking for event attendees",
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Restrict in production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Custom middleware
app.add_middleware(RequestLoggingMiddleware)

register_error_handlers(app)

# Routes
app.include_router(api_router)


@app.get("/health", tags=["Health"])
async def health_check():
    """Health check endpoint for Docker and load balancers."""
    room_lock = get_room_lock()
    health = {
        "status": "healthy",
        "version": settings.APP_VERSION,
        "environment": settings.ENVIRONMENT,
        "room_lock": room_lock.name,
    }
    if room_lock.name == "redis":
        health["redis"] = "connected" if await ping_redis() else "unavailable"
    return health


@app.get("/metrics", tags=["Health"], include_in_schema=False)
def metrics():
    return metrics_endpoint()


@app.get("/", tags=["Root"])
async def root():
    return {
        "message": f"Welcome to {settings.APP_NAME}",
        "version": settings.APP_VERSION,
        "docs": "/docs",
    }
