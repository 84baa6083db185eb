"""
Metrics instrumentation for observability.
Exposes Prometheus-compatible metrics at the /metrics endpoint.
"""

from prometheus_client import Counter, Histogram, generate_latest, CONTENT_TYPE_LATEST
from fastapi import Response

# Booking rule engine
booking_decisions = Counter(
    'hotel_booking_decisions_total',
    'Booking rule engine decisions',
    ['operation', 'outcome']  # create/update, success/<error category>
)

booking_latency = Histogram(
    'hotel_booking_latency_seconds',
    'Time spent deciding and persisting a booking request',
    ['operation'],
    buckets=[0.001, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0]
)

# Room lock
room_lock_wait = Histogram(
    'hotel_booking_room_lock_wait_seconds',
    'Time spent waiting for a room lock',
    ['strategy'],
    buckets=[0.0001, 0.001, 0.01, 0.05, 0.1, 0.5, 1.0, 5.0]
)

redis_connection_errors = Counter(
    'hotel_booking_redis_errors_total',
    'Redis errors while acquiring or releasing room locks'
)


def metrics_endpoint() -> Response:
    """Prometheus metrics endpoint."""
    return Response(
        content=generate_latest(),
        media_type=CONTENT_TYPE_LATEST
    )


def record_booking_decision(operation: str, outcome: str):
    """Record a rule engine decision. Outcome: success or an error category name."""
    booking_decisions.labels(operation=operation, outcome=outcome).inc()
