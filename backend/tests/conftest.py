"""
Pytest fixtures for the test database, HTTP client, authentication and
in-memory collaborators.

Integration tests run on an in-memory SQLite database (aiosqlite) with
tables created and dropped per test. Rule engine tests use the fakes below
and never touch a database.
"""

import asyncio
from itertools import count
from typing import AsyncGenerator, Dict, List, Optional, Tuple

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.pool import StaticPool

from hotel_booking.main import app
from hotel_booking.db.base import Base
from hotel_booking.db.session import get_db
from hotel_booking.core.security import create_access_token
from hotel_booking.models import (
    Booking,
    Enrollment,
    Hotel,
    Room,
    Ticket,
    TicketStatus,
    TicketType,
    User,
)
from hotel_booking.services.booking_service import BookingRuleEngine
from hotel_booking.services.eligibility import EligibilityValidator
from hotel_booking.services.interfaces import BookingStore, EligibilitySource, UnguardedRoomLock
from hotel_booking.services.room_availability import RoomAvailabilityChecker
from hotel_booking.services.room_lock_service import LocalRoomLock
from hotel_booking.services.strategy_factory import get_room_lock

TEST_DATABASE_URL = "sqlite+aiosqlite://"


# ---------------------------------------------------------------------------
# Database and HTTP client
# ---------------------------------------------------------------------------

@pytest_asyncio.fixture(scope="function")
async def db_session() -> AsyncGenerator[AsyncSession, None]:
    """Create tables, yield session, then drop tables for isolation."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    session_factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with session_factory() as session:
        yield session

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture(scope="function")
async def client(db_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client that overrides the DB and room lock dependencies."""

    async def override_get_db():
        yield db_session

    # A fresh lock per test: asyncio locks must not outlive their event loop
    room_lock = LocalRoomLock()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_room_lock] = lambda: room_lock

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# Data factories
# ---------------------------------------------------------------------------

class Factory:
    """Creates committed rows with unique names."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self._seq = count(1)

    async def _save(self, obj):
        self.session.add(obj)
        await self.session.commit()
        await self.session.refresh(obj)
        return obj

    async def user(self) -> User:
        return await self._save(User(email=f"user{next(self._seq)}@example.com"))

    async def hotel(self) -> Hotel:
        return await self._save(Hotel(name=f"Hotel {next(self._seq)}", image="https://example.com/hotel.png"))

    async def room(self, hotel: Hotel, capacity: int = 3) -> Room:
        return await self._save(Room(name=f"{next(self._seq)}0{capacity}", capacity=capacity, hotel_id=hotel.id))

    async def ticket_type(self, is_remote: bool = False, includes_hotel: bool = True) -> TicketType:
        return await self._save(
            TicketType(
                name=f"Ticket type {next(self._seq)}",
                price=600 if includes_hotel else 250,
                is_remote=is_remote,
                includes_hotel=includes_hotel,
            )
        )

    async def enrollment(self, user: User) -> Enrollment:
        return await self._save(Enrollment(name=f"Attendee {user.id}", user_id=user.id))

    async def ticket(self, enrollment: Enrollment, ticket_type: TicketType, status: TicketStatus) -> Ticket:
        return await self._save(
            Ticket(enrollment_id=enrollment.id, ticket_type_id=ticket_type.id, status=status.value)
        )

    async def booking(self, user: User, room: Room) -> Booking:
        return await self._save(Booking(user_id=user.id, room_id=room.id))

    async def ticket_holder(
        self,
        status: TicketStatus = TicketStatus.PAID,
        is_remote: bool = False,
        includes_hotel: bool = True,
    ) -> User:
        """A user with an enrollment and a ticket of the given kind."""
        user = await self.user()
        ticket_type = await self.ticket_type(is_remote=is_remote, includes_hotel=includes_hotel)
        enrollment = await self.enrollment(user)
        await self.ticket(enrollment, ticket_type, status)
        return user


@pytest.fixture
def factory(db_session: AsyncSession) -> Factory:
    return Factory(db_session)


@pytest.fixture
def auth_headers_for():
    """Build Authorization headers for a user."""

    def _headers(user: User) -> dict:
        token = create_access_token(data={"sub": str(user.id)})
        return {"Authorization": f"Bearer {token}"}

    return _headers


# ---------------------------------------------------------------------------
# In-memory collaborators for rule engine tests
# ---------------------------------------------------------------------------

class FakeBookingStore(BookingStore):
    """
    Dict-backed booking store.

    count_by_room and create yield to the event loop, like a real database
    round trip, so concurrent requests interleave between check and write.
    """

    def __init__(self):
        self.rooms: Dict[int, Room] = {}
        self.bookings: Dict[int, Booking] = {}
        self.writes: List[Tuple[str, int]] = []
        self.commits = 0
        self._ids = count(1)

    def add_room(self, room_id: int, capacity: int) -> Room:
        room = Room(id=room_id, name=f"Room {room_id}", capacity=capacity, hotel_id=1)
        self.rooms[room_id] = room
        return room

    def add_booking(self, user_id: int, room_id: int) -> Booking:
        booking = Booking(id=next(self._ids), user_id=user_id, room_id=room_id)
        booking.room = self.rooms.get(room_id)
        self.bookings[booking.id] = booking
        return booking

    async def list_by_user(self, user_id: int) -> List[Booking]:
        found = [b for b in self.bookings.values() if b.user_id == user_id]
        return sorted(found, key=lambda b: b.id, reverse=True)

    async def find_by_id(self, booking_id: int) -> Optional[Booking]:
        return self.bookings.get(booking_id)

    async def count_by_room(self, room_id: int) -> int:
        occupancy = sum(1 for b in self.bookings.values() if b.room_id == room_id)
        await asyncio.sleep(0)
        return occupancy

    async def create(self, room_id: int, user_id: int) -> Booking:
        await asyncio.sleep(0)
        booking = self.add_booking(user_id, room_id)
        self.writes.append(("create", booking.id))
        return booking

    async def update(self, booking_id: int, new_room_id: int) -> Booking:
        booking = self.bookings[booking_id]
        booking.room_id = new_room_id
        booking.room = self.rooms.get(new_room_id)
        self.writes.append(("update", booking_id))
        return booking

    async def find_room_by_id(self, room_id: int) -> Optional[Room]:
        return self.rooms.get(room_id)

    async def commit(self) -> None:
        self.commits += 1


class FakeEligibilitySource(EligibilitySource):

    def __init__(self):
        self.enrollments: Dict[int, Enrollment] = {}
        self.tickets: Dict[int, Ticket] = {}
        self.ticket_types: Dict[int, TicketType] = {}
        self.lookups: List[str] = []
        self._ids = count(1)

    def add_ticket_holder(
        self,
        user_id: int,
        status: TicketStatus = TicketStatus.PAID,
        is_remote: bool = False,
        includes_hotel: bool = True,
        with_ticket: bool = True,
    ) -> None:
        enrollment = Enrollment(id=next(self._ids), name=f"Attendee {user_id}", user_id=user_id)
        self.enrollments[user_id] = enrollment
        if not with_ticket:
            return
        ticket_type = TicketType(
            id=next(self._ids),
            name="Ticket",
            price=100,
            is_remote=is_remote,
            includes_hotel=includes_hotel,
        )
        self.ticket_types[ticket_type.id] = ticket_type
        self.tickets[enrollment.id] = Ticket(
            id=next(self._ids),
            enrollment_id=enrollment.id,
            ticket_type_id=ticket_type.id,
            status=status.value,
        )

    async def find_enrollment_by_user(self, user_id: int) -> Optional[Enrollment]:
        self.lookups.append("enrollment")
        return self.enrollments.get(user_id)

    async def find_ticket_by_enrollment(self, enrollment_id: int) -> Optional[Ticket]:
        self.lookups.append("ticket")
        return self.tickets.get(enrollment_id)

    async def find_ticket_type_by_id(self, ticket_type_id: int) -> Optional[TicketType]:
        self.lookups.append("ticket_type")
        return self.ticket_types.get(ticket_type_id)


@pytest.fixture
def store() -> FakeBookingStore:
    return FakeBookingStore()


@pytest.fixture
def tickets() -> FakeEligibilitySource:
    return FakeEligibilitySource()


@pytest.fixture
def make_engine(store: FakeBookingStore, tickets: FakeEligibilitySource):
    """Build a rule engine over the fakes with a chosen room lock."""

    def _make(room_lock=None, enforce_single_booking: bool = False) -> BookingRuleEngine:
        return BookingRuleEngine(
            store=store,
            availability=RoomAvailabilityChecker(store),
            eligibility=EligibilityValidator(tickets),
            room_lock=room_lock or UnguardedRoomLock(),
            enforce_single_booking=enforce_single_booking,
        )

    return _make


@pytest.fixture
def engine(make_engine) -> BookingRuleEngine:
    return make_engine(room_lock=LocalRoomLock())
