"""Test configuration and fixtures"""

from datetime import date, datetime, time

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy.pool import StaticPool

from reservations_api.main import app
from reservations_api.clock import FixedClock, get_clock
from reservations_api.database import Base, get_db
from reservations_api.models.reservation import Reservation


# Test database URL (use in-memory SQLite for tests)
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

# A Thursday at noon
NOW = datetime(2026, 10, 15, 12, 0, 0)


@pytest.fixture
def clock():
    """Clock frozen at NOW"""
    return FixedClock(NOW)


@pytest.fixture
async def test_db():
    """Create test database"""
    engine = create_async_engine(TEST_DATABASE_URL, echo=False, poolclass=StaticPool)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    session_factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    async with session_factory() as session:
        yield session

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
def add_reservation(test_db):
    """Insert a reservation row directly, bypassing validation"""
    async def _add(**overrides):
        fields = {
            "first_name": "Test",
            "last_name": "Guest",
            "mobile_number": "800-555-1212",
            "reservation_date": date(2026, 10, 15),
            "reservation_time": time(18, 0),
            "people": 2,
            "status": "booked",
        }
        fields.update(overrides)
        reservation = Reservation(**fields)
        test_db.add(reservation)
        await test_db.commit()
        await test_db.refresh(reservation)
        return reservation

    return _add


@pytest.fixture
async def client(test_db, clock):
    """Create test client with overridden database and clock"""
    async def override_get_db():
        yield test_db

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_clock] = lambda: clock

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()
