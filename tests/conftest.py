"""
Shared test fixtures.

Uses an in-memory SQLite database (via aiosqlite) so tests run without
Docker / PostgreSQL, and an in-process fake for the TollGuru provider so
no test touches the network.
"""

from __future__ import annotations

import uuid
from typing import AsyncGenerator, Optional

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine
from sqlalchemy.pool import StaticPool

from nearby.domain.entities import GeoPoint, Location, TripCost
from nearby.domain.errors import NotFound, PersistenceError
from nearby.domain.ports import LocationStore, TripCostProvider
from nearby.infrastructure.database import build_session_factory, create_tables


TEST_DB_URL = "sqlite+aiosqlite:///:memory:"


# ── Test doubles ──────────────────────────────────────────────────────


class InMemoryLocationStore(LocationStore):
    """Keeps locations in insertion order, like the SQL store does."""

    def __init__(self, locations: Optional[list[Location]] = None):
        self.locations: list[Location] = []
        for loc in locations or []:
            if loc.id is None:
                loc.id = uuid.uuid4().hex
            self.locations.append(loc)

    async def create(self, location: Location) -> str:
        location.id = uuid.uuid4().hex
        self.locations.append(location)
        return location.id

    async def list_by_category(self, category: str) -> list[Location]:
        return [loc for loc in self.locations if loc.category == category]

    async def get_by_id(self, location_id: str) -> Location:
        for loc in self.locations:
            if loc.id == location_id:
                return loc
        raise NotFound(f"Location {location_id} not found")


class BrokenLocationStore(LocationStore):
    async def create(self, location: Location) -> str:
        raise PersistenceError("Could not store location")

    async def list_by_category(self, category: str) -> list[Location]:
        raise PersistenceError("Could not read locations")

    async def get_by_id(self, location_id: str) -> Location:
        raise PersistenceError("Could not read location")


class FakeTripCostProvider(TripCostProvider):
    def __init__(self, cost: Optional[TripCost] = None, error: Optional[Exception] = None):
        self.cost = cost or TripCost(total_cost=12.5, fuel_cost=8.0, toll_cost=4.5)
        self.error = error
        self.calls: list[tuple[GeoPoint, GeoPoint]] = []

    async def estimate(self, origin: GeoPoint, destination: GeoPoint) -> TripCost:
        self.calls.append((origin, destination))
        if self.error is not None:
            raise self.error
        return self.cost


# ── Fixtures ──────────────────────────────────────────────────────────


@pytest_asyncio.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """One in-memory database per test, shared by every session."""
    eng = create_async_engine(
        TEST_DB_URL,
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    await create_tables(eng)
    yield eng
    await eng.dispose()


@pytest.fixture
def session_factory(engine: AsyncEngine):
    return build_session_factory(engine)


@pytest_asyncio.fixture
async def db_session(session_factory) -> AsyncGenerator[AsyncSession, None]:
    async with session_factory() as session:
        yield session


@pytest.fixture
def trip_provider() -> FakeTripCostProvider:
    return FakeTripCostProvider()


@pytest.fixture
def app(session_factory, trip_provider):
    """App wired to the SQLite session factory and the fake provider.

    ``ASGITransport`` does not run the lifespan, so state is set here.
    """
    from nearby.api.app import create_app
    from nearby.api.dependencies import get_trip_cost_provider

    application = create_app()
    application.state.session_factory = session_factory
    application.dependency_overrides[get_trip_cost_provider] = lambda: trip_provider
    return application


@pytest_asyncio.fixture
async def client(app) -> AsyncGenerator[AsyncClient, None]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
