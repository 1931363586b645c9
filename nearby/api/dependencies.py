"""FastAPI dependency injection helpers."""

from __future__ import annotations

from typing import AsyncIterator

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from nearby.config import settings
from nearby.domain.ports import LocationStore, TripCostProvider
from nearby.domain.search import ProximitySearch
from nearby.domain.trips import TripCostService
from nearby.infrastructure.repositories import SqlLocationStore
from nearby.infrastructure.tollguru import TollGuruClient


async def get_db(request: Request) -> AsyncIterator[AsyncSession]:
    """Yield an async DB session; commit on success, rollback on error."""
    async with request.app.state.session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


def get_location_store(db: AsyncSession = Depends(get_db)) -> LocationStore:
    return SqlLocationStore(db)


def get_trip_cost_provider(request: Request) -> TripCostProvider:
    return TollGuruClient(
        request.app.state.http_client,
        settings.tollguru_api_key,
        api_url=settings.tollguru_api_url,
        vehicle_type=settings.tollguru_vehicle_type,
        timeout_seconds=settings.tollguru_timeout_seconds,
    )


def get_proximity_search(
    store: LocationStore = Depends(get_location_store),
) -> ProximitySearch:
    return ProximitySearch(store)


def get_trip_cost_service(
    store: LocationStore = Depends(get_location_store),
    provider: TripCostProvider = Depends(get_trip_cost_provider),
) -> TripCostService:
    return TripCostService(store, provider)


def strict_bodies() -> bool:
    return settings.strict_request_bodies
