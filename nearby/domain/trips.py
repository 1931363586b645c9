"""Trip-cost estimation from the caller's position to a stored location."""

from __future__ import annotations

from .entities import GeoPoint, TripCost
from .ports import LocationStore, TripCostProvider


class TripCostService:
    def __init__(self, store: LocationStore, provider: TripCostProvider):
        self.store = store
        self.provider = provider

    async def estimate(self, location_id: str, origin: GeoPoint) -> TripCost:
        """Resolve the destination, then delegate to the provider.

        ``NotFound`` from the store and provider errors propagate unchanged.
        """
        destination = await self.store.get_by_id(location_id)
        return await self.provider.estimate(origin, destination.point)
