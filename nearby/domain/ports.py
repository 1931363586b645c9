"""
Collaborator interfaces consumed by the domain services.

Concrete implementations live in ``nearby.infrastructure``; tests swap in
in-memory doubles.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from .entities import GeoPoint, Location, TripCost


class LocationStore(ABC):
    @abstractmethod
    async def create(self, location: Location) -> str:
        """Persist *location* and return its new identifier.

        Raises ``PersistenceError`` on write failure.
        """

    @abstractmethod
    async def list_by_category(self, category: str) -> list[Location]:
        """Every location whose category equals *category* exactly.

        Raises ``PersistenceError`` on read failure.
        """

    @abstractmethod
    async def get_by_id(self, location_id: str) -> Location:
        """Raises ``NotFound`` if the identifier is unknown or malformed."""


class TripCostProvider(ABC):
    @abstractmethod
    async def estimate(self, origin: GeoPoint, destination: GeoPoint) -> TripCost:
        """Raises ``ProviderUnavailable`` or ``ProviderResponseInvalid``."""
