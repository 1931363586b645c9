"""
Domain entities and value objects.

``Location`` is the only persisted entity.  ``SearchQuery``,
``SearchResult`` and ``TripCost`` live for one request and are never stored.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


# ── Value Objects ─────────────────────────────────────────────────────


@dataclass(frozen=True)
class GeoPoint:
    latitude: float
    longitude: float


@dataclass(frozen=True)
class TripCost:
    total_cost: Optional[float] = None
    fuel_cost: Optional[float] = None
    toll_cost: Optional[float] = None


# ── Entities ──────────────────────────────────────────────────────────


@dataclass
class Location:
    name: str = ""
    address: str = ""
    latitude: float = 0.0
    longitude: float = 0.0
    category: str = ""
    id: Optional[str] = None

    @property
    def point(self) -> GeoPoint:
        return GeoPoint(self.latitude, self.longitude)


@dataclass(frozen=True)
class SearchQuery:
    latitude: float = 0.0
    longitude: float = 0.0
    category: str = ""
    radius_km: float = 0.0

    @property
    def origin(self) -> GeoPoint:
        return GeoPoint(self.latitude, self.longitude)


@dataclass(frozen=True)
class SearchResult:
    id: Optional[str]
    name: str
    address: str
    category: str
    distance: float

    @classmethod
    def from_location(cls, location: Location, distance: float) -> SearchResult:
        return cls(
            id=location.id,
            name=location.name,
            address=location.address,
            category=location.category,
            distance=distance,
        )
