"""
Proximity Search
================

1. **Category lookup** -- fetch every location whose category equals the
   query's category (exact, case-sensitive).
2. **Distance**        -- haversine distance from the query point to each
   candidate.
3. **Radius filter**   -- keep candidates with ``distance <= radius_km``.

Results keep the order the store returned them in; no sort is applied.

Complexity
----------
Let M = locations in the category.

* Lookup:   one store query
* Filter:   O(M) -- one haversine call per candidate, no spatial index
"""

from __future__ import annotations

import logging
from typing import Iterable

from .distance import haversine_km
from .entities import GeoPoint, Location, SearchQuery, SearchResult
from .errors import PersistenceError, StoreUnavailable
from .ports import LocationStore

logger = logging.getLogger(__name__)


def within_radius(
    origin: GeoPoint,
    candidates: Iterable[Location],
    radius_km: float,
) -> list[SearchResult]:
    """Annotate each candidate with its distance and keep those inside the radius."""
    results: list[SearchResult] = []
    for loc in candidates:
        dist = haversine_km(
            origin.latitude, origin.longitude, loc.latitude, loc.longitude
        )
        if dist <= radius_km:
            results.append(SearchResult.from_location(loc, dist))
    return results


class ProximitySearch:
    """Radius-bounded search over one category of stored locations."""

    def __init__(self, store: LocationStore):
        self.store = store

    async def search(self, query: SearchQuery) -> list[SearchResult]:
        try:
            candidates = await self.store.list_by_category(query.category)
        except PersistenceError as exc:
            raise StoreUnavailable(
                f"Could not list locations for category {query.category!r}"
            ) from exc

        results = within_radius(query.origin, candidates, query.radius_km)
        logger.debug(
            "Search category=%r radius=%.3fkm: %d of %d candidates in range",
            query.category,
            query.radius_km,
            len(results),
            len(candidates),
        )
        return results
