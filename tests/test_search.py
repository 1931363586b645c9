"""Unit tests for the proximity search (radius filter over a category)."""

import pytest

from nearby.domain.distance import haversine_km
from nearby.domain.entities import GeoPoint, Location, SearchQuery
from nearby.domain.errors import PersistenceError, StoreUnavailable
from nearby.domain.search import ProximitySearch, within_radius
from tests.conftest import BrokenLocationStore, InMemoryLocationStore


def _park(name, lat, lon, category="park"):
    return Location(name=name, address=f"{name} address", latitude=lat, longitude=lon, category=category)


class TestWithinRadius:
    def test_keeps_only_points_inside_radius(self):
        near = _park("near", 40.0, -73.0)
        far = _park("far", 41.0, -73.0)
        results = within_radius(GeoPoint(40.0, -73.0), [near, far], 50.0)
        assert [r.name for r in results] == ["near"]

    def test_boundary_is_inclusive(self):
        a = _park("a", 40.0, -73.0)
        b = _park("b", 40.1, -73.0)
        exact = haversine_km(40.0, -73.0, 40.1, -73.0)
        results = within_radius(GeoPoint(40.0, -73.0), [b], exact)
        assert len(results) == 1
        assert results[0].distance == exact
        assert within_radius(GeoPoint(40.0, -73.0), [a, b], exact - 1e-9)[-1].name == "a"

    def test_results_copy_fields_and_distance(self):
        loc = _park("Battery Park", 40.7033, -74.0170)
        loc.id = "abc"
        (result,) = within_radius(GeoPoint(40.7033, -74.0170), [loc], 1.0)
        assert result.id == "abc"
        assert result.name == "Battery Park"
        assert result.address == "Battery Park address"
        assert result.category == "park"
        assert result.distance == 0.0

    def test_keeps_retrieval_order(self):
        far = _park("far", 40.04, -73.0)
        near = _park("near", 40.01, -73.0)
        mid = _park("mid", 40.02, -73.0)
        results = within_radius(GeoPoint(40.0, -73.0), [far, near, mid], 10.0)
        assert [r.name for r in results] == ["far", "near", "mid"]


class TestProximitySearch:
    @pytest.mark.asyncio
    async def test_close_pair_both_returned(self):
        store = InMemoryLocationStore(
            [_park("A", 40.0, -73.0), _park("B", 40.1, -73.0)]
        )
        gap = haversine_km(40.0, -73.0, 40.1, -73.0)
        results = await ProximitySearch(store).search(
            SearchQuery(latitude=40.0, longitude=-73.0, category="park", radius_km=5)
        )
        # ~11.1 km apart, so only A fits inside 5 km
        assert gap > 5
        assert [r.name for r in results] == ["A"]

        results = await ProximitySearch(store).search(
            SearchQuery(latitude=40.0, longitude=-73.0, category="park", radius_km=gap)
        )
        assert [r.name for r in results] == ["A", "B"]

    @pytest.mark.asyncio
    async def test_empty_store_returns_empty_list(self):
        results = await ProximitySearch(InMemoryLocationStore()).search(
            SearchQuery(latitude=1.0, longitude=2.0, category="cafe", radius_km=20000)
        )
        assert results == []

    @pytest.mark.asyncio
    async def test_radius_zero_at_stored_point(self):
        store = InMemoryLocationStore([_park("here", 48.8584, 2.2945)])
        results = await ProximitySearch(store).search(
            SearchQuery(latitude=48.8584, longitude=2.2945, category="park", radius_km=0)
        )
        assert len(results) == 1
        assert results[0].distance == 0

    @pytest.mark.asyncio
    async def test_category_match_is_case_sensitive(self):
        store = InMemoryLocationStore([_park("Grumpy", 40.0, -73.0, category="Cafe")])
        search = ProximitySearch(store)
        lower = await search.search(SearchQuery(40.0, -73.0, "cafe", 10))
        upper = await search.search(SearchQuery(40.0, -73.0, "Cafe", 10))
        assert lower == []
        assert len(upper) == 1

    @pytest.mark.asyncio
    async def test_missing_category_matches_only_empty_category(self):
        store = InMemoryLocationStore(
            [_park("tagged", 40.0, -73.0), _park("untagged", 40.0, -73.0, category="")]
        )
        results = await ProximitySearch(store).search(
            SearchQuery(latitude=40.0, longitude=-73.0, radius_km=1)
        )
        assert [r.name for r in results] == ["untagged"]

    @pytest.mark.asyncio
    async def test_membership_matches_distance_for_every_location(self):
        grid = [
            _park(f"p{i}{j}", 40.0 + i * 0.05, -73.0 + j * 0.05)
            for i in range(-3, 4)
            for j in range(-3, 4)
        ]
        store = InMemoryLocationStore(grid)
        radius = 12.0
        results = await ProximitySearch(store).search(
            SearchQuery(latitude=40.0, longitude=-73.0, category="park", radius_km=radius)
        )
        returned = {r.name for r in results}
        for loc in grid:
            inside = haversine_km(40.0, -73.0, loc.latitude, loc.longitude) <= radius
            assert (loc.name in returned) == inside
        assert all(r.distance <= radius for r in results)

    @pytest.mark.asyncio
    async def test_store_failure_surfaces_as_store_unavailable(self):
        search = ProximitySearch(BrokenLocationStore())
        with pytest.raises(StoreUnavailable) as info:
            await search.search(SearchQuery(40.0, -73.0, "park", 5))
        assert isinstance(info.value, PersistenceError)
        assert isinstance(info.value.__cause__, PersistenceError)
