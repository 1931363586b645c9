"""
TollGuru trip-cost provider.

POSTs origin/destination to the origin-destination-waypoints endpoint and
reads ``route.costs.{overall,fuel,tolls}`` from the reply.  The shared
``httpx.AsyncClient`` is owned by the application lifespan.  No retries.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from nearby.domain.entities import GeoPoint, TripCost
from nearby.domain.errors import ProviderResponseInvalid, ProviderUnavailable
from nearby.domain.ports import TripCostProvider

logger = logging.getLogger(__name__)

TOLLGURU_API_URL = "https://apis.tollguru.com/toll/v2/origin-destination-waypoints"
DEFAULT_VEHICLE_TYPE = "2AxlesAuto"

_COST_FIELDS = {"total_cost": "overall", "fuel_cost": "fuel", "toll_cost": "tolls"}


class TollGuruClient(TripCostProvider):
    def __init__(
        self,
        client: httpx.AsyncClient,
        api_key: str,
        *,
        api_url: str = TOLLGURU_API_URL,
        vehicle_type: str = DEFAULT_VEHICLE_TYPE,
        timeout_seconds: float = 15.0,
    ):
        self.client = client
        self.api_key = api_key
        self.api_url = api_url
        self.vehicle_type = vehicle_type
        self.timeout = timeout_seconds

    def build_payload(self, origin: GeoPoint, destination: GeoPoint) -> dict:
        return {
            "from": {"lat": origin.latitude, "lng": origin.longitude},
            "to": {"lat": destination.latitude, "lng": destination.longitude},
            "vehicleType": self.vehicle_type,
        }

    async def estimate(self, origin: GeoPoint, destination: GeoPoint) -> TripCost:
        if not self.api_key:
            raise ProviderUnavailable("TOLLGURU_API_KEY not set")

        try:
            response = await self.client.post(
                self.api_url,
                json=self.build_payload(origin, destination),
                headers={"x-api-key": self.api_key},
                timeout=self.timeout,
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            logger.warning(
                "TollGuru answered %d for %s -> %s",
                exc.response.status_code,
                origin,
                destination,
            )
            raise ProviderUnavailable("Error calling TollGuru API") from exc
        except httpx.HTTPError as exc:
            logger.warning("TollGuru request failed: %s", exc)
            raise ProviderUnavailable("Error calling TollGuru API") from exc

        try:
            body = response.json()
        except ValueError as exc:
            raise ProviderResponseInvalid("Invalid response from TollGuru") from exc
        return parse_costs(body)


def parse_costs(body: Any) -> TripCost:
    """Extract the three cost figures from a TollGuru reply body."""
    route = body.get("route") if isinstance(body, dict) else None
    if not isinstance(route, dict):
        raise ProviderResponseInvalid("Invalid response from TollGuru")

    costs = route.get("costs")
    if not isinstance(costs, dict):
        raise ProviderResponseInvalid("Cost data missing in TollGuru response")

    missing = [src for src in _COST_FIELDS.values() if src not in costs]
    if missing:
        raise ProviderResponseInvalid(
            "Cost data missing in TollGuru response: " + ", ".join(missing)
        )
    values = {}
    for field, src in _COST_FIELDS.items():
        value = costs[src]
        if value is not None and (
            isinstance(value, bool) or not isinstance(value, (int, float))
        ):
            raise ProviderResponseInvalid(f"Non-numeric {src!r} cost from TollGuru")
        values[field] = value
    return TripCost(**values)
