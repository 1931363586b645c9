"""
Trip-cost endpoint
==================

POST /trip-cost/{location_id} -- fuel / toll estimate from the caller's
position to a stored location, via the TollGuru provider.
"""

from __future__ import annotations

import time

from fastapi import APIRouter, Depends, Request

from nearby.api.decoding import decode_body
from nearby.api.dependencies import get_trip_cost_service, strict_bodies
from nearby.api.schemas import ErrorResponse, TripCostRequest, TripCostResponse
from nearby.api.timing import elapsed_ns
from nearby.domain.entities import GeoPoint
from nearby.domain.trips import TripCostService

router = APIRouter(tags=["trips"])


@router.post(
    "/trip-cost/{location_id}",
    response_model=TripCostResponse,
    summary="Estimate trip cost to a stored location",
    responses={404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    openapi_extra={
        "requestBody": {
            "content": {
                "application/json": {"schema": TripCostRequest.model_json_schema()}
            }
        }
    },
)
async def trip_cost(
    request: Request,
    location_id: str,
    service: TripCostService = Depends(get_trip_cost_service),
    strict: bool = Depends(strict_bodies),
):
    start = time.perf_counter_ns()
    body = decode_body(TripCostRequest, await request.body()).unwrap(strict)

    cost = await service.estimate(
        location_id, GeoPoint(body.latitude, body.longitude)
    )
    return TripCostResponse(
        total_cost=cost.total_cost,
        fuel_cost=cost.fuel_cost,
        toll_cost=cost.toll_cost,
        time_ns=elapsed_ns(start),
    )
