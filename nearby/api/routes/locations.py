"""
Location endpoints
==================

POST /locations             -- store a location, returns its id
GET  /locations/{category}  -- list every location in a category
POST /search                -- locations of a category within a radius

Request bodies are decoded by ``nearby.api.decoding`` so the lenient /
strict policy applies uniformly.  Every response carries ``time_ns``.
"""

from __future__ import annotations

import time

from fastapi import APIRouter, Depends, Request

from nearby.api.decoding import decode_body
from nearby.api.dependencies import (
    get_location_store,
    get_proximity_search,
    strict_bodies,
)
from nearby.api.schemas import (
    ErrorResponse,
    LocationCreateRequest,
    LocationCreatedResponse,
    LocationListResponse,
    LocationOut,
    SearchRequest,
    SearchResponse,
    SearchResultOut,
)
from nearby.api.timing import elapsed_ns
from nearby.domain.entities import Location, SearchQuery
from nearby.domain.ports import LocationStore
from nearby.domain.search import ProximitySearch

router = APIRouter(tags=["locations"])

_ERRORS = {500: {"model": ErrorResponse}}


@router.post(
    "/locations",
    response_model=LocationCreatedResponse,
    summary="Store a location",
    responses=_ERRORS,
    openapi_extra={
        "requestBody": {
            "content": {
                "application/json": {
                    "schema": LocationCreateRequest.model_json_schema()
                }
            }
        }
    },
)
async def add_location(
    request: Request,
    store: LocationStore = Depends(get_location_store),
    strict: bool = Depends(strict_bodies),
):
    start = time.perf_counter_ns()
    body = decode_body(LocationCreateRequest, await request.body()).unwrap(strict)

    location_id = await store.create(Location(**body.model_dump()))
    return LocationCreatedResponse(id=location_id, time_ns=elapsed_ns(start))


@router.get(
    "/locations/{category}",
    response_model=LocationListResponse,
    summary="List locations by category",
    responses=_ERRORS,
)
async def get_locations_by_category(
    category: str,
    store: LocationStore = Depends(get_location_store),
):
    start = time.perf_counter_ns()
    locations = await store.list_by_category(category)
    return LocationListResponse(
        locations=[LocationOut.model_validate(loc) for loc in locations],
        time_ns=elapsed_ns(start),
    )


@router.post(
    "/search",
    response_model=SearchResponse,
    summary="Search a category within a radius",
    description=(
        "Returns every location of the category whose haversine distance "
        "from the query point is at most ``radius_km``, in storage order."
    ),
    responses=_ERRORS,
    openapi_extra={
        "requestBody": {
            "content": {
                "application/json": {"schema": SearchRequest.model_json_schema()}
            }
        }
    },
)
async def search_locations(
    request: Request,
    search: ProximitySearch = Depends(get_proximity_search),
    strict: bool = Depends(strict_bodies),
):
    start = time.perf_counter_ns()
    body = decode_body(SearchRequest, await request.body()).unwrap(strict)

    results = await search.search(SearchQuery(**body.model_dump()))
    return SearchResponse(
        locations=[SearchResultOut.model_validate(r) for r in results],
        time_ns=elapsed_ns(start),
    )
