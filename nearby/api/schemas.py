"""Pydantic request / response schemas for the REST API."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field


# ── Requests ──────────────────────────────────────────────────────────
# Every field has a zero-value default so lenient decoding can fill gaps.
# Coordinates are not range-checked, but inf and NaN are rejected.


class LocationCreateRequest(BaseModel):
    name: str = ""
    address: str = ""
    latitude: float = 0.0
    longitude: float = 0.0
    category: str = ""

    model_config = {"allow_inf_nan": False}


class SearchRequest(BaseModel):
    latitude: float = 0.0
    longitude: float = 0.0
    category: str = ""
    radius_km: float = 0.0

    model_config = {"allow_inf_nan": False}


class TripCostRequest(BaseModel):
    latitude: float = 0.0
    longitude: float = 0.0

    model_config = {"allow_inf_nan": False}


# ── Responses ─────────────────────────────────────────────────────────


class LocationOut(BaseModel):
    id: Optional[str] = None
    name: str
    address: str
    latitude: float
    longitude: float
    category: str

    model_config = {"from_attributes": True}


class SearchResultOut(BaseModel):
    id: Optional[str] = None
    name: str
    address: str
    distance: float = Field(..., description="Great-circle distance in km.")
    category: str

    model_config = {"from_attributes": True}


class LocationCreatedResponse(BaseModel):
    id: str
    time_ns: int


class LocationListResponse(BaseModel):
    locations: list[LocationOut] = []
    time_ns: int


class SearchResponse(BaseModel):
    locations: list[SearchResultOut] = []
    time_ns: int


class TripCostResponse(BaseModel):
    total_cost: Optional[float] = None
    fuel_cost: Optional[float] = None
    toll_cost: Optional[float] = None
    time_ns: int


class HealthResponse(BaseModel):
    status: str = "ok"


class ErrorResponse(BaseModel):
    detail: str
