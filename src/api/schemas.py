"""Pydantic request / response schemas for the REST API.

Request models are applied by ``src.api.validation`` rather than as
FastAPI body parameters, so that failures come back as a 400 with the
field-error list instead of FastAPI's 422.
"""

from __future__ import annotations

from typing import Annotated, Any, Optional

from pydantic import BaseModel, BeforeValidator, Field


def _number_only(value: Any) -> Any:
    """Reject booleans and integers too large to be a float."""
    if isinstance(value, bool):
        raise ValueError("not a number")
    if isinstance(value, int):
        try:
            return float(value)
        except OverflowError:
            raise ValueError("number out of range") from None
    return value


Coordinate = Annotated[float, BeforeValidator(_number_only)]


# ── Requests ──────────────────────────────────────────────────────────


class AddSchoolRequest(BaseModel):
    name: str = Field(..., min_length=1)
    address: str = Field(..., min_length=1)
    latitude: Coordinate = Field(..., ge=-90, le=90, allow_inf_nan=False)
    longitude: Coordinate = Field(..., ge=-180, le=180, allow_inf_nan=False)

    model_config = {"str_strip_whitespace": True}


class LocationQueryRequest(BaseModel):
    lat: Coordinate = Field(..., ge=-90, le=90, allow_inf_nan=False)
    lng: Coordinate = Field(..., ge=-180, le=180, allow_inf_nan=False)


# ── Responses ─────────────────────────────────────────────────────────


class SchoolResponse(BaseModel):
    id: int
    name: str
    address: str
    latitude: float
    longitude: float

    model_config = {"from_attributes": True}


class RankedSchoolResponse(SchoolResponse):
    distance_km: float


class AddSchoolResponse(BaseModel):
    success: bool = True
    message: str = "School added successfully"
    data: SchoolResponse


class UserLocation(BaseModel):
    lat: float
    lng: float


class ListSchoolsResponse(BaseModel):
    success: bool = True
    user_location: UserLocation
    total: int
    schools: list[RankedSchoolResponse] = []


class FieldErrorResponse(BaseModel):
    type: str = "field"
    value: Optional[Any] = None
    msg: str
    path: str
    location: str


class ValidationErrorResponse(BaseModel):
    success: bool = False
    errors: list[FieldErrorResponse]


class ErrorResponse(BaseModel):
    success: bool = False
    error: str


class StatusResponse(BaseModel):
    success: bool = True
    message: str


class HealthResponse(BaseModel):
    status: str = "ok"
    message: str = "Server is running"
