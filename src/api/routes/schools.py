"""
School endpoints
================

POST /addSchool                    -- validate and store a school (201)
GET  /listSchools?lat=<>&lng=<>    -- every school, nearest first
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from src.api.dependencies import get_db
from src.api.schemas import (
    AddSchoolResponse,
    ErrorResponse,
    ListSchoolsResponse,
    RankedSchoolResponse,
    SchoolResponse,
    UserLocation,
    ValidationErrorResponse,
)
from src.domain.entities import Location
from src.domain.ranking import rank_schools
from src.api.validation import (
    FieldError,
    validate_location_query,
    validate_new_school,
)
from src.infrastructure.repositories import SchoolRepository

logger = logging.getLogger(__name__)

router = APIRouter(tags=["schools"])

STORE_ERRORS = (SQLAlchemyError, OSError)

_error_responses = {
    400: {"model": ValidationErrorResponse, "description": "Invalid input"},
    500: {"model": ErrorResponse, "description": "Database error"},
}


def validation_failed(errors: list[FieldError]) -> JSONResponse:
    body = ValidationErrorResponse(errors=[e.to_dict() for e in errors])
    return JSONResponse(status_code=400, content=body.model_dump())


def database_error() -> JSONResponse:
    return JSONResponse(
        status_code=500, content=ErrorResponse(error="Database error").model_dump()
    )


async def _json_body(request: Request) -> Any:
    """Parsed JSON body, or ``None`` if it is missing or malformed.

    Bodies over ``max_body_bytes`` are refused with 413 before parsing.
    """
    limit = request.app.state.settings.max_body_bytes
    if len(await request.body()) > limit:
        raise HTTPException(status_code=413, detail="Payload Too Large")
    try:
        return await request.json()
    except ValueError:
        logger.warning("Unparseable JSON body on %s", request.url.path)
        return None


@router.post(
    "/addSchool",
    status_code=201,
    response_model=AddSchoolResponse,
    summary="Add a school",
    responses=_error_responses,
)
async def add_school(
    request: Request,
    db: AsyncSession = Depends(get_db),
):
    new_school, errors = validate_new_school(await _json_body(request))
    if errors:
        return validation_failed(errors)

    try:
        school = await SchoolRepository(db).create_school(
            name=new_school.name,
            address=new_school.address,
            latitude=new_school.latitude,
            longitude=new_school.longitude,
        )
    except STORE_ERRORS:
        logger.exception("DB error (addSchool)")
        return database_error()

    logger.info("School %s added: %s", school.id, school.name)
    return AddSchoolResponse(data=SchoolResponse.model_validate(school))


@router.get(
    "/listSchools",
    response_model=ListSchoolsResponse,
    summary="List all schools sorted by distance from a point",
    responses=_error_responses,
)
async def list_schools(
    request: Request,
    db: AsyncSession = Depends(get_db),
):
    query, errors = validate_location_query(request.query_params)
    if errors:
        return validation_failed(errors)

    try:
        schools = await SchoolRepository(db).list_schools()
    except STORE_ERRORS:
        logger.exception("DB error (listSchools)")
        return database_error()

    ranked = rank_schools(Location(query.lat, query.lng), schools)
    return ListSchoolsResponse(
        user_location=UserLocation(lat=query.lat, lng=query.lng),
        total=len(ranked),
        schools=[RankedSchoolResponse.model_validate(r) for r in ranked],
    )
