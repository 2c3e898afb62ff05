"""
Status endpoints
================

GET /health     -- liveness, touches nothing
GET /db-status  -- issues ``SELECT 1`` against the store
"""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from src.api.dependencies import get_db
from src.api.schemas import ErrorResponse, HealthResponse, StatusResponse
from src.infrastructure.repositories import SchoolRepository

logger = logging.getLogger(__name__)

router = APIRouter(tags=["status"])


@router.get("/health", response_model=HealthResponse, summary="Health check")
async def health():
    return HealthResponse()


@router.get(
    "/db-status",
    response_model=StatusResponse,
    summary="Database connectivity check",
    responses={500: {"model": ErrorResponse}},
)
async def db_status(db: AsyncSession = Depends(get_db)):
    try:
        await SchoolRepository(db).ping()
    except (SQLAlchemyError, OSError):
        logger.exception("DB status check failed")
        return JSONResponse(
            status_code=500,
            content=ErrorResponse(error="Database connection failed").model_dump(),
        )
    return StatusResponse(message="Database connected")
