"""
FastAPI application factory.

* Registers the school and status routes at the root path.
* Creates the connection pool in the lifespan and disposes it on shutdown.
* Maps unmatched routes to 404 and anything unhandled to a generic 500.
* Swagger / OpenAPI UI available at ``/docs``.
"""

from contextlib import asynccontextmanager
import logging
import time
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.api.routes import schools, status
from src.api.schemas import ErrorResponse
from src.config import Settings, settings as default_settings
from src.infrastructure.database import create_engine, create_session_factory

logging.basicConfig(level=logging.INFO)

logger = logging.getLogger(__name__)


async def _check_connection(engine) -> None:
    """Log whether the store is reachable; never fails startup."""
    try:
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
    except (SQLAlchemyError, OSError) as exc:
        logger.error("Database connection failed: %s", exc)
    else:
        logger.info("Database connected successfully")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create the pool on startup; dispose of it on shutdown."""
    engine = create_engine(app.state.settings)
    app.state.engine = engine
    app.state.session_factory = create_session_factory(engine)
    await _check_connection(engine)
    yield
    await engine.dispose()
    logger.info("Database pool closed")


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code, content=ErrorResponse(error=message).model_dump()
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    # Unknown path and known path with the wrong method both read as "no route".
    if exc.status_code in (404, 405):
        return _error(404, "Not found")
    return _error(exc.status_code, str(exc.detail))


async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return _error(500, "Internal Server Error")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or default_settings
    logging.getLogger().setLevel(settings.log_level.upper())

    app = FastAPI(
        title="School Locator API",
        description=(
            "Stores schools with their coordinates and lists them sorted "
            "by great-circle distance from a given point."
        ),
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def access_log(request: Request, call_next):
        started = time.perf_counter()
        status_code = 500
        try:
            response = await call_next(request)
            status_code = response.status_code
            return response
        finally:
            elapsed_ms = (time.perf_counter() - started) * 1000
            logger.info(
                "%s %s %d %.1fms",
                request.method,
                request.url.path,
                status_code,
                elapsed_ms,
            )

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    # Routers
    app.include_router(status.router)
    app.include_router(schools.router)

    return app
