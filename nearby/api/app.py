"""
FastAPI application factory.

* Registers routes for locations / search, trip cost and health.
* Builds the database engine and the shared HTTP client in the lifespan
  and disposes them on shutdown.
* Maps domain errors to JSON error responses.
* Swagger / OpenAPI UI available at ``/docs``.
"""

from contextlib import asynccontextmanager
import logging

import httpx
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from nearby.api.routes import health, locations, trips
from nearby.config import settings
from nearby.domain.errors import (
    NearbyError,
    NotFound,
    PersistenceError,
    ProviderResponseInvalid,
    ProviderUnavailable,
    RequestValidationError,
)
from nearby.infrastructure.database import (
    build_engine,
    build_session_factory,
    create_tables,
)

logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)

# Most specific first; the first isinstance match wins.
ERROR_STATUS: list[tuple[type[NearbyError], int]] = [
    (NotFound, 404),
    (RequestValidationError, 400),
    (PersistenceError, 500),
    (ProviderUnavailable, 500),
    (ProviderResponseInvalid, 500),
]


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open the engine and HTTP client on startup; close them on shutdown."""
    engine = build_engine(settings)
    await create_tables(engine)
    app.state.engine = engine
    app.state.session_factory = build_session_factory(engine)
    app.state.http_client = httpx.AsyncClient()
    logger.info("Nearby Locations API started")
    yield
    await app.state.http_client.aclose()
    await engine.dispose()
    logger.info("Nearby Locations API stopped")


async def _nearby_error_handler(request: Request, exc: NearbyError) -> JSONResponse:
    status = next(
        (code for cls, code in ERROR_STATUS if isinstance(exc, cls)), 500
    )
    if status >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=status, content={"detail": str(exc)})


def create_app() -> FastAPI:
    app = FastAPI(
        title="Nearby Locations API",
        description=(
            "Stores points of interest and finds those of a category within "
            "a radius of a point using haversine distance.  Estimates fuel "
            "and toll cost to a stored location via TollGuru."
        ),
        version="1.0.0",
        lifespan=lifespan,
    )

    app.add_exception_handler(NearbyError, _nearby_error_handler)

    # Routers
    app.include_router(locations.router)
    app.include_router(trips.router)
    app.include_router(health.router)

    return app
