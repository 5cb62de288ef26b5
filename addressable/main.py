"""addressable — FastAPI application factory."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from addressable.adapters.persistence.database import engine
from addressable.config import settings
from addressable.infrastructure.api.routes_address import router as address_router
from addressable.infrastructure.api.routes_health import router as health_router
from addressable.infrastructure.api.routes_locations import router as locations_router

logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events."""
    try:
        async with engine.begin():
            pass  # Connection pool warmed up
        logger.info("Database connection established")
    except Exception as e:
        logger.warning("Database not available on startup: %s", e)
    yield
    await engine.dispose()


def create_app() -> FastAPI:
    app = FastAPI(
        title="addressable",
        description="Postal address fields and address-to-coordinate geocoding",
        version="0.1.0",
        lifespan=lifespan,
    )

    # Register routers
    app.include_router(health_router, prefix="/api")
    app.include_router(address_router, prefix="/api")
    app.include_router(locations_router, prefix="/api")

    return app


app = create_app()
