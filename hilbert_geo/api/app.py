"""FastAPI application factory."""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from .routers import geohash

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    """Create and configure FastAPI application."""
    app = FastAPI(
        title="Hilbert Geo API",
        description="Order-preserving geohashes on a Hilbert curve",
        version=__version__,
    )

    # CORS middleware (allow all origins so map frontends can fetch GeoJSON)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.on_event("startup")
    async def startup_event() -> None:
        logger.info(f"Starting Hilbert Geo API v{__version__}...")

    # Include routers
    app.include_router(geohash.router, prefix="/api/geohash", tags=["geohash"])

    # Health check endpoint
    @app.get("/health")
    async def health_check() -> dict[str, str]:
        return {"status": "healthy"}

    return app


app = create_app()
