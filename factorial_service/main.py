"""
Factorial Service - Main FastAPI Application

Wires the factorial and health routers, and owns the lifecycle of the
single shared cache store.
"""

from contextlib import asynccontextmanager
from typing import Optional

import structlog
from fastapi import FastAPI

from .api.endpoints.factorial import router as factorial_router
from .api.endpoints.health import router as health_router
from .constants import APP_NAME, APP_VERSION
from .core.config import Settings, get_settings
from .core.logging import configure_logging
from .infrastructure.repositories.factorial_cache_repository import (
    create_factorial_cache_store,
)

logger = structlog.get_logger()


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the FastAPI application for the given settings."""
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Create the cache store on startup and close it on shutdown."""
        configure_logging(settings)
        logger.info(
            "Starting factorial service",
            version=APP_VERSION,
            environment=settings.ENVIRONMENT,
            cache_backend=settings.CACHE_BACKEND,
            upper_factorial_limit=settings.UPPER_FACTORIAL_LIMIT,
            cache_ttl_seconds=settings.DEFAULT_CACHE_EXPIRATION_TIME,
        )

        store = create_factorial_cache_store(settings)
        app.state.cache_store = store

        # Serving continues without the cache; every request is computed
        if not await store.ping():
            logger.warning(
                "Cache store unreachable at startup, continuing without cache"
            )

        yield

        logger.info("Shutting down factorial service")
        try:
            await store.close()
        except Exception as e:
            logger.warning("Error closing cache store", error=str(e))

    app = FastAPI(
        title=APP_NAME,
        description="Computes factorials and memoizes them in Redis",
        version=APP_VERSION,
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.include_router(health_router)
    app.include_router(factorial_router)

    return app


app = create_app()
