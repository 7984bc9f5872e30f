"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from ic_triage.api.v1.router import api_router
from ic_triage.catalog.registry import get_catalog
from ic_triage.core.config import settings
from ic_triage.core.logging import setup_logging

# Setup logging
setup_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup and shutdown events."""
    logger.info(f"Starting IC Triage API (env={settings.env})")

    # Fail at startup rather than on the first request
    catalog = get_catalog()
    logger.info(f"Serving catalog {catalog.id} v{catalog.version}")

    yield

    logger.info("Shutting down IC Triage API")


app = FastAPI(
    title="IC Triage API",
    description="Clinical assessment scoring and integrated-care triage",
    version="0.1.0",
    docs_url="/docs" if settings.is_dev else None,
    redoc_url="/redoc" if settings.is_dev else None,
    openapi_url="/openapi.json" if settings.is_dev else None,
    lifespan=lifespan,
)


# Global exception handler
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unhandled exceptions."""
    logger.exception(f"Unhandled exception: {exc}")

    # Don't expose internal errors in production
    if settings.is_prod:
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "Internal server error"},
        )

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": str(exc)},
    )


# Include API router
app.include_router(api_router, prefix="/api/v1")


@app.get("/", include_in_schema=False)
async def root() -> dict:
    """Root endpoint with service info."""
    catalog = get_catalog()
    return {
        "service": "IC Triage API",
        "version": "0.1.0",
        "catalog_version": catalog.version,
        "docs": "/docs" if settings.is_dev else "Disabled in production",
    }
