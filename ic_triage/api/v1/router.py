"""API v1 router aggregating all endpoints."""

from fastapi import APIRouter

from ic_triage.api.v1 import catalog, health, triage

api_router = APIRouter()

# Health check
api_router.include_router(
    health.router,
    prefix="/health",
    tags=["health"],
)

# Triage evaluation
api_router.include_router(
    triage.router,
    prefix="/triage",
    tags=["triage"],
)

# Instrument catalog
api_router.include_router(
    catalog.router,
    prefix="/catalog",
    tags=["catalog"],
)
