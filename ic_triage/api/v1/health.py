"""Health check endpoints."""

from fastapi import APIRouter, status
from pydantic import BaseModel

from ic_triage.api.deps import Catalog

router = APIRouter()


class HealthResponse(BaseModel):
    """Health check response."""

    status: str


@router.get(
    "",
    response_model=HealthResponse,
    status_code=status.HTTP_200_OK,
    summary="Health check",
    description="Returns service health status",
)
async def health_check() -> HealthResponse:
    """Check if the service is healthy.

    Returns:
        Health status response
    """
    return HealthResponse(status="ok")


@router.get(
    "/ready",
    response_model=HealthResponse,
    status_code=status.HTTP_200_OK,
    summary="Readiness check",
    description="Returns service readiness status for k8s probes",
)
async def readiness_check(catalog: Catalog) -> HealthResponse:
    """Check if the service is ready to accept requests.

    Ready once the instrument catalog has loaded; a broken catalog fails
    the probe through the global exception handler.

    Returns:
        Readiness status response
    """
    return HealthResponse(status="ok")
