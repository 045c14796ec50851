"""
Health Check Handler

Provides health check endpoints for monitoring and load balancers.
"""

from fastapi import APIRouter

from cms.api.dependencies.store import StoreDep
from cms.config.settings import settings
from cms.shared.schemas.common import HealthResponse


router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """
    Liveness check.

    Returns:
        HealthResponse with status "ok" and the current server time
    """
    return HealthResponse(status="ok", version=settings.APP_VERSION)


@router.get("/ready")
async def readiness_check(store: StoreDep):
    """
    Readiness check.

    Returns:
        Ready status with the number of records per collection
    """
    return {"status": "ready", "collections": store.counts()}
