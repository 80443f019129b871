"""
Health check handlers

Redis pings are blocking calls, so the handlers are plain functions and
FastAPI runs them in its threadpool.
"""
from fastapi import APIRouter, Depends

from sodam.api.dependencies import get_health_service, get_settings
from sodam.config import Settings
from sodam.models.responses import HealthResponse
from sodam.services.health_service import HealthService

router = APIRouter(prefix="/health", tags=["Health"])


@router.get("", response_model=HealthResponse)
@router.get("/", response_model=HealthResponse, include_in_schema=False)
def health_check(
    health_service: HealthService = Depends(get_health_service),
    settings: Settings = Depends(get_settings)
) -> HealthResponse:
    """
    Basic health check
    The service is up; reports whether each redis database answers
    """
    return HealthResponse(
        status="healthy",
        version=settings.app_version,
        redis_available=health_service.is_primary_available(),
        cache_available=health_service.is_cache_available()
    )


@router.get("/ready", response_model=HealthResponse)
def readiness_check(
    health_service: HealthService = Depends(get_health_service)
) -> HealthResponse:
    """
    Readiness check
    Ready only when both redis databases answer
    """
    return HealthResponse(**health_service.check())
