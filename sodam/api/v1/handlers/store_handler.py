"""
Store policy handlers
"""
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from sodam.api.dependencies import get_store_service
from sodam.core.exceptions import InvalidOperationError
from sodam.models.responses import RadiusResponse
from sodam.services.store_service import StorePolicyService

router = APIRouter(prefix="/stores", tags=["Stores"])


@router.get("/radius", response_model=RadiusResponse)
async def resolve_radius(
    radius: Optional[int] = Query(None, description="Requested radius in meters"),
    store_service: StorePolicyService = Depends(get_store_service)
) -> RadiusResponse:
    """
    Attendance radius a store would be registered with

    Raises:
        HTTPException 400: Radius is zero or negative
    """
    try:
        resolved = store_service.resolve_radius(radius)
    except InvalidOperationError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={
                "error": "Invalid radius",
                "message": e.message,
                "details": e.details
            }
        )

    return RadiusResponse(radius=resolved, default_radius=store_service.default_radius())
