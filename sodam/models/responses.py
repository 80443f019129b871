"""
Pydantic models for API responses
"""
from typing import List

from pydantic import BaseModel, Field

from sodam.core.enums import UserGrade
from sodam.models.domain import CodeEntry


class HealthResponse(BaseModel):
    """Health check response"""
    status: str = Field(..., description="Service status")
    version: str = Field(..., description="Application version")
    redis_available: bool = Field(..., description="Primary redis database reachable")
    cache_available: bool = Field(..., description="Cache redis database reachable")


class CodeListResponse(BaseModel):
    """All members of a code book"""
    kind: str = Field(..., description="Code book name")
    items: List[CodeEntry] = Field(default_factory=list, description="Members in declaration order")


class GradeResolutionResponse(BaseModel):
    """Grade resolved from a sign-up purpose"""
    purpose: str = Field(..., description="Requested purpose")
    grade: UserGrade = Field(..., description="Resolved user grade")
    role: str = Field(..., description="Authorization role of the grade")


class RadiusResponse(BaseModel):
    """Attendance radius a store is registered with"""
    radius: int = Field(..., gt=0, description="Radius in meters")
    default_radius: int = Field(..., gt=0, description="Configured default radius in meters")
