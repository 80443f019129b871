"""
Code book handlers - payroll status, tax policy and user grade vocabularies
"""
from fastapi import APIRouter, Depends, HTTPException, Query, status

from sodam.api.dependencies import get_code_service
from sodam.core.exceptions import EntityNotFoundError, InvalidOperationError
from sodam.core.logging import get_logger
from sodam.models.domain import CodeEntry
from sodam.models.responses import CodeListResponse, GradeResolutionResponse
from sodam.services.code_service import CodeService

logger = get_logger(__name__)
router = APIRouter(prefix="/codes", tags=["Codes"])


@router.get("/payroll-statuses", response_model=CodeListResponse)
async def list_payroll_statuses(
    code_service: CodeService = Depends(get_code_service)
) -> CodeListResponse:
    """Payroll statuses with their labels"""
    return CodeListResponse(kind="payroll-statuses", items=code_service.list_payroll_statuses())


@router.get("/tax-policy-types", response_model=CodeListResponse)
async def list_tax_policy_types(
    code_service: CodeService = Depends(get_code_service)
) -> CodeListResponse:
    """Tax policy types with their labels"""
    return CodeListResponse(kind="tax-policy-types", items=code_service.list_tax_policy_types())


@router.get("/user-grades", response_model=CodeListResponse)
async def list_user_grades(
    code_service: CodeService = Depends(get_code_service)
) -> CodeListResponse:
    """User grades with their authorization roles"""
    return CodeListResponse(kind="user-grades", items=code_service.list_user_grades())


@router.get("/user-grades/resolve", response_model=GradeResolutionResponse)
async def resolve_user_grade(
    purpose: str = Query(..., description="personal | employee | boss"),
    code_service: CodeService = Depends(get_code_service)
) -> GradeResolutionResponse:
    """
    Resolve the grade requested by a sign-up purpose

    Raises:
        HTTPException 400: Unknown or blank purpose
    """
    try:
        grade = code_service.resolve_grade_for_purpose(purpose)
    except InvalidOperationError as e:
        logger.warning("Grade resolution rejected", purpose=purpose, error=e.message)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={
                "error": "Invalid purpose",
                "message": e.message,
                "details": e.details
            }
        )

    return GradeResolutionResponse(purpose=purpose, grade=grade, role=grade.role)


@router.get("/{kind}/{code}", response_model=CodeEntry)
async def describe_code(
    kind: str,
    code: str,
    code_service: CodeService = Depends(get_code_service)
) -> CodeEntry:
    """
    One member of a code book

    Raises:
        HTTPException 404: Unknown code book or member
    """
    try:
        return code_service.describe(kind, code)
    except EntityNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail={
                "error": "Code not found",
                "message": e.message,
                "details": e.details
            }
        )
