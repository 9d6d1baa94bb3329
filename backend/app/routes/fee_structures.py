"""
Rodrise School Management Backend — Fee Structure Route Handlers
=================================================================

What:  GET /api/fee-structures (filters: academicYearId, classId, feeTypeId,
       isActive), POST to create and PUT to update by
       (academicYearId, classId, feeTypeId).

Bodies are plain dicts for the same reason as /api/fee-types: the service
validates them and answers 400 {"error": "Validation error", "details": [...]}.
"""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db_session
from app.schemas.common import ErrorResponse
from app.schemas.fee_structure import FeeStructureListResponse, FeeStructureSavedResponse
from app.services.fee_structure_service import fee_structure_service

router = APIRouter(prefix="/api", tags=["Fee Structures"])

_ERRORS = {
    400: {"description": "Validation error or duplicate", "model": ErrorResponse},
    500: {"description": "Server error", "model": ErrorResponse},
}


@router.get(
    "/fee-structures",
    response_model=FeeStructureListResponse,
    responses=_ERRORS,
    summary="List fee structures",
)
async def list_fee_structures(
    academic_year_id: Optional[str] = Query(default=None, alias="academicYearId"),
    class_id: Optional[str] = Query(default=None, alias="classId"),
    fee_type_id: Optional[str] = Query(default=None, alias="feeTypeId"),
    is_active: Optional[str] = Query(default=None, alias="isActive"),
    db: AsyncSession = Depends(get_db_session),
) -> FeeStructureListResponse:
    return await fee_structure_service.list_fee_structures(
        db,
        academic_year_id=academic_year_id,
        class_id=class_id,
        fee_type_id=fee_type_id,
        is_active=is_active,
    )


@router.post(
    "/fee-structures",
    response_model=FeeStructureSavedResponse,
    status_code=status.HTTP_201_CREATED,
    responses=_ERRORS,
    summary="Create a fee structure",
)
async def create_fee_structure(
    body: Dict[str, Any] = Body(...),
    db: AsyncSession = Depends(get_db_session),
) -> FeeStructureSavedResponse:
    return await fee_structure_service.create_fee_structure(db, body)


@router.put(
    "/fee-structures",
    response_model=FeeStructureSavedResponse,
    responses={404: {"description": "No such fee structure", "model": ErrorResponse}, **_ERRORS},
    summary="Update the fee structure for a class, academic year and fee type",
)
async def update_fee_structure(
    body: Dict[str, Any] = Body(...),
    db: AsyncSession = Depends(get_db_session),
) -> FeeStructureSavedResponse:
    return await fee_structure_service.update_fee_structure(db, body)
