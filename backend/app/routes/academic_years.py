"""
Rodrise School Management Backend — Academic Year Route Handlers
=================================================================

What:  GET /api/academic-years (optionally ?isActive=true) and
       POST /api/academic-years.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db_session
from app.schemas.academic_year import (
    AcademicYearCreate,
    AcademicYearCreatedResponse,
    AcademicYearListResponse,
)
from app.schemas.common import ErrorResponse
from app.services.academic_year_service import academic_year_service

router = APIRouter(prefix="/api", tags=["Academic Years"])


@router.get(
    "/academic-years",
    response_model=AcademicYearListResponse,
    responses={500: {"description": "Server error", "model": ErrorResponse}},
    summary="List academic years (newest first)",
)
async def list_academic_years(
    is_active: Optional[str] = Query(
        default=None,
        alias="isActive",
        description="Pass 'true' to return only active years",
    ),
    db: AsyncSession = Depends(get_db_session),
) -> AcademicYearListResponse:
    return await academic_year_service.list_academic_years(db, is_active=is_active)


@router.post(
    "/academic-years",
    response_model=AcademicYearCreatedResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"description": "Missing year, bad date, or duplicate", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Create an academic year",
)
async def create_academic_year(
    payload: AcademicYearCreate,
    db: AsyncSession = Depends(get_db_session),
) -> AcademicYearCreatedResponse:
    return await academic_year_service.create_academic_year(db, payload)
