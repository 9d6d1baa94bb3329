"""
Rodrise School Management Backend — Fee Type Route Handlers
============================================================

What:  GET /api/fee-types (?isActive=, ?frequency=) and POST /api/fee-types.

Why the POST body is a plain dict:
    FeeTypeService validates it against FeeTypeCreate itself so a bad body
    answers 400 {"error": "Validation error", "details": [...]}, matching the
    other endpoints' 400s instead of FastAPI's 422.
"""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db_session
from app.schemas.common import ErrorResponse
from app.schemas.fee_type import FeeTypeCreatedResponse, FeeTypeListResponse
from app.services.fee_type_service import fee_type_service

router = APIRouter(prefix="/api", tags=["Fee Types"])


@router.get(
    "/fee-types",
    response_model=FeeTypeListResponse,
    responses={
        400: {"description": "Unknown frequency", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="List fee types",
)
async def list_fee_types(
    is_active: Optional[str] = Query(default=None, alias="isActive"),
    frequency: Optional[str] = Query(default=None, description="ONCE, TERM, YEAR or MONTH"),
    db: AsyncSession = Depends(get_db_session),
) -> FeeTypeListResponse:
    return await fee_type_service.list_fee_types(db, is_active=is_active, frequency=frequency)


@router.post(
    "/fee-types",
    response_model=FeeTypeCreatedResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"description": "Validation error or duplicate", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Create a fee type",
)
async def create_fee_type(
    body: Dict[str, Any] = Body(...),
    db: AsyncSession = Depends(get_db_session),
) -> FeeTypeCreatedResponse:
    return await fee_type_service.create_fee_type(db, body)
