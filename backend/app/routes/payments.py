"""
Rodrise School Management Backend — Payment Route Handlers
===========================================================

What:  GET /api/payments (?studentId=, ?page=, ?limit=) and POST /api/payments.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db_session
from app.schemas.common import ErrorResponse
from app.schemas.payment import PaymentCreate, PaymentListResponse, PaymentResponse
from app.services.payment_service import payment_service

router = APIRouter(prefix="/api", tags=["Payments"])


@router.get(
    "/payments",
    response_model=PaymentListResponse,
    responses={500: {"description": "Server error", "model": ErrorResponse}},
    summary="List payments (newest first, paginated)",
)
async def list_payments(
    student_id: Optional[str] = Query(default=None, alias="studentId"),
    page: Optional[str] = Query(default=None),
    limit: Optional[str] = Query(default=None),
    db: AsyncSession = Depends(get_db_session),
) -> PaymentListResponse:
    return await payment_service.list_payments(db, student_id=student_id, page=page, limit=limit)


@router.post(
    "/payments",
    response_model=PaymentResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"description": "Missing field, bad amount or duplicate receipt", "model": ErrorResponse},
        404: {"description": "Unknown student", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Record a payment",
)
async def create_payment(
    payload: PaymentCreate,
    db: AsyncSession = Depends(get_db_session),
) -> PaymentResponse:
    return await payment_service.create_payment(db, payload)
