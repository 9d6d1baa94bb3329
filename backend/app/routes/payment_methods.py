"""
Rodrise School Management Backend — Payment Method Route Handlers
==================================================================

What:  GET /api/payment-methods (active, alphabetical) and POST to create one.
"""

from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db_session
from app.schemas.common import ErrorResponse
from app.schemas.payment_method import PaymentMethodCreate, PaymentMethodResponse
from app.services.payment_method_service import payment_method_service

router = APIRouter(prefix="/api", tags=["Payment Methods"])


@router.get(
    "/payment-methods",
    response_model=List[PaymentMethodResponse],
    responses={500: {"description": "Server error", "model": ErrorResponse}},
    summary="List active payment methods",
)
async def list_payment_methods(
    db: AsyncSession = Depends(get_db_session),
) -> List[PaymentMethodResponse]:
    return await payment_method_service.list_payment_methods(db)


@router.post(
    "/payment-methods",
    response_model=PaymentMethodResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"description": "Missing name or duplicate", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Create a payment method",
)
async def create_payment_method(
    payload: PaymentMethodCreate,
    db: AsyncSession = Depends(get_db_session),
) -> PaymentMethodResponse:
    return await payment_method_service.create_payment_method(db, payload)
