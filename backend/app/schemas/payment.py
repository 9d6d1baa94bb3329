"""
Rodrise School Management Backend — Payment Schemas
===================================================

What:  Request and response shapes for /api/payments.

PaymentCreate is loose: required-field and amount checks live in
PaymentService so they answer with the endpoint's own 400 messages.
"""

import uuid
from datetime import date, datetime
from decimal import Decimal
from typing import List, Optional, Union

from app.schemas.academic_year import AcademicYearResponse
from app.schemas.common import CamelModel, Pagination
from app.schemas.fee_type import FeeTypeResponse
from app.schemas.payment_method import PaymentMethodResponse
from app.schemas.student import StudentSummary

AmountInput = Optional[Union[int, float, str]]


class PaymentDetailCreate(CamelModel):
    """One fee type's share of the payment."""
    fee_type_id: Optional[str] = None
    amount: AmountInput = None


class PaymentCreate(CamelModel):
    student_id: Optional[str] = None
    academic_year_id: Optional[str] = None
    payment_date: Optional[str] = None
    receipt_number: Optional[str] = None
    amount_paid: AmountInput = None
    payment_method_id: Optional[str] = None
    reference_number: Optional[str] = None
    notes: Optional[str] = None
    created_by: Optional[str] = None
    payment_details: Optional[List[PaymentDetailCreate]] = None


class PaymentDetailResponse(CamelModel):
    id: uuid.UUID
    fee_type_id: uuid.UUID
    amount: Decimal
    fee_type: Optional[FeeTypeResponse] = None


class PaymentResponse(CamelModel):
    id: uuid.UUID
    student_id: uuid.UUID
    academic_year_id: uuid.UUID
    payment_method_id: Optional[uuid.UUID] = None
    payment_date: date
    receipt_number: str
    amount_paid: Decimal
    reference_number: Optional[str] = None
    notes: Optional[str] = None
    created_by: str
    created_at: datetime
    student: Optional[StudentSummary] = None
    academic_year: Optional[AcademicYearResponse] = None
    payment_method: Optional[PaymentMethodResponse] = None
    payment_details: List[PaymentDetailResponse] = []


class PaymentListResponse(CamelModel):
    payments: List[PaymentResponse]
    pagination: Pagination
