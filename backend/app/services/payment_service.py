"""
Rodrise School Management Backend — Payment Service
====================================================

What:  List and record fee payments for /api/payments.
Who:   Called by app/routes/payments.py.

Create Flow (POST /api/payments):
    ┌──────────┐   ┌──────────┐   ┌──────────┐   ┌───────────┐   ┌──────────────┐
    │ Required │──▶│ Amounts  │──▶│ Receipt  │──▶│ Student   │──▶│ Payment +    │
    │ fields   │   │ & date   │   │ unique   │   │ exists    │   │ detail lines │
    └──────────┘   └──────────┘   └──────────┘   └───────────┘   └──────────────┘
        400            400            400            404          one transaction

The payment and its detail lines are flushed together; get_db_session
commits both or neither.
"""

import logging
import math
import uuid
from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.exceptions import (
    ConflictError,
    DatabaseError,
    NotFoundError,
    RodriseError,
    ValidationError,
)
from app.models import (
    AcademicYear,
    FeePayment,
    FeeType,
    PaymentDetail,
    PaymentMethod,
    Student,
)
from app.models.payment import DEFAULT_CREATED_BY
from app.schemas.common import Pagination
from app.schemas.payment import PaymentCreate, PaymentListResponse, PaymentResponse
from app.services.coercion import parse_amount, parse_iso_date, parse_pagination, parse_uuid
from app.services.lookups import require_reference

logger = logging.getLogger(__name__)

REQUIRED_MESSAGE = "Missing required fields"
DUPLICATE_MESSAGE = "Receipt number already exists"
AMOUNT_MESSAGE = "Amounts must be non-negative numbers"
DATE_MESSAGE = "Dates must be ISO 8601 (YYYY-MM-DD)"

# Relations every PaymentResponse reads
_PAYMENT_RELATIONS = (
    selectinload(FeePayment.student).selectinload(Student.school_class),
    selectinload(FeePayment.academic_year),
    selectinload(FeePayment.payment_method),
    selectinload(FeePayment.payment_details).selectinload(PaymentDetail.fee_type),
)


class PaymentService:

    async def list_payments(
        self,
        db: AsyncSession,
        student_id: Optional[str] = None,
        page: Optional[str] = None,
        limit: Optional[str] = None,
    ) -> PaymentListResponse:
        """
        Payments newest first (by payment date), optionally for one student.

        Raises:
            ValidationError: bad page/limit or studentId
            DatabaseError: query failed (→ 500 "Failed to fetch payments")
        """
        page_number, page_size = parse_pagination(page, limit)
        conditions = []
        if student_id:
            conditions.append(
                FeePayment.student_id == parse_uuid(student_id, "studentId", "Unknown studentId")
            )

        try:
            result = await db.execute(
                select(FeePayment)
                .where(*conditions)
                .options(*_PAYMENT_RELATIONS)
                .order_by(FeePayment.payment_date.desc(), FeePayment.created_at.desc())
                .offset((page_number - 1) * page_size)
                .limit(page_size)
            )
            payments = [PaymentResponse.model_validate(p) for p in result.scalars().all()]

            total = await db.scalar(
                select(func.count()).select_from(FeePayment).where(*conditions)
            )
            total = total or 0

            return PaymentListResponse(
                payments=payments,
                pagination=Pagination(
                    page=page_number,
                    limit=page_size,
                    total=total,
                    pages=math.ceil(total / page_size),
                ),
            )
        except Exception as e:
            logger.error("Database error listing payments: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Failed to fetch payments",
                context={"error_type": type(e).__name__},
            )

    async def create_payment(self, db: AsyncSession, payload: PaymentCreate) -> PaymentResponse:
        """
        Record one payment and its per-fee-type detail lines.

        Raises:
            ValidationError: a required field is missing, an amount or date is
                             malformed, or a referenced id is unknown
            ConflictError: the receipt number is already used
            NotFoundError: the student does not exist (→ 404 "Student not found")
            DatabaseError: any other persistence failure (→ "Failed to create payment")
        """
        # ── Step 1: Presence ──────────────────────────────────────────────
        if (
            not payload.student_id
            or not payload.academic_year_id
            or not payload.payment_date
            or not payload.receipt_number
            or not payload.amount_paid
            or not payload.payment_details
        ):
            raise ValidationError(message=REQUIRED_MESSAGE)
        if any(not d.fee_type_id or d.amount in (None, "") for d in payload.payment_details):
            raise ValidationError(message=REQUIRED_MESSAGE, field="paymentDetails")

        # ── Step 2: Amounts and date ──────────────────────────────────────
        amount_paid = parse_amount(payload.amount_paid, "amountPaid", AMOUNT_MESSAGE)
        detail_amounts = [
            parse_amount(d.amount, "paymentDetails.amount", AMOUNT_MESSAGE)
            for d in payload.payment_details
        ]
        payment_date = parse_iso_date(payload.payment_date, "paymentDate", DATE_MESSAGE)

        try:
            # ── Step 3: Receipt number ────────────────────────────────────
            existing = await db.execute(
                select(FeePayment.id)
                .where(FeePayment.receipt_number == payload.receipt_number)
                .limit(1)
            )
            if existing.scalar_one_or_none() is not None:
                raise ConflictError(
                    message=DUPLICATE_MESSAGE,
                    context={"receipt_number": payload.receipt_number},
                )

            # ── Step 4: Student and references ────────────────────────────
            try:
                student_uuid = uuid.UUID(payload.student_id)
            except ValueError:
                raise NotFoundError(resource="Student", resource_id=payload.student_id)
            student = await db.get(Student, student_uuid)
            if student is None:
                raise NotFoundError(resource="Student", resource_id=payload.student_id)

            academic_year = await require_reference(
                db, AcademicYear, payload.academic_year_id, "academicYearId"
            )
            payment_method_id = None
            if payload.payment_method_id:
                method = await require_reference(
                    db, PaymentMethod, payload.payment_method_id, "paymentMethodId"
                )
                payment_method_id = method.id

            details = []
            for detail, amount in zip(payload.payment_details, detail_amounts):
                fee_type = await require_reference(db, FeeType, detail.fee_type_id, "feeTypeId")
                details.append(PaymentDetail(fee_type_id=fee_type.id, amount=amount))

            # ── Step 5: Insert ────────────────────────────────────────────
            record = FeePayment(
                student_id=student.id,
                academic_year_id=academic_year.id,
                payment_method_id=payment_method_id,
                payment_date=payment_date,
                receipt_number=payload.receipt_number,
                amount_paid=amount_paid,
                reference_number=payload.reference_number,
                notes=payload.notes,
                created_by=payload.created_by or DEFAULT_CREATED_BY,
                payment_details=details,
            )
            db.add(record)
            await db.flush()
            logger.info(
                "Payment recorded: receipt %s, %s for student %s (%d lines)",
                record.receipt_number,
                amount_paid,
                student.admission_number,
                len(details),
            )

            result = await db.execute(
                select(FeePayment)
                .where(FeePayment.id == record.id)
                .options(*_PAYMENT_RELATIONS)
                .execution_options(populate_existing=True)
            )
            return PaymentResponse.model_validate(result.scalar_one())

        except RodriseError:
            raise
        except IntegrityError as e:
            raise ConflictError(
                message=DUPLICATE_MESSAGE,
                context={"receipt_number": payload.receipt_number},
            ) from e
        except Exception as e:
            logger.error("Database error creating payment: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Failed to create payment",
                context={"error_type": type(e).__name__},
            )


payment_service = PaymentService()
