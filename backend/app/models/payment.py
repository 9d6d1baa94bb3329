"""
Rodrise School Management Backend — Fee Payment Models
=======================================================

What:  ORM models for `fee_payments` (one receipt) and `payment_details`
       (how that receipt splits across fee types).
Who:   PaymentService; StudentService reads a student's payments and refuses
       to delete a student who has any.

Table Design Rationale:
    - receipt_number: unique; a second payment with the same receipt is a
      duplicate, not a new payment.
    - payment_details: owned by the payment (cascade delete-orphan) and
      written in the same transaction.
"""

import uuid
from datetime import date, datetime, timezone
from decimal import Decimal
from typing import TYPE_CHECKING, List, Optional

from sqlalchemy import Date, DateTime, ForeignKey, Index, String, Text, Uuid, text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base
from app.models.fee_structure import Money

if TYPE_CHECKING:
    from app.models.academic_year import AcademicYear
    from app.models.fee_type import FeeType
    from app.models.payment_method import PaymentMethod
    from app.models.student import Student

DEFAULT_CREATED_BY = "system"


class FeePayment(Base):
    __tablename__ = "fee_payments"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)

    student_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("students.id"), nullable=False
    )
    academic_year_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("academic_years.id"), nullable=False
    )
    payment_method_id: Mapped[Optional[uuid.UUID]] = mapped_column(
        Uuid, ForeignKey("payment_methods.id"), nullable=True
    )

    payment_date: Mapped[date] = mapped_column(Date, nullable=False)
    receipt_number: Mapped[str] = mapped_column(String(50), nullable=False, unique=True)
    amount_paid: Mapped[Decimal] = mapped_column(Money, nullable=False)
    reference_number: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    notes: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    created_by: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
        default=DEFAULT_CREATED_BY,
        server_default=text(f"'{DEFAULT_CREATED_BY}'"),
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        server_default=text("CURRENT_TIMESTAMP"),
    )

    student: Mapped["Student"] = relationship(back_populates="fee_payments")
    academic_year: Mapped["AcademicYear"] = relationship()
    payment_method: Mapped[Optional["PaymentMethod"]] = relationship()
    payment_details: Mapped[List["PaymentDetail"]] = relationship(
        back_populates="payment",
        cascade="all, delete-orphan",
    )

    def __repr__(self) -> str:
        return f"<FeePayment(receipt='{self.receipt_number}', amount={self.amount_paid})>"


class PaymentDetail(Base):
    __tablename__ = "payment_details"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)

    payment_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("fee_payments.id", ondelete="CASCADE"), nullable=False
    )
    fee_type_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("fee_types.id"), nullable=False
    )
    amount: Mapped[Decimal] = mapped_column(Money, nullable=False)

    payment: Mapped["FeePayment"] = relationship(back_populates="payment_details")
    fee_type: Mapped["FeeType"] = relationship()


Index("idx_fee_payments_student_date", FeePayment.student_id, FeePayment.payment_date)
