"""
Rodrise School Management Backend — Fee Structure Model
========================================================

What:  ORM model for the `fee_structures` table: how much one fee type costs
       one class in one academic year, in total and per term.
Who:   FeeStructureService.

A (academic year, class, fee type) triple has at most one row, enforced by
uq_fee_structures_year_class_type. Updates address a row by that triple.
"""

import uuid
from datetime import datetime, timezone
from decimal import Decimal
from typing import TYPE_CHECKING

from sqlalchemy import (
    Boolean,
    DateTime,
    ForeignKey,
    Numeric,
    UniqueConstraint,
    Uuid,
    text,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base

if TYPE_CHECKING:
    from app.models.academic_year import AcademicYear
    from app.models.fee_type import FeeType
    from app.models.school_class import SchoolClass

# Currency amounts: 12 digits, 2 decimal places
Money = Numeric(12, 2)


class FeeStructure(Base):
    __tablename__ = "fee_structures"
    __table_args__ = (
        UniqueConstraint(
            "academic_year_id",
            "class_id",
            "fee_type_id",
            name="uq_fee_structures_year_class_type",
        ),
    )

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)

    academic_year_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("academic_years.id"), nullable=False
    )
    class_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("classes.id"), nullable=False)
    fee_type_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("fee_types.id"), nullable=False
    )

    amount: Mapped[Decimal] = mapped_column(Money, nullable=False)
    term1_amount: Mapped[Decimal] = mapped_column(
        Money, nullable=False, default=Decimal("0"), server_default=text("0")
    )
    term2_amount: Mapped[Decimal] = mapped_column(
        Money, nullable=False, default=Decimal("0"), server_default=text("0")
    )
    term3_amount: Mapped[Decimal] = mapped_column(
        Money, nullable=False, default=Decimal("0"), server_default=text("0")
    )

    is_active: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=True,
        server_default=text("true"),
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        server_default=text("CURRENT_TIMESTAMP"),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
        server_default=text("CURRENT_TIMESTAMP"),
    )

    academic_year: Mapped["AcademicYear"] = relationship()
    school_class: Mapped["SchoolClass"] = relationship()
    fee_type: Mapped["FeeType"] = relationship()

    def __repr__(self) -> str:
        return f"<FeeStructure(class_id={self.class_id}, fee_type_id={self.fee_type_id}, amount={self.amount})>"
