"""
Rodrise School Management Backend — Student Model
==================================================

What:  ORM model for the `students` table.
Who:   StudentService (CRUD), PaymentService (payer lookup).

Table Design Rationale:
    - admission_number: the school's own identifier, unique across all
      students. Lookups for duplicates go through its unique constraint.
    - class_id / academic_year_id: where the student currently sits.
      Required on create; the service checks both exist before inserting.
    - status: ACTIVE until the student graduates, transfers or is suspended.
      Listings can filter on it.
    - fee_payments: read-only from this side; a student with payments
      cannot be deleted, so there is no delete cascade.
"""

import enum
import uuid
from datetime import date, datetime, timezone
from typing import TYPE_CHECKING, List, Optional

from sqlalchemy import Date, DateTime, Enum, ForeignKey, Index, String, Text, Uuid, text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base

if TYPE_CHECKING:
    from app.models.academic_year import AcademicYear
    from app.models.payment import FeePayment
    from app.models.school_class import SchoolClass


class StudentStatus(str, enum.Enum):
    ACTIVE = "ACTIVE"
    GRADUATED = "GRADUATED"
    TRANSFERRED = "TRANSFERRED"
    SUSPENDED = "SUSPENDED"


class Student(Base):
    """
    One enrolled (or formerly enrolled) student.

    Query Patterns:
        - Listing: optional ILIKE search over names, admission number and
          parent name; optional status filter; ORDER BY created_at DESC
        - Admission number check: WHERE admission_number = :n → unique constraint
    """

    __tablename__ = "students"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)

    admission_number: Mapped[str] = mapped_column(String(50), nullable=False, unique=True)

    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    middle_name: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    date_of_birth: Mapped[Optional[date]] = mapped_column(Date, nullable=True)
    gender: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)

    class_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("classes.id"),
        nullable=False,
    )
    academic_year_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("academic_years.id"),
        nullable=False,
    )

    parent_name: Mapped[Optional[str]] = mapped_column(String(200), nullable=True)
    parent_phone: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    parent_email: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    address: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    status: Mapped[StudentStatus] = mapped_column(
        Enum(StudentStatus, name="student_status", native_enum=False, length=20),
        nullable=False,
        default=StudentStatus.ACTIVE,
        server_default=text("'ACTIVE'"),
    )
    graduation_date: Mapped[Optional[date]] = mapped_column(Date, nullable=True)

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

    school_class: Mapped["SchoolClass"] = relationship()
    academic_year: Mapped["AcademicYear"] = relationship()
    fee_payments: Mapped[List["FeePayment"]] = relationship(
        back_populates="student",
        order_by="FeePayment.payment_date.desc()",
        passive_deletes=True,
    )

    def __repr__(self) -> str:
        return f"<Student(admission_number='{self.admission_number}', status={self.status})>"


Index("idx_students_created_at", Student.created_at)
Index("idx_students_class_id", Student.class_id)
