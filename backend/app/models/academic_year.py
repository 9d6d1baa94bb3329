"""
Rodrise School Management Backend — Academic Year Model
========================================================

What:  ORM model for the `academic_years` table ("2024-2025" and so on).
Who:   AcademicYearService.
"""

import uuid
from datetime import date, datetime, timezone
from typing import Optional

from sqlalchemy import Boolean, Date, DateTime, String, Uuid, text
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


class AcademicYear(Base):
    """
    One school year. Listings sort on `year` descending, which works because
    the label starts with the four-digit start year.
    """

    __tablename__ = "academic_years"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)

    year: Mapped[str] = mapped_column(String(20), nullable=False, unique=True)

    is_active: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=False,
        server_default=text("false"),
    )

    start_date: Mapped[Optional[date]] = mapped_column(Date, nullable=True)
    end_date: Mapped[Optional[date]] = mapped_column(Date, nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        server_default=text("CURRENT_TIMESTAMP"),
    )

    def __repr__(self) -> str:
        return f"<AcademicYear(year='{self.year}', active={self.is_active})>"
