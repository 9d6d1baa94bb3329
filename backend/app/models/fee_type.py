"""
Rodrise School Management Backend — Fee Type Model
===================================================

What:  ORM model for the `fee_types` table (Tuition, Library, Sports, ...).
Who:   FeeTypeService.

Column notes:
    - is_mandatory: every student is charged it
    - is_recurring + frequency: how often it is charged (once, per term,
      per year, per month)
"""

import enum
import uuid
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import Boolean, DateTime, Enum, Index, String, Text, Uuid, func, text
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


class FeeFrequency(str, enum.Enum):
    ONCE = "ONCE"
    TERM = "TERM"
    YEAR = "YEAR"
    MONTH = "MONTH"


class FeeType(Base):
    __tablename__ = "fee_types"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)

    name: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    is_mandatory: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    is_recurring: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    frequency: Mapped[FeeFrequency] = mapped_column(
        Enum(FeeFrequency, name="fee_frequency", native_enum=False, length=10),
        nullable=False,
        default=FeeFrequency.TERM,
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

    def __repr__(self) -> str:
        return f"<FeeType(name='{self.name}', frequency='{self.frequency.value}')>"


Index("uq_fee_types_name", func.lower(FeeType.name), unique=True)
