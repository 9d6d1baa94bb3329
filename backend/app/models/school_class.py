"""
Rodrise School Management Backend — Class SQLAlchemy Model
===========================================================

What:  ORM model representing the `classes` table.
Who:   Used by ClassService for listing and creation; read by Alembic.

Table Design Rationale:
    - name + level: a class is identified by both ("Grade 1" at level 1).
      Names compare case-insensitively, so the unique index is on
      (lower(name), level) rather than the raw columns.
    - capacity: seats in the class, 40 unless given.
    - is_active: hides a class from listings without deleting it. The unique
      index covers inactive rows too, so a deactivated class still blocks a
      new one with the same name and level.
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import Boolean, DateTime, Index, Integer, String, Uuid, func, text
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base

DEFAULT_CAPACITY = 40


class SchoolClass(Base):
    """
    A class/section of the school.

    Lifecycle:
        1. Created through POST /api/classes (is_active forced to True)
        2. Listed by GET /api/classes while active, ordered by level
        3. Never deleted — deactivation hides it from listings

    Query Patterns:
        - Active listing: WHERE is_active ORDER BY level ASC
        - Duplicate check: WHERE lower(name) = :name AND level = :level
          → served by uq_classes_name_level
    """

    __tablename__ = "classes"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
    )

    name: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
        comment="Display name, unique per level (case-insensitive)",
    )

    level: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        comment="Grade level; listings sort ascending on it",
    )

    capacity: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=DEFAULT_CAPACITY,
        server_default=text(str(DEFAULT_CAPACITY)),
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

    def __repr__(self) -> str:
        return f"<SchoolClass(name='{self.name}', level={self.level}, active={self.is_active})>"


# Functional index: declared after the class so it can reference mapped attributes
Index(
    "uq_classes_name_level",
    func.lower(SchoolClass.name),
    SchoolClass.level,
    unique=True,
)
Index("idx_classes_level", SchoolClass.level)
