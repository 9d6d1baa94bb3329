"""
Rodrise School Management Backend — Class Service
==================================================

What:  Business logic behind GET and POST /api/classes.
Why:   Keeps validation and duplicate detection out of the route handlers.
How:   Validates the body, checks for an existing (name, level) pair, inserts.
Who:   Called by app/routes/classes.py.

Create Flow (POST /api/classes):
    ┌──────────┐    ┌─────────────┐    ┌──────────────┐    ┌──────────┐
    │ Validate │───▶│  Coerce     │───▶│  Duplicate   │───▶│  Insert  │
    │ presence │    │  numbers    │    │  pre-check   │    │  + flush │
    └──────────┘    └─────────────┘    └──────────────┘    └──────────┘
        400              400                 400            400 / 500

Duplicate detection:
    The pre-check answers the common case with a clean 400, but two concurrent
    requests can both pass it. The unique index uq_classes_name_level then
    rejects the second insert at flush time; that IntegrityError is reported
    as the same ConflictError, so callers never see a 500 for a duplicate.
"""

import logging
from typing import List

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.exceptions import ConflictError, DatabaseError, RodriseError, ValidationError
from app.models.school_class import DEFAULT_CAPACITY, SchoolClass
from app.schemas.school_class import ClassCreate, ClassResponse
from app.services.coercion import parse_positive_int

logger = logging.getLogger(__name__)

REQUIRED_MESSAGE = "Name and level are required"
NUMBER_MESSAGE = "Level and capacity must be positive whole numbers"
DUPLICATE_MESSAGE = "Class with this name and level already exists"
LIST_FAILED_MESSAGE = "Failed to fetch classes"
CREATE_FAILED_MESSAGE = "Failed to create class"


class ClassService:
    """
    Business logic layer for class records.

    Error Handling Strategy:
        ValidationError and ConflictError propagate unchanged. Any other
        exception is logged with its type and wrapped in DatabaseError carrying
        the fixed per-operation message.
    """

    async def list_classes(self, db: AsyncSession) -> List[ClassResponse]:
        """
        Return all active classes ordered by level (ascending).

        Query plan:
            SELECT * FROM classes WHERE is_active ORDER BY level ASC
            → idx_classes_level

        Raises:
            DatabaseError: query failed (→ 500 "Failed to fetch classes")
        """
        try:
            result = await db.execute(
                select(SchoolClass)
                .where(SchoolClass.is_active.is_(True))
                .order_by(SchoolClass.level.asc())
            )
            return [ClassResponse.model_validate(c) for c in result.scalars().all()]
        except Exception as e:
            logger.error("Database error listing classes: %s", str(e), exc_info=True)
            raise DatabaseError(
                message=LIST_FAILED_MESSAGE,
                context={"error_type": type(e).__name__},
            )

    async def create_class(self, db: AsyncSession, payload: ClassCreate) -> ClassResponse:
        """
        Validate and insert a new class.

        Args:
            db: Async database session (committed by get_db_session)
            payload: Raw body; level/capacity may be ints or integer strings

        Returns:
            ClassResponse for the inserted row (is_active always True)

        Raises:
            ValidationError: name/level missing, or a number is not a positive integer
            ConflictError: a class with the same name (any case) and level exists
            DatabaseError: any other persistence failure
        """
        # ── Step 1: Presence ──────────────────────────────────────────────
        # Runs before any database access
        if not payload.name or not payload.level:
            raise ValidationError(
                message=REQUIRED_MESSAGE,
                field="name" if not payload.name else "level",
            )

        # ── Step 2: Coerce numbers ────────────────────────────────────────
        # Only an absent or empty capacity takes the default; 0 and "0" are
        # both given values and fail the positive check
        level = parse_positive_int(payload.level, "level", NUMBER_MESSAGE)
        capacity = DEFAULT_CAPACITY
        if payload.capacity not in (None, ""):
            capacity = parse_positive_int(payload.capacity, "capacity", NUMBER_MESSAGE)

        try:
            # ── Step 3: Duplicate pre-check ───────────────────────────────
            # Inactive classes count too
            result = await db.execute(
                select(SchoolClass)
                .where(
                    func.lower(SchoolClass.name) == func.lower(payload.name),
                    SchoolClass.level == level,
                )
                .limit(1)
            )
            if result.scalar_one_or_none() is not None:
                raise ConflictError(
                    message=DUPLICATE_MESSAGE,
                    context={"name": payload.name, "level": level},
                )

            # ── Step 4: Insert ────────────────────────────────────────────
            record = SchoolClass(
                name=payload.name,
                level=level,
                capacity=capacity,
                is_active=True,
            )
            db.add(record)
            await db.flush()
            logger.info("Class created: %s (level %d, capacity %d)", record.name, level, capacity)

            return ClassResponse.model_validate(record)

        except RodriseError:
            raise
        except IntegrityError as e:
            # Lost the race against a concurrent create of the same pair
            logger.warning("Unique index rejected class %r level %d", payload.name, level)
            raise ConflictError(
                message=DUPLICATE_MESSAGE,
                context={"name": payload.name, "level": level, "constraint": str(e.orig)},
            ) from e
        except Exception as e:
            logger.error("Database error creating class: %s", str(e), exc_info=True)
            raise DatabaseError(
                message=CREATE_FAILED_MESSAGE,
                context={"error_type": type(e).__name__},
            )


# ── Singleton Instance ────────────────────────────────────────────────────
# ClassService is stateless; one instance serves all requests
class_service = ClassService()
