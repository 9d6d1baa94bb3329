"""
Rodrise School Management Backend — Fee Structure Service
=========================================================

What:  List, create and update fee structures for /api/fee-structures.
How:   Bodies are validated against FeeStructureCreate / FeeStructureUpdate
       here (as FeeTypeService does) so schema failures answer 400 with
       per-field details. Every failure past validation is the single
       message "Internal server error".

Ordering of listings:
    academic year label DESC → class level ASC → fee type name ASC
"""

import logging
import uuid
from typing import Any, Dict, Optional, Type, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as SchemaValidationError
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import contains_eager, selectinload

from app.exceptions import (
    ConflictError,
    DatabaseError,
    NotFoundError,
    RodriseError,
    ValidationError,
)
from app.models import AcademicYear, FeeStructure, FeeType, SchoolClass
from app.schemas.fee_structure import (
    FeeStructureCreate,
    FeeStructureListResponse,
    FeeStructureResponse,
    FeeStructureSavedResponse,
    FeeStructureUpdate,
)
from app.services.coercion import parse_uuid
from app.services.fee_type_service import schema_details
from app.services.lookups import require_reference

logger = logging.getLogger(__name__)

DUPLICATE_MESSAGE = (
    "Fee structure already exists for this class, academic year, and fee type combination"
)
FAILED_MESSAGE = "Internal server error"

SchemaT = TypeVar("SchemaT", bound=BaseModel)


def _validate(schema: Type[SchemaT], body: Dict[str, Any]) -> SchemaT:
    try:
        return schema.model_validate(body)
    except SchemaValidationError as e:
        raise ValidationError(message="Validation error", details=schema_details(e))


class FeeStructureService:

    async def _load(self, db: AsyncSession, structure_id: uuid.UUID) -> FeeStructure:
        result = await db.execute(
            select(FeeStructure)
            .where(FeeStructure.id == structure_id)
            .options(
                selectinload(FeeStructure.academic_year),
                selectinload(FeeStructure.school_class),
                selectinload(FeeStructure.fee_type),
            )
            .execution_options(populate_existing=True)
        )
        return result.scalar_one()

    async def _find_by_triple(
        self,
        db: AsyncSession,
        academic_year_id: uuid.UUID,
        class_id: uuid.UUID,
        fee_type_id: uuid.UUID,
    ) -> Optional[FeeStructure]:
        result = await db.execute(
            select(FeeStructure).where(
                FeeStructure.academic_year_id == academic_year_id,
                FeeStructure.class_id == class_id,
                FeeStructure.fee_type_id == fee_type_id,
            )
        )
        return result.scalar_one_or_none()

    async def list_fee_structures(
        self,
        db: AsyncSession,
        academic_year_id: Optional[str] = None,
        class_id: Optional[str] = None,
        fee_type_id: Optional[str] = None,
        is_active: Optional[str] = None,
    ) -> FeeStructureListResponse:
        """
        Filters (all optional): academicYearId, classId, feeTypeId, and
        isActive where "true" keeps active rows and any other value keeps
        inactive rows.

        Raises:
            ValidationError: a filter id is not a UUID
            DatabaseError: query failed
        """
        conditions = []
        if academic_year_id:
            conditions.append(
                FeeStructure.academic_year_id
                == parse_uuid(academic_year_id, "academicYearId", "Unknown academicYearId")
            )
        if class_id:
            conditions.append(
                FeeStructure.class_id == parse_uuid(class_id, "classId", "Unknown classId")
            )
        if fee_type_id:
            conditions.append(
                FeeStructure.fee_type_id
                == parse_uuid(fee_type_id, "feeTypeId", "Unknown feeTypeId")
            )
        if is_active is not None:
            conditions.append(FeeStructure.is_active.is_(is_active == "true"))

        try:
            result = await db.execute(
                select(FeeStructure)
                .join(FeeStructure.academic_year)
                .join(FeeStructure.school_class)
                .join(FeeStructure.fee_type)
                .where(*conditions)
                .options(
                    contains_eager(FeeStructure.academic_year),
                    contains_eager(FeeStructure.school_class),
                    contains_eager(FeeStructure.fee_type),
                )
                .order_by(AcademicYear.year.desc(), SchoolClass.level.asc(), FeeType.name.asc())
            )
            structures = [
                FeeStructureResponse.model_validate(s) for s in result.scalars().all()
            ]
            return FeeStructureListResponse(fee_structures=structures)
        except Exception as e:
            logger.error("Database error listing fee structures: %s", str(e), exc_info=True)
            raise DatabaseError(message=FAILED_MESSAGE, context={"error_type": type(e).__name__})

    async def create_fee_structure(
        self,
        db: AsyncSession,
        body: Dict[str, Any],
    ) -> FeeStructureSavedResponse:
        """
        Raises:
            ValidationError: schema failure, or an id that matches no row
            ConflictError: a structure already exists for the triple
            DatabaseError: any other persistence failure
        """
        payload = _validate(FeeStructureCreate, body)

        try:
            await require_reference(db, AcademicYear, payload.academic_year_id, "academicYearId")
            await require_reference(db, SchoolClass, payload.class_id, "classId")
            await require_reference(db, FeeType, payload.fee_type_id, "feeTypeId")

            existing = await self._find_by_triple(
                db, payload.academic_year_id, payload.class_id, payload.fee_type_id
            )
            if existing is not None:
                raise ConflictError(message=DUPLICATE_MESSAGE, context={"id": str(existing.id)})

            record = FeeStructure(**payload.model_dump())
            db.add(record)
            await db.flush()
            logger.info("Fee structure created: %s", record)

            return FeeStructureSavedResponse(
                message="Fee structure created successfully",
                fee_structure=FeeStructureResponse.model_validate(await self._load(db, record.id)),
            )

        except RodriseError:
            raise
        except IntegrityError as e:
            raise ConflictError(message=DUPLICATE_MESSAGE) from e
        except Exception as e:
            logger.error("Database error creating fee structure: %s", str(e), exc_info=True)
            raise DatabaseError(message=FAILED_MESSAGE, context={"error_type": type(e).__name__})

    async def update_fee_structure(
        self,
        db: AsyncSession,
        body: Dict[str, Any],
    ) -> FeeStructureSavedResponse:
        """
        Locate the structure by its triple and change the amounts and
        isActive flag that were sent.

        Raises:
            ValidationError: schema failure
            NotFoundError: no structure for the triple (→ 404 "Fee structure not found")
            DatabaseError: any other persistence failure
        """
        payload = _validate(FeeStructureUpdate, body)
        changes = payload.model_dump(
            include={"amount", "term1_amount", "term2_amount", "term3_amount", "is_active"},
            exclude_none=True,
        )

        try:
            record = await self._find_by_triple(
                db, payload.academic_year_id, payload.class_id, payload.fee_type_id
            )
            if record is None:
                raise NotFoundError(resource="Fee structure")

            for name, value in changes.items():
                setattr(record, name, value)
            await db.flush()
            logger.info("Fee structure updated: %s (%s)", record.id, sorted(changes))

            return FeeStructureSavedResponse(
                message="Fee structure updated successfully",
                fee_structure=FeeStructureResponse.model_validate(await self._load(db, record.id)),
            )

        except RodriseError:
            raise
        except Exception as e:
            logger.error("Database error updating fee structure: %s", str(e), exc_info=True)
            raise DatabaseError(message=FAILED_MESSAGE, context={"error_type": type(e).__name__})


fee_structure_service = FeeStructureService()
