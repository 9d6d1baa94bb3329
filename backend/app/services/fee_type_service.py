"""
Rodrise School Management Backend — Fee Type Service
====================================================

What:  List and create fee types for /api/fee-types.
How:   The create body is validated against the FeeTypeCreate schema here
       (not by FastAPI) so that schema failures become a 400 listing every
       bad field instead of FastAPI's default 422.
"""

import logging
from typing import Any, Dict, List, Optional

from pydantic import ValidationError as SchemaValidationError
from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.exceptions import ConflictError, DatabaseError, RodriseError, ValidationError
from app.models.fee_type import FeeFrequency, FeeType
from app.schemas.fee_type import (
    FeeTypeCreate,
    FeeTypeCreatedResponse,
    FeeTypeListResponse,
    FeeTypeResponse,
)

logger = logging.getLogger(__name__)

DUPLICATE_MESSAGE = "Fee type name already exists"
FAILED_MESSAGE = "Internal server error"


def schema_details(exc: SchemaValidationError) -> List[Dict[str, Any]]:
    """Flatten Pydantic errors to JSON-safe {field, message} pairs."""
    return [
        {
            "field": ".".join(str(part) for part in error["loc"]),
            "message": error["msg"],
        }
        for error in exc.errors()
    ]


class FeeTypeService:

    async def list_fee_types(
        self,
        db: AsyncSession,
        is_active: Optional[str] = None,
        frequency: Optional[str] = None,
    ) -> FeeTypeListResponse:
        """
        Fee types ordered by name.

        Filters:
            is_active: when given, "true" keeps active rows, anything else
                       keeps inactive rows
            frequency: one of ONCE, TERM, YEAR, MONTH

        Raises:
            ValidationError: unknown frequency
            DatabaseError: query failed
        """
        query = select(FeeType)
        if is_active is not None:
            query = query.where(FeeType.is_active.is_(is_active == "true"))
        if frequency:
            try:
                query = query.where(FeeType.frequency == FeeFrequency(frequency))
            except ValueError:
                raise ValidationError(
                    message=f"Invalid frequency '{frequency}'",
                    field="frequency",
                )

        try:
            result = await db.execute(query.order_by(FeeType.name.asc()))
            fee_types = [FeeTypeResponse.model_validate(f) for f in result.scalars().all()]
            return FeeTypeListResponse(fee_types=fee_types)
        except Exception as e:
            logger.error("Database error listing fee types: %s", str(e), exc_info=True)
            raise DatabaseError(message=FAILED_MESSAGE, context={"error_type": type(e).__name__})

    async def create_fee_type(
        self,
        db: AsyncSession,
        body: Dict[str, Any],
    ) -> FeeTypeCreatedResponse:
        """
        Raises:
            ValidationError: body does not match FeeTypeCreate ("Validation error")
            ConflictError: a fee type with the same name (any case) exists
            DatabaseError: any other persistence failure
        """
        try:
            payload = FeeTypeCreate.model_validate(body)
        except SchemaValidationError as e:
            raise ValidationError(message="Validation error", details=schema_details(e))

        try:
            result = await db.execute(
                select(FeeType)
                .where(func.lower(FeeType.name) == func.lower(payload.name))
                .limit(1)
            )
            if result.scalar_one_or_none() is not None:
                raise ConflictError(message=DUPLICATE_MESSAGE, context={"name": payload.name})

            record = FeeType(
                name=payload.name,
                description=payload.description,
                is_mandatory=payload.is_mandatory,
                is_recurring=payload.is_recurring,
                frequency=payload.frequency,
                is_active=True,
            )
            db.add(record)
            await db.flush()
            logger.info("Fee type created: %s (%s)", record.name, record.frequency.value)

            return FeeTypeCreatedResponse(fee_type=FeeTypeResponse.model_validate(record))

        except RodriseError:
            raise
        except IntegrityError as e:
            raise ConflictError(message=DUPLICATE_MESSAGE, context={"name": payload.name}) from e
        except Exception as e:
            logger.error("Database error creating fee type: %s", str(e), exc_info=True)
            raise DatabaseError(message=FAILED_MESSAGE, context={"error_type": type(e).__name__})


fee_type_service = FeeTypeService()
