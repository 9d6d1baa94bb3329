"""
Rodrise School Management Backend — Academic Year Service
==========================================================

What:  List and create academic years for /api/academic-years.
How:   Same shape as ClassService: presence check, duplicate check on the
       unique `year` label, insert. Failures surface as the single message
       "Internal server error".
"""

import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.exceptions import ConflictError, DatabaseError, RodriseError, ValidationError
from app.models.academic_year import AcademicYear
from app.schemas.academic_year import (
    AcademicYearCreate,
    AcademicYearCreatedResponse,
    AcademicYearListResponse,
    AcademicYearResponse,
)
from app.services.coercion import parse_iso_date

logger = logging.getLogger(__name__)

DATE_MESSAGE = "Dates must be ISO 8601 (YYYY-MM-DD)"
DUPLICATE_MESSAGE = "Academic year already exists"
FAILED_MESSAGE = "Internal server error"


class AcademicYearService:

    async def list_academic_years(
        self,
        db: AsyncSession,
        is_active: Optional[str] = None,
    ) -> AcademicYearListResponse:
        """
        Return academic years, newest label first.

        Only the literal "true" filters to active years; any other value
        (including "false") returns everything.
        """
        try:
            query = select(AcademicYear)
            if is_active == "true":
                query = query.where(AcademicYear.is_active.is_(True))
            result = await db.execute(query.order_by(AcademicYear.year.desc()))
            years = [AcademicYearResponse.model_validate(y) for y in result.scalars().all()]
            return AcademicYearListResponse(academic_years=years)
        except Exception as e:
            logger.error("Database error listing academic years: %s", str(e), exc_info=True)
            raise DatabaseError(message=FAILED_MESSAGE, context={"error_type": type(e).__name__})

    async def create_academic_year(
        self,
        db: AsyncSession,
        payload: AcademicYearCreate,
    ) -> AcademicYearCreatedResponse:
        """
        Raises:
            ValidationError: year missing or a date does not parse
            ConflictError: the year label already exists
            DatabaseError: any other persistence failure
        """
        if not payload.year:
            raise ValidationError(message="Year is required", field="year")

        start_date = parse_iso_date(payload.start_date, "startDate", DATE_MESSAGE)
        end_date = parse_iso_date(payload.end_date, "endDate", DATE_MESSAGE)

        try:
            result = await db.execute(
                select(AcademicYear).where(AcademicYear.year == payload.year)
            )
            if result.scalar_one_or_none() is not None:
                raise ConflictError(message=DUPLICATE_MESSAGE, context={"year": payload.year})

            record = AcademicYear(
                year=payload.year,
                is_active=bool(payload.is_active),
                start_date=start_date,
                end_date=end_date,
            )
            db.add(record)
            await db.flush()
            logger.info("Academic year created: %s", record.year)

            return AcademicYearCreatedResponse(
                academic_year=AcademicYearResponse.model_validate(record),
            )

        except RodriseError:
            raise
        except IntegrityError as e:
            raise ConflictError(message=DUPLICATE_MESSAGE, context={"year": payload.year}) from e
        except Exception as e:
            logger.error("Database error creating academic year: %s", str(e), exc_info=True)
            raise DatabaseError(message=FAILED_MESSAGE, context={"error_type": type(e).__name__})


academic_year_service = AcademicYearService()
