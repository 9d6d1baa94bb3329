"""
Rodrise School Management Backend — Student Service
====================================================

What:  Business logic behind /api/students and /api/students/{id}.
How:   Same layering as ClassService: validate, check uniqueness and
       references, write, flush. The session is committed by get_db_session.
Who:   Called by app/routes/students.py.

Operations:
    list    search + status filter + pagination, newest first
    create  required fields → admission number unique → class and
            academic year exist → insert
    get     by id, with the student's payments (newest first)
    update  only the keys present in the body; admission number stays unique
    delete  refused while the student has payments

Ids in the path that are not UUIDs are reported as "Student not found",
the same as a well-formed id with no row behind it.
"""

import logging
import math
import uuid
from typing import Any, Dict, Optional

from sqlalchemy import func, or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.exceptions import (
    ConflictError,
    DatabaseError,
    NotFoundError,
    RodriseError,
    ValidationError,
)
from app.models import AcademicYear, FeePayment, SchoolClass, Student, StudentStatus
from app.schemas.common import Pagination
from app.schemas.student import (
    StudentCreate,
    StudentDeletedResponse,
    StudentDetailResponse,
    StudentListResponse,
    StudentResponse,
    StudentUpdate,
)
from app.services.coercion import parse_iso_date, parse_pagination
from app.services.lookups import require_reference

logger = logging.getLogger(__name__)

REQUIRED_MESSAGE = "Missing required fields"
DUPLICATE_MESSAGE = "Admission number already exists"
HAS_PAYMENTS_MESSAGE = "Cannot delete student with existing payments or balances"
DATE_MESSAGE = "Dates must be ISO 8601 (YYYY-MM-DD)"

# Fields that may be sent but never blanked
_REQUIRED_FIELDS = ("admission_number", "first_name", "last_name", "class_id", "academic_year_id")
_TEXT_FIELDS = (
    "admission_number",
    "first_name",
    "last_name",
    "middle_name",
    "gender",
    "parent_name",
    "parent_phone",
    "parent_email",
    "address",
)

# Relations every StudentResponse reads
_STUDENT_RELATIONS = (
    selectinload(Student.school_class),
    selectinload(Student.academic_year),
)


def _parse_status(value: str) -> StudentStatus:
    try:
        return StudentStatus(value.upper())
    except ValueError:
        raise ValidationError(message=f"Invalid status '{value}'", field="status")


def _parse_student_id(student_id: str) -> uuid.UUID:
    try:
        return uuid.UUID(student_id)
    except ValueError:
        raise NotFoundError(resource="Student", resource_id=student_id)


class StudentService:
    """
    Error Handling Strategy:
        ValidationError, ConflictError and NotFoundError propagate unchanged.
        IntegrityError at flush means the admission number was taken between
        the check and the write. Anything else becomes DatabaseError with the
        operation's fixed message.
    """

    async def _load(self, db: AsyncSession, student_id: uuid.UUID, *options) -> Optional[Student]:
        # populate_existing: refresh relations on rows already in the session
        result = await db.execute(
            select(Student)
            .where(Student.id == student_id)
            .options(*_STUDENT_RELATIONS, *options)
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def _admission_number_taken(self, db: AsyncSession, admission_number: str) -> bool:
        result = await db.execute(
            select(Student.id).where(Student.admission_number == admission_number).limit(1)
        )
        return result.scalar_one_or_none() is not None

    # ── List ──────────────────────────────────────────────────────────────

    async def list_students(
        self,
        db: AsyncSession,
        search: Optional[str] = None,
        status: Optional[str] = None,
        page: Optional[str] = None,
        limit: Optional[str] = None,
    ) -> StudentListResponse:
        """
        Filters:
            search: case-insensitive substring of first name, last name,
                    admission number or parent name
            status: ACTIVE, GRADUATED, TRANSFERRED or SUSPENDED (any case);
                    "all" or absent means no filter

        Raises:
            ValidationError: unknown status, bad page/limit
            DatabaseError: query failed (→ 500 "Failed to fetch students")
        """
        page_number, page_size = parse_pagination(page, limit)

        conditions = []
        if search:
            pattern = f"%{search}%"
            conditions.append(
                or_(
                    Student.first_name.ilike(pattern),
                    Student.last_name.ilike(pattern),
                    Student.admission_number.ilike(pattern),
                    Student.parent_name.ilike(pattern),
                )
            )
        if status and status.lower() != "all":
            conditions.append(Student.status == _parse_status(status))

        try:
            result = await db.execute(
                select(Student)
                .where(*conditions)
                .options(*_STUDENT_RELATIONS)
                .order_by(Student.created_at.desc())
                .offset((page_number - 1) * page_size)
                .limit(page_size)
            )
            students = [StudentResponse.model_validate(s) for s in result.scalars().all()]

            total = await db.scalar(select(func.count()).select_from(Student).where(*conditions))
            total = total or 0

            return StudentListResponse(
                students=students,
                pagination=Pagination(
                    page=page_number,
                    limit=page_size,
                    total=total,
                    pages=math.ceil(total / page_size),
                ),
            )
        except Exception as e:
            logger.error("Database error listing students: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Failed to fetch students",
                context={"error_type": type(e).__name__},
            )

    # ── Create ────────────────────────────────────────────────────────────

    async def create_student(self, db: AsyncSession, payload: StudentCreate) -> StudentResponse:
        """
        Raises:
            ValidationError: a required field is missing, a date or status is
                             malformed, or classId/academicYearId is unknown
            ConflictError: the admission number is taken
            DatabaseError: any other persistence failure
        """
        if any(not getattr(payload, name) for name in _REQUIRED_FIELDS):
            missing = [name for name in _REQUIRED_FIELDS if not getattr(payload, name)]
            raise ValidationError(message=REQUIRED_MESSAGE, context={"missing": missing})

        date_of_birth = parse_iso_date(payload.date_of_birth, "dateOfBirth", DATE_MESSAGE)
        status = _parse_status(payload.status) if payload.status else StudentStatus.ACTIVE

        try:
            if await self._admission_number_taken(db, payload.admission_number):
                raise ConflictError(
                    message=DUPLICATE_MESSAGE,
                    context={"admission_number": payload.admission_number},
                )

            school_class = await require_reference(db, SchoolClass, payload.class_id, "classId")
            academic_year = await require_reference(
                db, AcademicYear, payload.academic_year_id, "academicYearId"
            )

            record = Student(
                admission_number=payload.admission_number,
                first_name=payload.first_name,
                last_name=payload.last_name,
                middle_name=payload.middle_name,
                date_of_birth=date_of_birth,
                gender=payload.gender,
                class_id=school_class.id,
                academic_year_id=academic_year.id,
                parent_name=payload.parent_name,
                parent_phone=payload.parent_phone,
                parent_email=payload.parent_email,
                address=payload.address,
                status=status,
            )
            db.add(record)
            await db.flush()
            logger.info("Student created: %s", record.admission_number)

            return StudentResponse.model_validate(await self._load(db, record.id))

        except RodriseError:
            raise
        except IntegrityError as e:
            raise ConflictError(
                message=DUPLICATE_MESSAGE,
                context={"admission_number": payload.admission_number},
            ) from e
        except Exception as e:
            logger.error("Database error creating student: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Failed to create student",
                context={"error_type": type(e).__name__},
            )

    # ── Get ───────────────────────────────────────────────────────────────

    async def get_student(self, db: AsyncSession, student_id: str) -> StudentDetailResponse:
        """
        Raises:
            NotFoundError: no such student (→ 404 "Student not found")
            DatabaseError: query failed (→ 500 "Failed to fetch student")
        """
        parsed_id = _parse_student_id(student_id)
        try:
            student = await self._load(
                db,
                parsed_id,
                selectinload(Student.fee_payments).selectinload(FeePayment.payment_method),
            )
        except Exception as e:
            logger.error("Database error fetching student: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Failed to fetch student",
                context={"error_type": type(e).__name__},
            )

        if student is None:
            raise NotFoundError(resource="Student", resource_id=student_id)
        return StudentDetailResponse.model_validate(student)

    # ── Update ────────────────────────────────────────────────────────────

    async def update_student(
        self,
        db: AsyncSession,
        student_id: str,
        payload: StudentUpdate,
    ) -> StudentResponse:
        """
        Apply the keys present in the body. A key sent as null clears an
        optional field; required fields cannot be cleared.

        Raises:
            NotFoundError: no such student
            ValidationError: a required field sent empty, bad date/status/reference
            ConflictError: the new admission number belongs to another student
            DatabaseError: any other persistence failure (→ "Failed to update student")
        """
        parsed_id = _parse_student_id(student_id)
        sent = payload.model_fields_set

        blanked = [name for name in _REQUIRED_FIELDS if name in sent and not getattr(payload, name)]
        if blanked:
            raise ValidationError(message=REQUIRED_MESSAGE, context={"blank": blanked})

        changes: Dict[str, Any] = {
            name: getattr(payload, name) for name in _TEXT_FIELDS if name in sent
        }
        if "date_of_birth" in sent:
            changes["date_of_birth"] = parse_iso_date(
                payload.date_of_birth, "dateOfBirth", DATE_MESSAGE
            )
        if "graduation_date" in sent:
            changes["graduation_date"] = parse_iso_date(
                payload.graduation_date, "graduationDate", DATE_MESSAGE
            )
        if "status" in sent and payload.status:
            changes["status"] = _parse_status(payload.status)

        try:
            student = await db.get(Student, parsed_id)
            if student is None:
                raise NotFoundError(resource="Student", resource_id=student_id)

            new_number = changes.get("admission_number")
            if new_number and new_number != student.admission_number:
                if await self._admission_number_taken(db, new_number):
                    raise ConflictError(
                        message=DUPLICATE_MESSAGE,
                        context={"admission_number": new_number},
                    )

            if "class_id" in sent:
                school_class = await require_reference(db, SchoolClass, payload.class_id, "classId")
                changes["class_id"] = school_class.id
            if "academic_year_id" in sent:
                academic_year = await require_reference(
                    db, AcademicYear, payload.academic_year_id, "academicYearId"
                )
                changes["academic_year_id"] = academic_year.id

            for name, value in changes.items():
                setattr(student, name, value)
            await db.flush()
            logger.info("Student updated: %s (%s)", student.admission_number, sorted(changes))

            return StudentResponse.model_validate(await self._load(db, parsed_id))

        except RodriseError:
            raise
        except IntegrityError as e:
            raise ConflictError(message=DUPLICATE_MESSAGE, context={"student_id": student_id}) from e
        except Exception as e:
            logger.error("Database error updating student: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Failed to update student",
                context={"error_type": type(e).__name__},
            )

    # ── Delete ────────────────────────────────────────────────────────────

    async def delete_student(self, db: AsyncSession, student_id: str) -> StudentDeletedResponse:
        """
        Raises:
            NotFoundError: no such student
            ValidationError: the student has payments (→ 400)
            DatabaseError: any other persistence failure (→ "Failed to delete student")
        """
        parsed_id = _parse_student_id(student_id)
        try:
            student = await db.get(Student, parsed_id)
            if student is None:
                raise NotFoundError(resource="Student", resource_id=student_id)

            result = await db.execute(
                select(FeePayment.id).where(FeePayment.student_id == parsed_id).limit(1)
            )
            if result.scalar_one_or_none() is not None:
                raise ValidationError(
                    message=HAS_PAYMENTS_MESSAGE,
                    context={"student_id": student_id},
                )

            await db.delete(student)
            await db.flush()
            logger.info("Student deleted: %s", student.admission_number)
            return StudentDeletedResponse()

        except RodriseError:
            raise
        except Exception as e:
            logger.error("Database error deleting student: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Failed to delete student",
                context={"error_type": type(e).__name__},
            )


student_service = StudentService()
