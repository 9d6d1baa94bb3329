"""
Rodrise School Management Backend — Student Schemas
===================================================

What:  Request and response shapes for /api/students and /api/students/{id}.

Create and update bodies are loose (every field optional, ids and dates as
strings) so StudentService can answer with its own 400 messages, e.g.
{"error": "Missing required fields"}.

The class relation is exposed under the key "class", a Python keyword,
hence the explicit alias on `school_class`.
"""

import uuid
from datetime import date, datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import Field

from app.models.student import StudentStatus
from app.schemas.academic_year import AcademicYearResponse
from app.schemas.common import CamelModel, Pagination
from app.schemas.payment_method import PaymentMethodResponse
from app.schemas.school_class import ClassResponse


class StudentCreate(CamelModel):
    """Body of POST /api/students."""
    admission_number: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    middle_name: Optional[str] = None
    date_of_birth: Optional[str] = None
    gender: Optional[str] = None
    class_id: Optional[str] = None
    academic_year_id: Optional[str] = None
    parent_name: Optional[str] = None
    parent_phone: Optional[str] = None
    parent_email: Optional[str] = None
    address: Optional[str] = None
    status: Optional[str] = None


class StudentUpdate(StudentCreate):
    """Body of PUT /api/students/{id}; only the keys sent are changed."""
    graduation_date: Optional[str] = None


class StudentSummary(CamelModel):
    """A student as embedded in payment listings."""
    id: uuid.UUID
    admission_number: str
    first_name: str
    last_name: str
    school_class: Optional[ClassResponse] = Field(default=None, alias="class")


class StudentResponse(CamelModel):
    id: uuid.UUID
    admission_number: str
    first_name: str
    last_name: str
    middle_name: Optional[str] = None
    date_of_birth: Optional[date] = None
    gender: Optional[str] = None
    class_id: uuid.UUID
    academic_year_id: uuid.UUID
    parent_name: Optional[str] = None
    parent_phone: Optional[str] = None
    parent_email: Optional[str] = None
    address: Optional[str] = None
    status: StudentStatus
    graduation_date: Optional[date] = None
    created_at: datetime
    updated_at: datetime
    school_class: Optional[ClassResponse] = Field(default=None, alias="class")
    academic_year: Optional[AcademicYearResponse] = None


class StudentPaymentResponse(CamelModel):
    """One of the student's payments, newest first, on the detail view."""
    id: uuid.UUID
    receipt_number: str
    payment_date: date
    amount_paid: Decimal
    payment_method: Optional[PaymentMethodResponse] = None


class StudentDetailResponse(StudentResponse):
    fee_payments: List[StudentPaymentResponse] = []


class StudentListResponse(CamelModel):
    students: List[StudentResponse]
    pagination: Pagination


class StudentDeletedResponse(CamelModel):
    message: str = "Student deleted successfully"
