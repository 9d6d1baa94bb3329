"""
Rodrise School Management Backend — Fee Structure Schemas
=========================================================

What:  Request and response shapes for /api/fee-structures.

Both bodies are strict, like FeeTypeCreate: FeeStructureService validates
the raw JSON and reports every failing field as
`{"error": "Validation error", "details": [...]}`.

FeeStructureUpdate locates the row by its (academicYearId, classId,
feeTypeId) triple, so those three stay required; the amounts and isActive
are changed only when sent.
"""

import uuid
from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import Field

from app.schemas.academic_year import AcademicYearResponse
from app.schemas.common import CamelModel
from app.schemas.fee_type import FeeTypeResponse
from app.schemas.school_class import ClassResponse


def _money(default=...):
    return Field(default=default, ge=0, max_digits=12, decimal_places=2)


class FeeStructureCreate(CamelModel):
    academic_year_id: uuid.UUID
    class_id: uuid.UUID
    fee_type_id: uuid.UUID
    amount: Decimal = _money()
    term1_amount: Decimal = _money(Decimal("0"))
    term2_amount: Decimal = _money(Decimal("0"))
    term3_amount: Decimal = _money(Decimal("0"))
    is_active: bool = True


class FeeStructureUpdate(CamelModel):
    academic_year_id: uuid.UUID
    class_id: uuid.UUID
    fee_type_id: uuid.UUID
    amount: Optional[Decimal] = _money(None)
    term1_amount: Optional[Decimal] = _money(None)
    term2_amount: Optional[Decimal] = _money(None)
    term3_amount: Optional[Decimal] = _money(None)
    is_active: Optional[bool] = None


class FeeStructureResponse(CamelModel):
    id: uuid.UUID
    academic_year_id: uuid.UUID
    class_id: uuid.UUID
    fee_type_id: uuid.UUID
    amount: Decimal
    term1_amount: Decimal
    term2_amount: Decimal
    term3_amount: Decimal
    is_active: bool
    created_at: datetime
    updated_at: datetime
    academic_year: Optional[AcademicYearResponse] = None
    school_class: Optional[ClassResponse] = Field(default=None, alias="class")
    fee_type: Optional[FeeTypeResponse] = None


class FeeStructureListResponse(CamelModel):
    fee_structures: List[FeeStructureResponse]


class FeeStructureSavedResponse(CamelModel):
    message: str
    fee_structure: FeeStructureResponse
