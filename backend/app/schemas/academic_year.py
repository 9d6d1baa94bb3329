"""
Rodrise School Management Backend — Academic Year Schemas
=========================================================
"""

import uuid
from datetime import date, datetime
from typing import List, Optional

from pydantic import Field

from app.schemas.common import CamelModel


class AcademicYearCreate(CamelModel):
    """Body of POST /api/academic-years. Dates are ISO strings, parsed by the service."""
    year: Optional[str] = Field(default=None, description="Label such as '2024-2025'")
    is_active: Optional[bool] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None


class AcademicYearResponse(CamelModel):
    id: uuid.UUID
    year: str
    is_active: bool
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    created_at: datetime


class AcademicYearListResponse(CamelModel):
    academic_years: List[AcademicYearResponse]


class AcademicYearCreatedResponse(CamelModel):
    message: str = "Academic year created successfully"
    academic_year: AcademicYearResponse
