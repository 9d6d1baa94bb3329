"""
Rodrise School Management Backend — Fee Type Schemas
====================================================

What:  Request and response shapes for /api/fee-types.

Unlike the other create bodies, FeeTypeCreate is strict: FeeTypeService
validates the raw JSON against it and reports every failing field at once
as `{"error": "Validation error", "details": [...]}`.
"""

import uuid
from datetime import datetime
from typing import List, Optional

from pydantic import Field

from app.models.fee_type import FeeFrequency
from app.schemas.common import CamelModel


class FeeTypeCreate(CamelModel):
    name: str = Field(min_length=1, description="Fee type name is required")
    description: Optional[str] = None
    is_mandatory: bool = True
    is_recurring: bool = True
    frequency: FeeFrequency = FeeFrequency.TERM


class FeeTypeResponse(CamelModel):
    id: uuid.UUID
    name: str
    description: Optional[str] = None
    is_mandatory: bool
    is_recurring: bool
    frequency: FeeFrequency
    is_active: bool
    created_at: datetime


class FeeTypeListResponse(CamelModel):
    fee_types: List[FeeTypeResponse]


class FeeTypeCreatedResponse(CamelModel):
    message: str = "Fee type created successfully"
    fee_type: FeeTypeResponse
