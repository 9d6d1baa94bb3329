"""
Rodrise School Management Backend — Class Schemas
==================================================

What:  Request and response shapes for /api/classes.

Why the create body is loose (Union[int, str], all optional):
    Forms post numbers as strings ("1", "30") and the handler must answer a
    missing field with its own 400 message, not FastAPI's generic 422.
    Coercion and presence checks happen in ClassService.
"""

import uuid
from datetime import datetime
from typing import Optional, Union

from pydantic import Field

from app.schemas.common import CamelModel


class ClassCreate(CamelModel):
    """Body of POST /api/classes."""
    name: Optional[str] = Field(default=None, description="Class name, e.g. 'Grade 1'")
    level: Optional[Union[int, str]] = Field(default=None, description="Grade level")
    capacity: Optional[Union[int, str]] = Field(
        default=None,
        description="Seats in the class (defaults to 40)",
    )


class ClassResponse(CamelModel):
    """A class record as returned by list and create."""
    id: uuid.UUID
    name: str
    level: int
    capacity: int
    is_active: bool
    created_at: datetime
    updated_at: datetime
