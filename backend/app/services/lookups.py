"""
Rodrise School Management Backend — Reference Lookups
=====================================================

What:  Existence checks for ids a request body points at (classId,
       academicYearId, feeTypeId, ...).
Why:   A dangling id would otherwise surface as a foreign-key IntegrityError
       at flush time, indistinguishable from a duplicate. Checking first
       gives the caller a 400 naming the bad field.
"""

import uuid
from typing import Any, Optional, Type, TypeVar, Union

from sqlalchemy.ext.asyncio import AsyncSession

from app.exceptions import ValidationError
from app.services.coercion import parse_uuid

ModelT = TypeVar("ModelT")


async def require_reference(
    db: AsyncSession,
    model: Type[ModelT],
    value: Optional[Union[str, uuid.UUID]],
    field: str,
) -> ModelT:
    """
    Load the `model` row whose primary key is `value`.

    Raises:
        ValidationError: value is not a UUID, or no such row ("Unknown <field>")
    """
    message = f"Unknown {field}"
    ref_id = parse_uuid(value, field, message)
    record: Any = await db.get(model, ref_id)
    if record is None:
        raise ValidationError(message=message, field=field, context={"value": str(ref_id)})
    return record
