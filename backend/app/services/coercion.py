"""
Rodrise School Management Backend — Input Coercion Helpers
==========================================================

What:  Turns loosely-typed form values ("30", 30, "2024-09-01") into Python
       values, raising ValidationError with a caller-safe message otherwise.
Why:   Browser forms post numbers as strings. Values that are not clean whole
       numbers are rejected rather than silently stored as garbage.
"""

import re
import uuid
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Optional, Tuple, Union

from app.exceptions import ValidationError

_INT_PATTERN = re.compile(r"^[+-]?\d+$")


def parse_positive_int(value: Union[int, str], field: str, message: str) -> int:
    """
    Parse an int or an integer string and require it to be >= 1.

    Raises:
        ValidationError: value is a bool, a non-integer string, or < 1
    """
    if isinstance(value, bool):
        raise ValidationError(message=message, field=field)
    if isinstance(value, int):
        number = value
    else:
        text = str(value).strip()
        if not _INT_PATTERN.match(text):
            raise ValidationError(message=message, field=field, context={"value": text})
        number = int(text)
    if number < 1:
        raise ValidationError(message=message, field=field, context={"value": number})
    return number


def parse_iso_date(value: Optional[str], field: str, message: str) -> Optional[date]:
    """
    Parse "YYYY-MM-DD" (or a full ISO datetime, keeping the date part).

    Empty values mean "not given" and return None.
    """
    if not value:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(value).date()
    except ValueError:
        raise ValidationError(message=message, field=field, context={"value": value})


def parse_uuid(value: Optional[Union[str, uuid.UUID]], field: str, message: str) -> uuid.UUID:
    """Parse a record id sent as a string."""
    if isinstance(value, uuid.UUID):
        return value
    try:
        return uuid.UUID(str(value))
    except (TypeError, ValueError):
        raise ValidationError(message=message, field=field, context={"value": value})


def parse_amount(value: Union[int, float, str, Decimal], field: str, message: str) -> Decimal:
    """
    Parse a money amount (number or numeric string) to a Decimal >= 0,
    rounded to cents.
    """
    if isinstance(value, bool):
        raise ValidationError(message=message, field=field)
    try:
        amount = Decimal(str(value).strip())
    except InvalidOperation:
        raise ValidationError(message=message, field=field, context={"value": value})
    if not amount.is_finite() or amount < 0:
        raise ValidationError(message=message, field=field, context={"value": value})
    return amount.quantize(Decimal("0.01"))


DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100
PAGE_MESSAGE = "Page and limit must be positive whole numbers"


def parse_pagination(page: Optional[str], limit: Optional[str]) -> Tuple[int, int]:
    """
    Resolve ?page= and ?limit= (1 and 10 when absent). The limit is capped
    at MAX_PAGE_SIZE.
    """
    page_number = parse_positive_int(page, "page", PAGE_MESSAGE) if page else 1
    page_size = parse_positive_int(limit, "limit", PAGE_MESSAGE) if limit else DEFAULT_PAGE_SIZE
    return page_number, min(page_size, MAX_PAGE_SIZE)
