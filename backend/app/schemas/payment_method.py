"""
Rodrise School Management Backend — Payment Method Schemas
==========================================================
"""

import uuid
from datetime import datetime
from typing import Optional

from app.schemas.common import CamelModel


class PaymentMethodCreate(CamelModel):
    name: Optional[str] = None
    description: Optional[str] = None


class PaymentMethodResponse(CamelModel):
    id: uuid.UUID
    name: str
    description: Optional[str] = None
    is_active: bool
    created_at: datetime
