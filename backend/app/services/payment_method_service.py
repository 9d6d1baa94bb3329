"""
Rodrise School Management Backend — Payment Method Service
===========================================================

What:  List active payment methods and create new ones (/api/payment-methods).
How:   Name uniqueness is case-insensitive, checked first and backed by the
       uq_payment_methods_name functional index.
"""

import logging
from typing import List

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.exceptions import ConflictError, DatabaseError, RodriseError, ValidationError
from app.models.payment_method import PaymentMethod
from app.schemas.payment_method import PaymentMethodCreate, PaymentMethodResponse

logger = logging.getLogger(__name__)

DUPLICATE_MESSAGE = "Payment method with this name already exists"


class PaymentMethodService:

    async def list_payment_methods(self, db: AsyncSession) -> List[PaymentMethodResponse]:
        """Active methods, alphabetical."""
        try:
            result = await db.execute(
                select(PaymentMethod)
                .where(PaymentMethod.is_active.is_(True))
                .order_by(PaymentMethod.name.asc())
            )
            return [PaymentMethodResponse.model_validate(m) for m in result.scalars().all()]
        except Exception as e:
            logger.error("Database error listing payment methods: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Failed to fetch payment methods",
                context={"error_type": type(e).__name__},
            )

    async def create_payment_method(
        self,
        db: AsyncSession,
        payload: PaymentMethodCreate,
    ) -> PaymentMethodResponse:
        if not payload.name:
            raise ValidationError(message="Payment method name is required", field="name")

        try:
            result = await db.execute(
                select(PaymentMethod)
                .where(func.lower(PaymentMethod.name) == func.lower(payload.name))
                .limit(1)
            )
            if result.scalar_one_or_none() is not None:
                raise ConflictError(message=DUPLICATE_MESSAGE, context={"name": payload.name})

            record = PaymentMethod(
                name=payload.name,
                description=payload.description,
                is_active=True,
            )
            db.add(record)
            await db.flush()
            logger.info("Payment method created: %s", record.name)

            return PaymentMethodResponse.model_validate(record)

        except RodriseError:
            raise
        except IntegrityError as e:
            raise ConflictError(message=DUPLICATE_MESSAGE, context={"name": payload.name}) from e
        except Exception as e:
            logger.error("Database error creating payment method: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Failed to create payment method",
                context={"error_type": type(e).__name__},
            )


payment_method_service = PaymentMethodService()
