"""Payment service for business logic."""

from typing import Annotated, Any

import structlog
from fastapi import Depends

from propertyops.core.constants import PAYMENT_METHODS
from propertyops.core.validation import FieldErrors, is_record_id
from propertyops.modules._parents import check_tenant_and_unit
from propertyops.modules.payments.models import Payment
from propertyops.modules.payments.repos import PaymentRepo
from propertyops.modules.payments.schemas import PaymentCreate
from propertyops.modules.tenants.repos import TenantRepo
from propertyops.modules.units.repos import UnitRepo


logger = structlog.get_logger()


class PaymentService:
    """Service for recording and listing payments."""

    def __init__(self, repo: PaymentRepo, tenants: TenantRepo, units: UnitRepo) -> None:
        self.repo = repo
        self.tenants = tenants
        self.units = units

    async def validate(self, values: dict[str, Any]) -> None:
        """Check payment rules.

        Raises:
            ValidationError: If any rule fails
        """
        errors = FieldErrors()
        await check_tenant_and_unit(errors, values, self.tenants, self.units)
        errors.numericality(values, "amount_cents", greater_than=0)
        errors.presence(values, "paid_on")
        errors.inclusion(values, "method", PAYMENT_METHODS)
        errors.raise_if_any()

    async def list_payments(
        self,
        tenant_id: int | None = None,
        unit_id: int | None = None,
    ) -> list[Payment]:
        """List payments by paid date, filtered by tenant and/or unit."""
        # An id no record can have matches nothing
        for record_id in (tenant_id, unit_id):
            if record_id is not None and not is_record_id(record_id):
                return []
        return await self.repo.list_all(tenant_id=tenant_id, unit_id=unit_id)

    async def record_payment(self, data: PaymentCreate) -> Payment:
        """Record a payment.

        Raises:
            ValidationError: If the data breaks a payment rule
        """
        values = data.model_dump()
        await self.validate(values)

        payment = await self.repo.create(Payment(**values))
        logger.info(
            "payment_recorded",
            payment_id=payment.id,
            amount_cents=payment.amount_cents,
            method=payment.method,
        )
        return payment


# Type alias for dependency injection
PaymentSvc = Annotated[PaymentService, Depends(PaymentService)]
