"""Payment repository for database operations."""

from typing import Annotated

from fastapi import Depends
from sqlalchemy import Select, select
from sqlalchemy.orm import selectinload

from propertyops.api.dependencies import DBSession
from propertyops.modules.payments.models import Payment


def _select_with_parents() -> Select[tuple[Payment]]:
    """Select payments with tenant and unit loaded up front."""
    return select(Payment).options(
        selectinload(Payment.tenant),
        selectinload(Payment.unit),
    )


class PaymentRepository:
    """Repository for Payment database operations."""

    def __init__(self, session: DBSession) -> None:
        self.session = session

    async def create(self, payment: Payment) -> Payment:
        """Create a new payment and return it with parents loaded."""
        self.session.add(payment)
        await self.session.flush()
        stmt = (
            _select_with_parents()
            .where(Payment.id == payment.id)
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def list_all(
        self,
        tenant_id: int | None = None,
        unit_id: int | None = None,
    ) -> list[Payment]:
        """List payments, most recently paid first.

        Args:
            tenant_id: Only payments from this tenant
            unit_id: Only payments for this unit

        Returns:
            Matching payments
        """
        stmt = _select_with_parents().order_by(Payment.paid_on.desc(), Payment.id.desc())
        if tenant_id is not None:
            stmt = stmt.where(Payment.tenant_id == tenant_id)
        if unit_id is not None:
            stmt = stmt.where(Payment.unit_id == unit_id)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())


# Type alias for dependency injection
PaymentRepo = Annotated[PaymentRepository, Depends(PaymentRepository)]
