"""Payment database models."""

from datetime import date
from typing import TYPE_CHECKING

from sqlalchemy import Date, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from propertyops.core.constants import MAX_REFERENCE_LENGTH, MAX_STATUS_LENGTH
from propertyops.core.database.base import Base, IDMixin, TimestampMixin


if TYPE_CHECKING:
    from propertyops.modules.tenants.models import Tenant
    from propertyops.modules.units.models import Unit


class Payment(Base, IDMixin, TimestampMixin):
    """A rent payment received from a tenant for a unit.

    Payments are append-only through the API.

    Attributes:
        tenant_id: The paying tenant
        unit_id: The unit paid for
        amount_cents: Amount received in cents
        paid_on: Date the payment was made
        method: One of cash, card, ach, check (nullable)
        reference: Free-form receipt or transaction reference
    """

    __tablename__ = "payments"

    tenant_id: Mapped[int] = mapped_column(
        ForeignKey("tenants.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    unit_id: Mapped[int] = mapped_column(
        ForeignKey("units.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    amount_cents: Mapped[int] = mapped_column(Integer, nullable=False)
    paid_on: Mapped[date] = mapped_column(Date, nullable=False, index=True)
    method: Mapped[str | None] = mapped_column(String(MAX_STATUS_LENGTH), nullable=True)
    reference: Mapped[str | None] = mapped_column(
        String(MAX_REFERENCE_LENGTH),
        nullable=True,
    )

    # Relationships
    tenant: Mapped["Tenant"] = relationship("Tenant", back_populates="payments")
    unit: Mapped["Unit"] = relationship("Unit", back_populates="payments")

    def __repr__(self) -> str:
        return (
            f"<Payment(id={self.id}, amount_cents={self.amount_cents}, "
            f"paid_on={self.paid_on})>"
        )
