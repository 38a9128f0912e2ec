"""Unit database models."""

from decimal import Decimal
from typing import TYPE_CHECKING

from sqlalchemy import Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from propertyops.core.constants import MAX_NAME_LENGTH, MAX_STATUS_LENGTH
from propertyops.core.database.base import Base, IDMixin, TimestampMixin


if TYPE_CHECKING:
    from propertyops.modules.maintenance_requests.models import MaintenanceRequest
    from propertyops.modules.payments.models import Payment


class Unit(Base, IDMixin, TimestampMixin):
    """A rentable unit within a property.

    Attributes:
        property_name: Name of the building or complex
        unit_number: Unit label within the property (e.g. "2B")
        beds: Number of bedrooms
        baths: Number of bathrooms, halves allowed
        rent_cents: Monthly rent in cents
        status: One of occupied, vacant, maintenance (nullable)
    """

    __tablename__ = "units"

    property_name: Mapped[str] = mapped_column(
        String(MAX_NAME_LENGTH),
        nullable=False,
        index=True,
    )
    unit_number: Mapped[str] = mapped_column(String(MAX_NAME_LENGTH), nullable=False)
    beds: Mapped[int | None] = mapped_column(Integer, nullable=True)
    baths: Mapped[Decimal | None] = mapped_column(Numeric(4, 1), nullable=True)
    rent_cents: Mapped[int | None] = mapped_column(Integer, nullable=True)
    status: Mapped[str | None] = mapped_column(String(MAX_STATUS_LENGTH), nullable=True)

    # Relationships
    maintenance_requests: Mapped[list["MaintenanceRequest"]] = relationship(
        "MaintenanceRequest",
        back_populates="unit",
        cascade="all, delete-orphan",
    )
    payments: Mapped[list["Payment"]] = relationship(
        "Payment",
        back_populates="unit",
        cascade="all, delete-orphan",
    )

    def __repr__(self) -> str:
        return (
            f"<Unit(id={self.id}, property_name={self.property_name}, "
            f"unit_number={self.unit_number})>"
        )
