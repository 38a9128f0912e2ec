"""Maintenance request database models."""

from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from propertyops.core.constants import (
    DEFAULT_REQUEST_STATUS,
    MAX_NAME_LENGTH,
    MAX_STATUS_LENGTH,
)
from propertyops.core.database.base import Base, IDMixin, TimestampMixin


if TYPE_CHECKING:
    from propertyops.modules.tenants.models import Tenant
    from propertyops.modules.units.models import Unit


class MaintenanceRequest(Base, IDMixin, TimestampMixin):
    """A repair or service request raised by a tenant for a unit.

    Attributes:
        tenant_id: The tenant who raised the request
        unit_id: The unit needing work
        title: Short summary
        description: Free-text details
        status: One of new, in_progress, resolved, closed
        priority: One of low, medium, high, urgent (nullable)
    """

    __tablename__ = "maintenance_requests"

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
    title: Mapped[str] = mapped_column(String(MAX_NAME_LENGTH), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    status: Mapped[str] = mapped_column(
        String(MAX_STATUS_LENGTH),
        nullable=False,
        default=DEFAULT_REQUEST_STATUS,
        index=True,
    )
    priority: Mapped[str | None] = mapped_column(
        String(MAX_STATUS_LENGTH),
        nullable=True,
        index=True,
    )

    # Relationships
    tenant: Mapped["Tenant"] = relationship("Tenant", back_populates="maintenance_requests")
    unit: Mapped["Unit"] = relationship("Unit", back_populates="maintenance_requests")

    def __repr__(self) -> str:
        return (
            f"<MaintenanceRequest(id={self.id}, status={self.status}, "
            f"tenant_id={self.tenant_id}, unit_id={self.unit_id})>"
        )
