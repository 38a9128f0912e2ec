"""Tenant database models."""

from typing import TYPE_CHECKING

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from propertyops.core.constants import (
    MAX_EMAIL_LENGTH,
    MAX_NAME_LENGTH,
    MAX_PHONE_LENGTH,
    MAX_STATUS_LENGTH,
)
from propertyops.core.database.base import Base, IDMixin, TimestampMixin


if TYPE_CHECKING:
    from propertyops.modules.maintenance_requests.models import MaintenanceRequest
    from propertyops.modules.payments.models import Payment


class Tenant(Base, IDMixin, TimestampMixin):
    """A person renting, or applying to rent, a unit.

    Deleting a tenant deletes their maintenance requests and payments.

    Attributes:
        first_name: Given name
        last_name: Family name
        email: Contact email, unique across tenants
        phone: Contact phone number
        status: One of active, inactive, applicant (nullable)
    """

    __tablename__ = "tenants"

    first_name: Mapped[str] = mapped_column(String(MAX_NAME_LENGTH), nullable=False)
    last_name: Mapped[str] = mapped_column(String(MAX_NAME_LENGTH), nullable=False)
    email: Mapped[str] = mapped_column(
        String(MAX_EMAIL_LENGTH),
        nullable=False,
        unique=True,
        index=True,
    )
    phone: Mapped[str | None] = mapped_column(String(MAX_PHONE_LENGTH), nullable=True)
    status: Mapped[str | None] = mapped_column(
        String(MAX_STATUS_LENGTH),
        nullable=True,
    )

    # Relationships
    maintenance_requests: Mapped[list["MaintenanceRequest"]] = relationship(
        "MaintenanceRequest",
        back_populates="tenant",
        cascade="all, delete-orphan",
    )
    payments: Mapped[list["Payment"]] = relationship(
        "Payment",
        back_populates="tenant",
        cascade="all, delete-orphan",
    )

    def __repr__(self) -> str:
        return f"<Tenant(id={self.id}, email={self.email}, status={self.status})>"
