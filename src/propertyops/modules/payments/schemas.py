"""Pydantic schemas for payment operations."""

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field

from propertyops.core.constants import MAX_REFERENCE_LENGTH
from propertyops.core.validation import TruncatedInt
from propertyops.modules.tenants.schemas import TenantResponse
from propertyops.modules.units.schemas import UnitResponse


class PaymentCreate(BaseModel):
    """Schema for recording a payment. Money is in cents."""

    tenant_id: int | None = None
    unit_id: int | None = None
    amount_cents: TruncatedInt | None = None
    paid_on: date | None = None
    method: str | None = None
    reference: str | None = Field(None, max_length=MAX_REFERENCE_LENGTH)

    model_config = ConfigDict(coerce_numbers_to_str=True)


class PaymentCreateRequest(BaseModel):
    """Request body for POST /payments."""

    payment: PaymentCreate


class PaymentResponse(BaseModel):
    """Payment with its tenant and unit embedded."""

    id: int
    tenant_id: int
    unit_id: int
    amount_cents: int
    paid_on: date
    method: str | None = None
    reference: str | None = None
    created_at: datetime
    updated_at: datetime
    tenant: TenantResponse | None = None
    unit: UnitResponse | None = None

    model_config = ConfigDict(from_attributes=True)
