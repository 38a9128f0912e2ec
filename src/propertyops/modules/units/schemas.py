"""Pydantic schemas for unit operations."""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from propertyops.core.constants import MAX_NAME_LENGTH
from propertyops.core.validation import TruncatedInt


class UnitFields(BaseModel):
    """Writable unit fields. Money is in cents."""

    property_name: str | None = Field(None, max_length=MAX_NAME_LENGTH)
    unit_number: str | None = Field(None, max_length=MAX_NAME_LENGTH)
    beds: TruncatedInt | None = None
    baths: Decimal | None = None
    rent_cents: TruncatedInt | None = None
    status: str | None = None

    model_config = ConfigDict(coerce_numbers_to_str=True)


class UnitCreate(UnitFields):
    """Schema for creating a unit."""


class UnitUpdate(UnitFields):
    """Schema for updating a unit. Only supplied fields change."""


class UnitCreateRequest(BaseModel):
    """Request body for POST /units."""

    unit: UnitCreate


class UnitUpdateRequest(BaseModel):
    """Request body for PATCH /units/{id}."""

    unit: UnitUpdate


class UnitResponse(BaseModel):
    """Schema for unit response data."""

    id: int
    property_name: str
    unit_number: str
    beds: int | None = None
    baths: Decimal | None = None
    rent_cents: int | None = None
    status: str | None = None
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
