"""Pydantic schemas for tenant operations.

Field rules (presence, uniqueness, allowed statuses) are checked by
TenantService so every failure is reported per field; the schemas only
coerce types.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from propertyops.core.constants import (
    MAX_EMAIL_LENGTH,
    MAX_NAME_LENGTH,
    MAX_PHONE_LENGTH,
)


class TenantFields(BaseModel):
    """Writable tenant fields."""

    first_name: str | None = Field(None, max_length=MAX_NAME_LENGTH)
    last_name: str | None = Field(None, max_length=MAX_NAME_LENGTH)
    email: str | None = Field(None, max_length=MAX_EMAIL_LENGTH)
    phone: str | None = Field(None, max_length=MAX_PHONE_LENGTH)
    status: str | None = None

    model_config = ConfigDict(coerce_numbers_to_str=True)


class TenantCreate(TenantFields):
    """Schema for creating a tenant."""


class TenantUpdate(TenantFields):
    """Schema for updating a tenant. Only supplied fields change."""


class TenantCreateRequest(BaseModel):
    """Request body for POST /tenants."""

    tenant: TenantCreate


class TenantUpdateRequest(BaseModel):
    """Request body for PATCH /tenants/{id}."""

    tenant: TenantUpdate


class TenantResponse(BaseModel):
    """Schema for tenant response data."""

    id: int
    first_name: str
    last_name: str
    email: str
    phone: str | None = None
    status: str | None = None
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
