"""Pydantic schemas for maintenance request operations."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from propertyops.core.constants import MAX_NAME_LENGTH
from propertyops.modules.tenants.schemas import TenantResponse
from propertyops.modules.units.schemas import UnitResponse


class MaintenanceRequestFields(BaseModel):
    """Writable maintenance request fields."""

    tenant_id: int | None = None
    unit_id: int | None = None
    title: str | None = Field(None, max_length=MAX_NAME_LENGTH)
    description: str | None = None
    status: str | None = None
    priority: str | None = None

    model_config = ConfigDict(coerce_numbers_to_str=True)


class MaintenanceRequestCreate(MaintenanceRequestFields):
    """Schema for creating a maintenance request.

    A missing status is filled in as ``new``.
    """


class MaintenanceRequestUpdate(MaintenanceRequestFields):
    """Schema for updating a maintenance request. Only supplied fields change."""


class MaintenanceRequestCreateRequest(BaseModel):
    """Request body for POST /maintenance_requests."""

    maintenance_request: MaintenanceRequestCreate


class MaintenanceRequestUpdateRequest(BaseModel):
    """Request body for PATCH /maintenance_requests/{id}."""

    maintenance_request: MaintenanceRequestUpdate


class MaintenanceRequestResponse(BaseModel):
    """Maintenance request with its tenant and unit embedded."""

    id: int
    tenant_id: int
    unit_id: int
    title: str
    description: str | None = None
    status: str
    priority: str | None = None
    created_at: datetime
    updated_at: datetime
    tenant: TenantResponse | None = None
    unit: UnitResponse | None = None

    model_config = ConfigDict(from_attributes=True)
