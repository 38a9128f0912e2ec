"""Maintenance request service for business logic."""

from typing import Annotated, Any

import structlog
from fastapi import Depends

from propertyops.core.constants import (
    DEFAULT_REQUEST_STATUS,
    REQUEST_PRIORITIES,
    REQUEST_STATUSES,
)
from propertyops.core.errors import NotFoundError
from propertyops.core.validation import FieldErrors
from propertyops.modules._parents import check_tenant_and_unit
from propertyops.modules.maintenance_requests.models import MaintenanceRequest
from propertyops.modules.maintenance_requests.repos import MaintenanceRequestRepo
from propertyops.modules.maintenance_requests.schemas import (
    MaintenanceRequestCreate,
    MaintenanceRequestUpdate,
)
from propertyops.modules.tenants.repos import TenantRepo
from propertyops.modules.units.repos import UnitRepo


logger = structlog.get_logger()

REQUEST_FIELDS = ("tenant_id", "unit_id", "title", "description", "status", "priority")


class MaintenanceRequestService:
    """Service for maintenance request CRUD operations."""

    def __init__(
        self,
        repo: MaintenanceRequestRepo,
        tenants: TenantRepo,
        units: UnitRepo,
    ) -> None:
        self.repo = repo
        self.tenants = tenants
        self.units = units

    async def validate(self, values: dict[str, Any]) -> None:
        """Check request rules.

        Status is required and must always be a known workflow state;
        priority may be left empty.

        Raises:
            ValidationError: If any rule fails
        """
        errors = FieldErrors()
        await check_tenant_and_unit(errors, values, self.tenants, self.units)
        errors.presence(values, "title", "status")
        errors.inclusion(values, "status", REQUEST_STATUSES, allow_nil=False)
        errors.inclusion(values, "priority", REQUEST_PRIORITIES)
        errors.raise_if_any()

    async def list_requests(
        self,
        status: str | None = None,
        priority: str | None = None,
    ) -> list[MaintenanceRequest]:
        """List requests newest first, filtered by exact status/priority."""
        return await self.repo.list_all(status=status, priority=priority)

    async def get_request(self, request_id: int) -> MaintenanceRequest:
        """Get a request by ID.

        Raises:
            NotFoundError: If request not found
        """
        request = await self.repo.get_by_id(request_id)
        if request is None:
            raise NotFoundError(resource="maintenance_request", resource_id=request_id)
        return request

    async def create_request(self, data: MaintenanceRequestCreate) -> MaintenanceRequest:
        """Create a request, defaulting its status to ``new``.

        Raises:
            ValidationError: If the data breaks a request rule
        """
        values = data.model_dump(include=set(REQUEST_FIELDS))
        if values["status"] is None:
            values["status"] = DEFAULT_REQUEST_STATUS
        await self.validate(values)

        request = await self.repo.create(MaintenanceRequest(**values))
        logger.info(
            "maintenance_request_created",
            request_id=request.id,
            status=request.status,
            priority=request.priority,
        )
        return request

    async def update_request(
        self,
        request_id: int,
        data: MaintenanceRequestUpdate,
    ) -> MaintenanceRequest:
        """Apply the supplied fields to a request.

        Raises:
            NotFoundError: If request not found
            ValidationError: If the merged data breaks a request rule
        """
        request = await self.get_request(request_id)
        changes = data.model_dump(exclude_unset=True, include=set(REQUEST_FIELDS))
        values = {field: getattr(request, field) for field in REQUEST_FIELDS}
        values.update(changes)
        await self.validate(values)

        for field, value in changes.items():
            setattr(request, field, value)
        request = await self.repo.update(request)
        logger.info(
            "maintenance_request_updated",
            request_id=request.id,
            fields=sorted(changes),
        )
        return request

    async def delete_request(self, request_id: int) -> None:
        """Delete a request.

        Raises:
            NotFoundError: If request not found
        """
        request = await self.get_request(request_id)
        await self.repo.delete(request)
        logger.info("maintenance_request_deleted", request_id=request_id)


# Type alias for dependency injection
MaintenanceRequestSvc = Annotated[
    MaintenanceRequestService, Depends(MaintenanceRequestService)
]
