"""Tenant service for business logic."""

from typing import Annotated, Any

import structlog
from fastapi import Depends

from propertyops.core.constants import TENANT_STATUSES
from propertyops.core.errors import NotFoundError
from propertyops.core.validation import TAKEN_MESSAGE, FieldErrors
from propertyops.modules.tenants.models import Tenant
from propertyops.modules.tenants.repos import TenantRepo
from propertyops.modules.tenants.schemas import TenantCreate, TenantUpdate


logger = structlog.get_logger()

TENANT_FIELDS = ("first_name", "last_name", "email", "phone", "status")


class TenantService:
    """Service for tenant CRUD operations.

    Validation runs against the merged field values before anything
    is written, so a rejected update leaves the stored tenant untouched.
    """

    def __init__(self, repo: TenantRepo) -> None:
        self.repo = repo

    async def validate(self, values: dict[str, Any], tenant_id: int | None = None) -> None:
        """Check tenant rules.

        Args:
            values: Complete field values for the tenant
            tenant_id: ID of the tenant being updated (None when creating)

        Raises:
            ValidationError: If any rule fails
        """
        errors = FieldErrors()
        errors.presence(values, "first_name", "last_name", "email")
        if "email" not in errors:
            existing = await self.repo.get_by_email(values["email"])
            if existing is not None and existing.id != tenant_id:
                errors.add("email", TAKEN_MESSAGE)
        errors.inclusion(values, "status", TENANT_STATUSES)
        errors.raise_if_any()

    async def list_tenants(self, q: str | None = None) -> list[Tenant]:
        """List tenants, newest first, optionally filtered by ``q``."""
        return await self.repo.list_all(q)

    async def get_tenant(self, tenant_id: int) -> Tenant:
        """Get a tenant by ID.

        Raises:
            NotFoundError: If tenant not found
        """
        tenant = await self.repo.get_by_id(tenant_id)
        if tenant is None:
            raise NotFoundError(resource="tenant", resource_id=tenant_id)
        return tenant

    async def create_tenant(self, data: TenantCreate) -> Tenant:
        """Create a tenant.

        Raises:
            ValidationError: If the data breaks a tenant rule
        """
        values = data.model_dump(include=set(TENANT_FIELDS))
        await self.validate(values)

        tenant = await self.repo.create(Tenant(**values))
        logger.info("tenant_created", tenant_id=tenant.id)
        return tenant

    async def update_tenant(self, tenant_id: int, data: TenantUpdate) -> Tenant:
        """Apply the supplied fields to a tenant.

        Raises:
            NotFoundError: If tenant not found
            ValidationError: If the merged data breaks a tenant rule
        """
        tenant = await self.get_tenant(tenant_id)
        changes = data.model_dump(exclude_unset=True, include=set(TENANT_FIELDS))
        values = {field: getattr(tenant, field) for field in TENANT_FIELDS}
        values.update(changes)
        await self.validate(values, tenant_id=tenant.id)

        for field, value in changes.items():
            setattr(tenant, field, value)
        tenant = await self.repo.update(tenant)
        logger.info("tenant_updated", tenant_id=tenant.id, fields=sorted(changes))
        return tenant

    async def delete_tenant(self, tenant_id: int) -> None:
        """Delete a tenant and its dependent records.

        Raises:
            NotFoundError: If tenant not found
        """
        tenant = await self.get_tenant(tenant_id)
        await self.repo.delete(tenant)
        logger.info("tenant_deleted", tenant_id=tenant_id)


# Type alias for dependency injection
TenantSvc = Annotated[TenantService, Depends(TenantService)]
