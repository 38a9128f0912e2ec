"""Tenant repository for database operations."""

from typing import Annotated

from fastapi import Depends
from sqlalchemy import or_, select

from propertyops.api.dependencies import DBSession
from propertyops.modules.tenants.models import Tenant


class TenantRepository:
    """Repository for Tenant database operations."""

    def __init__(self, session: DBSession) -> None:
        self.session = session

    async def create(self, tenant: Tenant) -> Tenant:
        """Create a new tenant.

        Args:
            tenant: Tenant instance to create

        Returns:
            The created tenant with ID and timestamps populated
        """
        self.session.add(tenant)
        await self.session.flush()
        await self.session.refresh(tenant)
        return tenant

    async def get_by_id(self, tenant_id: int) -> Tenant | None:
        """Get a tenant by ID.

        Args:
            tenant_id: The tenant's ID

        Returns:
            Tenant if found, None otherwise
        """
        result = await self.session.execute(select(Tenant).where(Tenant.id == tenant_id))
        return result.scalar_one_or_none()

    async def get_by_email(self, email: str) -> Tenant | None:
        """Get a tenant by email address.

        Args:
            email: The tenant's email

        Returns:
            Tenant if found, None otherwise
        """
        result = await self.session.execute(select(Tenant).where(Tenant.email == email))
        return result.scalar_one_or_none()

    async def list_all(self, q: str | None = None) -> list[Tenant]:
        """List tenants newest first.

        Args:
            q: Optional substring matched against names and email

        Returns:
            Matching tenants
        """
        stmt = select(Tenant).order_by(Tenant.created_at.desc(), Tenant.id.desc())
        if q:
            pattern = f"%{q}%"
            stmt = stmt.where(
                or_(
                    Tenant.first_name.like(pattern),
                    Tenant.last_name.like(pattern),
                    Tenant.email.like(pattern),
                )
            )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def update(self, tenant: Tenant) -> Tenant:
        """Flush pending changes on a tenant and reload it."""
        await self.session.flush()
        await self.session.refresh(tenant)
        return tenant

    async def delete(self, tenant: Tenant) -> None:
        """Delete a tenant along with its requests and payments.

        Args:
            tenant: Tenant instance to delete
        """
        # Load the current children so the delete cascade sees all of them
        await self.session.refresh(tenant, attribute_names=["maintenance_requests", "payments"])
        await self.session.delete(tenant)
        await self.session.flush()


# Type alias for dependency injection
TenantRepo = Annotated[TenantRepository, Depends(TenantRepository)]
