"""Maintenance request repository for database operations."""

from typing import Annotated

from fastapi import Depends
from sqlalchemy import Select, select
from sqlalchemy.orm import selectinload

from propertyops.api.dependencies import DBSession
from propertyops.modules.maintenance_requests.models import MaintenanceRequest


def _select_with_parents() -> Select[tuple[MaintenanceRequest]]:
    """Select requests with tenant and unit loaded up front."""
    return select(MaintenanceRequest).options(
        selectinload(MaintenanceRequest.tenant),
        selectinload(MaintenanceRequest.unit),
    )


class MaintenanceRequestRepository:
    """Repository for MaintenanceRequest database operations.

    Every request returned has its tenant and unit loaded so it can be
    serialized without further queries.
    """

    def __init__(self, session: DBSession) -> None:
        self.session = session

    async def create(self, request: MaintenanceRequest) -> MaintenanceRequest:
        """Create a new request and return it with parents loaded."""
        self.session.add(request)
        await self.session.flush()
        return await self._reload(request.id)

    async def get_by_id(self, request_id: int) -> MaintenanceRequest | None:
        """Get a request by ID, or None."""
        stmt = _select_with_parents().where(MaintenanceRequest.id == request_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_all(
        self,
        status: str | None = None,
        priority: str | None = None,
    ) -> list[MaintenanceRequest]:
        """List requests newest first.

        Args:
            status: Only requests with exactly this status
            priority: Only requests with exactly this priority

        Returns:
            Matching requests
        """
        stmt = _select_with_parents().order_by(
            MaintenanceRequest.created_at.desc(),
            MaintenanceRequest.id.desc(),
        )
        if status:
            stmt = stmt.where(MaintenanceRequest.status == status)
        if priority:
            stmt = stmt.where(MaintenanceRequest.priority == priority)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def update(self, request: MaintenanceRequest) -> MaintenanceRequest:
        """Flush pending changes and reload the request with its parents."""
        await self.session.flush()
        return await self._reload(request.id)

    async def delete(self, request: MaintenanceRequest) -> None:
        """Delete a request."""
        await self.session.delete(request)
        await self.session.flush()

    async def _reload(self, request_id: int) -> MaintenanceRequest:
        stmt = (
            _select_with_parents()
            .where(MaintenanceRequest.id == request_id)
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()


# Type alias for dependency injection
MaintenanceRequestRepo = Annotated[
    MaintenanceRequestRepository, Depends(MaintenanceRequestRepository)
]
