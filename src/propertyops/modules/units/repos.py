"""Unit repository for database operations."""

from typing import Annotated

from fastapi import Depends
from sqlalchemy import or_, select

from propertyops.api.dependencies import DBSession
from propertyops.modules.units.models import Unit


class UnitRepository:
    """Repository for Unit database operations."""

    def __init__(self, session: DBSession) -> None:
        self.session = session

    async def create(self, unit: Unit) -> Unit:
        """Create a new unit and return it with ID populated."""
        self.session.add(unit)
        await self.session.flush()
        await self.session.refresh(unit)
        return unit

    async def get_by_id(self, unit_id: int) -> Unit | None:
        """Get a unit by ID, or None."""
        result = await self.session.execute(select(Unit).where(Unit.id == unit_id))
        return result.scalar_one_or_none()

    async def list_all(self, q: str | None = None) -> list[Unit]:
        """List units newest first.

        Args:
            q: Optional substring matched against property name and unit number

        Returns:
            Matching units
        """
        stmt = select(Unit).order_by(Unit.created_at.desc(), Unit.id.desc())
        if q:
            pattern = f"%{q}%"
            stmt = stmt.where(
                or_(Unit.property_name.like(pattern), Unit.unit_number.like(pattern))
            )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def update(self, unit: Unit) -> Unit:
        """Flush pending changes on a unit and reload it."""
        await self.session.flush()
        await self.session.refresh(unit)
        return unit

    async def delete(self, unit: Unit) -> None:
        """Delete a unit along with its requests and payments."""
        await self.session.refresh(unit, attribute_names=["maintenance_requests", "payments"])
        await self.session.delete(unit)
        await self.session.flush()


# Type alias for dependency injection
UnitRepo = Annotated[UnitRepository, Depends(UnitRepository)]
