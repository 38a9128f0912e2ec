"""Unit service for business logic."""

from typing import Annotated, Any

import structlog
from fastapi import Depends

from propertyops.core.constants import UNIT_STATUSES
from propertyops.core.errors import NotFoundError
from propertyops.core.validation import FieldErrors
from propertyops.modules.units.models import Unit
from propertyops.modules.units.repos import UnitRepo
from propertyops.modules.units.schemas import UnitCreate, UnitUpdate


logger = structlog.get_logger()

UNIT_FIELDS = ("property_name", "unit_number", "beds", "baths", "rent_cents", "status")


def validate_unit(values: dict[str, Any]) -> None:
    """Check unit rules.

    Raises:
        ValidationError: If any rule fails
    """
    errors = FieldErrors()
    errors.presence(values, "property_name", "unit_number")
    errors.numericality(values, "rent_cents", greater_than_or_equal_to=0, allow_nil=True)
    errors.inclusion(values, "status", UNIT_STATUSES)
    errors.raise_if_any()


class UnitService:
    """Service for unit CRUD operations."""

    def __init__(self, repo: UnitRepo) -> None:
        self.repo = repo

    async def list_units(self, q: str | None = None) -> list[Unit]:
        """List units, newest first, optionally filtered by ``q``."""
        return await self.repo.list_all(q)

    async def get_unit(self, unit_id: int) -> Unit:
        """Get a unit by ID.

        Raises:
            NotFoundError: If unit not found
        """
        unit = await self.repo.get_by_id(unit_id)
        if unit is None:
            raise NotFoundError(resource="unit", resource_id=unit_id)
        return unit

    async def create_unit(self, data: UnitCreate) -> Unit:
        """Create a unit.

        Raises:
            ValidationError: If the data breaks a unit rule
        """
        values = data.model_dump(include=set(UNIT_FIELDS))
        validate_unit(values)

        unit = await self.repo.create(Unit(**values))
        logger.info("unit_created", unit_id=unit.id)
        return unit

    async def update_unit(self, unit_id: int, data: UnitUpdate) -> Unit:
        """Apply the supplied fields to a unit.

        Raises:
            NotFoundError: If unit not found
            ValidationError: If the merged data breaks a unit rule
        """
        unit = await self.get_unit(unit_id)
        changes = data.model_dump(exclude_unset=True, include=set(UNIT_FIELDS))
        values = {field: getattr(unit, field) for field in UNIT_FIELDS}
        values.update(changes)
        validate_unit(values)

        for field, value in changes.items():
            setattr(unit, field, value)
        unit = await self.repo.update(unit)
        logger.info("unit_updated", unit_id=unit.id, fields=sorted(changes))
        return unit

    async def delete_unit(self, unit_id: int) -> None:
        """Delete a unit and its dependent records.

        Raises:
            NotFoundError: If unit not found
        """
        unit = await self.get_unit(unit_id)
        await self.repo.delete(unit)
        logger.info("unit_deleted", unit_id=unit_id)


# Type alias for dependency injection
UnitSvc = Annotated[UnitService, Depends(UnitService)]
