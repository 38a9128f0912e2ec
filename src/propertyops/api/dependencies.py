"""Shared API dependencies."""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from propertyops.core.database import get_db
from propertyops.core.errors import NotFoundError
from propertyops.core.validation import is_record_id


# Type alias for database session dependency
DBSession = Annotated[AsyncSession, Depends(get_db)]


def parse_record_id(value: str) -> int:
    """Parse an id taken from the URL path.

    Anything that cannot name a stored record, such as ``abc`` or a number
    too large for the id column, is treated as an unknown record.

    Raises:
        NotFoundError: If ``value`` is not a usable record id
    """
    try:
        record_id = int(value)
    except ValueError:
        raise NotFoundError(resource_id=value) from None
    if not is_record_id(record_id):
        raise NotFoundError(resource_id=value)
    return record_id
