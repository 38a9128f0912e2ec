"""Database layer - session management, base models, and mixins."""

from propertyops.core.database.base import Base, IDMixin, TimestampMixin
from propertyops.core.database.session import (
    async_engine,
    async_session_factory,
    build_engine,
    create_all,
    get_db,
)


__all__ = [
    "Base",
    "IDMixin",
    "TimestampMixin",
    "async_engine",
    "async_session_factory",
    "build_engine",
    "create_all",
    "get_db",
]
