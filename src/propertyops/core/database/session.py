"""Async database session management."""

from collections.abc import AsyncGenerator
from typing import Any

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from propertyops.config import settings


def build_engine(url: str | None = None, **kwargs: Any) -> AsyncEngine:
    """Create an async engine for the given URL.

    Args:
        url: Database URL (defaults to the configured one)
        **kwargs: Extra engine options

    Returns:
        A configured AsyncEngine
    """
    url = url or settings.database_url
    options: dict[str, Any] = {"echo": settings.database_echo}
    if not url.startswith("sqlite"):
        options["pool_pre_ping"] = True  # Verify connections before use
    options.update(kwargs)
    return create_async_engine(url, **options)


# Create async engine
async_engine = build_engine()

# Create async session factory
async_session_factory = async_sessionmaker(
    bind=async_engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autoflush=False,
)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Dependency that provides a database session.

    The session is committed when the handler returns and rolled
    back if it raises.
    """
    async with async_session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


async def create_all(engine: AsyncEngine | None = None) -> None:
    """Create all tables registered on Base.metadata."""
    from propertyops.core.database.base import Base
    from propertyops.modules import load_models

    load_models()
    async with (engine or async_engine).begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
