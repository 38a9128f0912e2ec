"""Pytest configuration and shared fixtures."""

from collections.abc import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker
from sqlalchemy.pool import StaticPool

from propertyops.core.database import build_engine, create_all, get_db
from propertyops.main import create_app
from propertyops.modules.tenants.models import Tenant
from propertyops.modules.units.models import Unit
from tests.factories import TenantCreateFactory, UnitCreateFactory


# One in-memory database per test, shared by every connection of the engine
TEST_DATABASE_URL = "sqlite+aiosqlite://"


@pytest.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """Create a test database engine with all tables."""
    engine = build_engine(
        TEST_DATABASE_URL,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    await create_all(engine)

    yield engine

    await engine.dispose()


@pytest.fixture
async def db(engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """Provide a database session for tests."""
    session_factory = async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )

    async with session_factory() as session:
        yield session


@pytest.fixture
async def app(db: AsyncSession):
    """Create test application instance."""
    application = create_app()

    # Override database dependency
    async def override_get_db() -> AsyncGenerator[AsyncSession, None]:
        yield db

    application.dependency_overrides[get_db] = override_get_db

    yield application

    application.dependency_overrides.clear()


@pytest.fixture
async def client(app) -> AsyncGenerator[AsyncClient, None]:
    """Provide async HTTP client for API testing."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as client:
        yield client


# ============================================================
# Record Fixtures
# ============================================================


@pytest.fixture
async def tenant(db: AsyncSession) -> Tenant:
    """Create a persisted active tenant."""
    tenant = Tenant(**TenantCreateFactory.build().model_dump())
    db.add(tenant)
    await db.flush()
    await db.refresh(tenant)
    return tenant


@pytest.fixture
async def unit(db: AsyncSession) -> Unit:
    """Create a persisted occupied unit."""
    unit = Unit(**UnitCreateFactory.build().model_dump())
    db.add(unit)
    await db.flush()
    await db.refresh(unit)
    return unit
