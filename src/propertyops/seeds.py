"""Demo data for development.

``seed_demo`` wipes the four tables and loads a small, fixed data set:
three tenants, three units, two maintenance requests and two payments.
"""

from datetime import date, timedelta
from decimal import Decimal
from typing import TypedDict

import structlog
from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from propertyops.modules.maintenance_requests.models import MaintenanceRequest
from propertyops.modules.payments.models import Payment
from propertyops.modules.tenants.models import Tenant
from propertyops.modules.units.models import Unit


logger = structlog.get_logger()


# ============================================================
# Demo Data Definitions
# ============================================================


class TenantData(TypedDict):
    first_name: str
    last_name: str
    email: str
    phone: str
    status: str


class UnitData(TypedDict):
    property_name: str
    unit_number: str
    beds: int
    baths: Decimal
    rent_cents: int
    status: str


DEMO_TENANTS: list[TenantData] = [
    {
        "first_name": "Ava",
        "last_name": "Patel",
        "email": "ava.patel@example.com",
        "phone": "555-0101",
        "status": "active",
    },
    {
        "first_name": "Noah",
        "last_name": "Kim",
        "email": "noah.kim@example.com",
        "phone": "555-0102",
        "status": "active",
    },
    {
        "first_name": "Mia",
        "last_name": "Lopez",
        "email": "mia.lopez@example.com",
        "phone": "555-0103",
        "status": "applicant",
    },
]

DEMO_UNITS: list[UnitData] = [
    {
        "property_name": "Maple Grove",
        "unit_number": "2B",
        "beds": 2,
        "baths": Decimal("1.5"),
        "rent_cents": 215000,
        "status": "occupied",
    },
    {
        "property_name": "Maple Grove",
        "unit_number": "5A",
        "beds": 1,
        "baths": Decimal("1.0"),
        "rent_cents": 175000,
        "status": "vacant",
    },
    {
        "property_name": "Oak Plaza",
        "unit_number": "11C",
        "beds": 3,
        "baths": Decimal("2.0"),
        "rent_cents": 285000,
        "status": "occupied",
    },
]


class SeedCounts(TypedDict):
    tenants: int
    units: int
    maintenance_requests: int
    payments: int


async def clear_all(session: AsyncSession) -> None:
    """Delete every row, children first."""
    for model in (Payment, MaintenanceRequest, Unit, Tenant):
        await session.execute(delete(model))
    await session.flush()


async def count_all(session: AsyncSession) -> SeedCounts:
    """Count rows in each table."""

    async def _count(model: type) -> int:
        result = await session.execute(select(func.count()).select_from(model))
        return result.scalar_one()

    return {
        "tenants": await _count(Tenant),
        "units": await _count(Unit),
        "maintenance_requests": await _count(MaintenanceRequest),
        "payments": await _count(Payment),
    }


async def seed_demo(session: AsyncSession, today: date | None = None) -> SeedCounts:
    """Replace all data with the demo data set.

    Args:
        session: Database session (the caller commits)
        today: Reference date for payment dates (defaults to today)

    Returns:
        Row counts after seeding
    """
    today = today or date.today()

    await clear_all(session)

    tenants = [Tenant(**data) for data in DEMO_TENANTS]
    units = [Unit(**data) for data in DEMO_UNITS]
    session.add_all(tenants + units)
    await session.flush()

    ava, noah, _mia = tenants
    maple_2b, _maple_5a, oak_11c = units

    session.add_all(
        [
            MaintenanceRequest(
                tenant_id=ava.id,
                unit_id=maple_2b.id,
                title="Leaky kitchen faucet",
                description="Slow drip under the sink.",
                status="new",
                priority="medium",
            ),
            MaintenanceRequest(
                tenant_id=noah.id,
                unit_id=oak_11c.id,
                title="AC not cooling",
                description="Air blows but not cold.",
                status="in_progress",
                priority="high",
            ),
            Payment(
                tenant_id=ava.id,
                unit_id=maple_2b.id,
                amount_cents=215000,
                paid_on=today - timedelta(days=10),
                method="ach",
                reference="ACH-10422",
            ),
            Payment(
                tenant_id=noah.id,
                unit_id=oak_11c.id,
                amount_cents=285000,
                paid_on=today - timedelta(days=8),
                method="card",
                reference="CC-88431",
            ),
        ]
    )
    await session.flush()

    counts = await count_all(session)
    logger.info("demo_data_seeded", **counts)
    return counts
