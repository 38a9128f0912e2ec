"""Command: propertyops seed - Load demo data."""

import asyncio

import typer
from rich.console import Console

from propertyops.seeds import SeedCounts


console = Console()


async def _run_seed() -> SeedCounts:
    from propertyops.core.database import async_session_factory, create_all
    from propertyops.seeds import seed_demo

    await create_all()
    async with async_session_factory() as session:
        counts = await seed_demo(session)
        await session.commit()
    return counts


def seed() -> None:
    """Replace all data with the demo data set.

    Existing tenants, units, requests and payments are deleted first.
    """
    from sqlalchemy.exc import SQLAlchemyError

    try:
        counts = asyncio.run(_run_seed())
    except SQLAlchemyError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1) from None

    console.print(
        f"[green]✓[/green] Seeded: {counts['tenants']} tenants, "
        f"{counts['units']} units, {counts['maintenance_requests']} requests, "
        f"{counts['payments']} payments"
    )
