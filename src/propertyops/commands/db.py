"""Command: propertyops init-db - Create database tables."""

import asyncio

import typer
from rich.console import Console


console = Console()


def init_db() -> None:
    """Create all tables on the configured database.

    Intended for local development; deployed databases use the Alembic
    migrations instead.
    """
    from sqlalchemy.exc import SQLAlchemyError

    from propertyops.config import settings
    from propertyops.core.database import create_all

    try:
        asyncio.run(create_all())
    except SQLAlchemyError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1) from None

    console.print(f"[green]✓[/green] Tables created on {settings.database_url}")
