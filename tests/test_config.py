"""Tests for application settings."""

import pytest

from propertyops.config import Settings
from propertyops.core.constants import DEFAULT_UI_ORIGIN


@pytest.mark.parametrize(
    ("url", "expected"),
    [
        ("postgres://u:p@db/ops", "postgresql+asyncpg://u:p@db/ops"),
        ("postgresql://u:p@db/ops", "postgresql+asyncpg://u:p@db/ops"),
        ("postgresql+asyncpg://u:p@db/ops", "postgresql+asyncpg://u:p@db/ops"),
        ("sqlite+aiosqlite:///./ops.db", "sqlite+aiosqlite:///./ops.db"),
    ],
)
def test_database_url_uses_async_driver(url: str, expected: str) -> None:
    """Verify PostgreSQL URLs are rewritten for asyncpg."""
    settings = Settings(database_url=url)

    assert settings.database_url == expected


def test_sqlite_is_default() -> None:
    """Verify the default database is a local SQLite file."""
    settings = Settings(_env_file=None)

    assert settings.is_sqlite


def test_ui_origin_allowed_in_development() -> None:
    """Verify the UI dev host is allowed when no origins are configured."""
    settings = Settings(environment="development", cors_origins=[])

    assert settings.allowed_origins == [DEFAULT_UI_ORIGIN]


def test_no_default_origins_in_production() -> None:
    """Verify production only allows configured origins."""
    assert Settings(environment="production", cors_origins=[]).allowed_origins == []
    assert Settings(
        environment="production", cors_origins=["https://ops.example.com"]
    ).allowed_origins == ["https://ops.example.com"]
