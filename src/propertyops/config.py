"""Application configuration using pydantic-settings."""

from functools import lru_cache

from pydantic import computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from propertyops.core.constants import DEFAULT_UI_ORIGIN


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "PropertyOps API"
    debug: bool = False
    environment: str = "development"  # development, staging, production

    # Database
    database_url: str = "sqlite+aiosqlite:///./propertyops.db"
    database_echo: bool = False

    # API
    api_prefix: str = "/api"

    # CORS
    cors_origins: list[str] = []

    # Observability
    log_level: str = "INFO"

    @field_validator("database_url")
    @classmethod
    def use_async_driver(cls, v: str) -> str:
        """Rewrite plain PostgreSQL URLs to the asyncpg driver.

        Args:
            v: The configured database URL

        Returns:
            A URL usable by the async engine
        """
        for prefix in ("postgres://", "postgresql://"):
            if v.startswith(prefix):
                return "postgresql+asyncpg://" + v[len(prefix) :]
        return v

    @computed_field  # type: ignore[prop-decorator]
    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"

    @computed_field  # type: ignore[prop-decorator]
    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment == "development"

    @computed_field  # type: ignore[prop-decorator]
    @property
    def is_sqlite(self) -> bool:
        """Check if the configured database is SQLite."""
        return self.database_url.startswith("sqlite")

    @property
    def allowed_origins(self) -> list[str]:
        """Origins allowed by CORS, defaulting to the UI dev host."""
        if self.cors_origins:
            return self.cors_origins
        if self.is_development:
            return [DEFAULT_UI_ORIGIN]
        return []


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()
