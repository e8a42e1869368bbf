"""Application settings loaded from environment variables."""

import os
from dataclasses import dataclass, field
from functools import cached_property

from sqlalchemy import URL

from ...domain.value_objects import LookupBackend, TableSchema
from ..adapters.database import DatabaseConfig


def _env_int(key: str, default: int) -> int:
    """Get integer from environment variable."""
    return int(os.environ.get(key, str(default)))


def _env_float(key: str, default: float) -> float:
    """Get float from environment variable."""
    return float(os.environ.get(key, str(default)))


def _env_str(key: str, default: str = "") -> str:
    """Get string from environment variable."""
    return os.environ.get(key, default)


def _env_list(key: str, default: str = "") -> list[str]:
    """Get comma-separated list from environment variable."""
    return [item.strip() for item in os.environ.get(key, default).split(",") if item.strip()]


@dataclass
class Settings:
    """Application settings container."""

    # Lookup
    lookup_backend: str = field(default_factory=lambda: _env_str("LOOKUP_BACKEND", "database"))

    # Database
    database_url: str = field(default_factory=lambda: _env_str("DATABASE_URL"))
    db_host: str = field(default_factory=lambda: _env_str("DB_HOST", "localhost"))
    db_port: int = field(default_factory=lambda: _env_int("DB_PORT", 3306))
    db_username: str = field(default_factory=lambda: _env_str("DB_USERNAME"))
    db_password: str = field(default_factory=lambda: _env_str("DB_PASSWORD"))
    db_database: str = field(default_factory=lambda: _env_str("DB_DATABASE"))
    db_pool_size: int = field(default_factory=lambda: _env_int("DB_POOL_SIZE", 10))
    db_pool_timeout: float = field(default_factory=lambda: _env_float("DB_POOL_TIMEOUT", 30.0))

    # Schema discovery
    default_table: str = field(default_factory=lambda: _env_str("DEFAULT_TABLE", "domains"))
    domain_column: str = field(default_factory=lambda: _env_str("DOMAIN_COLUMN", "domain_name"))
    expire_column: str = field(default_factory=lambda: _env_str("EXPIRE_COLUMN", "expire_date"))
    schema_tables: list[str] = field(default_factory=lambda: _env_list("SCHEMA_TABLES"))
    schema_cache_seconds: float = field(default_factory=lambda: _env_float("SCHEMA_CACHE_SECONDS", 0))

    # Display
    display_timezone: str = field(default_factory=lambda: _env_str("DISPLAY_TIMEZONE", "Asia/Bangkok"))
    display_locale: str = field(default_factory=lambda: _env_str("DISPLAY_LOCALE", "th_TH"))

    # API settings
    domain_fields: list[str] = field(default_factory=lambda: _env_list("DOMAIN_FIELDS", "domain,domain_name"))
    webhook_paths: list[str] = field(default_factory=lambda: _env_list("WEBHOOK_PATHS"))
    cors_origins: list[str] = field(default_factory=lambda: _env_list("CORS_ORIGINS", "*"))
    api_host: str = field(default_factory=lambda: _env_str("API_HOST", "0.0.0.0"))  # noqa: S104
    api_port: int = field(default_factory=lambda: _env_int("API_PORT", _env_int("PORT", 3000)))

    log_level: str = field(default_factory=lambda: _env_str("LOG_LEVEL", "INFO"))

    def validate(self) -> None:
        """Validate settings."""
        backends = [b.value for b in LookupBackend]
        if self.lookup_backend.lower() not in backends:
            msg = f"Invalid LOOKUP_BACKEND: {self.lookup_backend} (use one of {', '.join(backends)})"
            raise ValueError(msg)

        if self.db_pool_size < 1:
            msg = f"DB_POOL_SIZE must be at least 1, got {self.db_pool_size}"
            raise ValueError(msg)

        if not self.domain_fields:
            msg = "DOMAIN_FIELDS must name at least one request field"
            raise ValueError(msg)

        if self.backend is LookupBackend.DATABASE and not (self.database_url or self.db_database):
            msg = "Missing required environment variables: DATABASE_URL or DB_DATABASE"
            raise ValueError(msg)

    @property
    def backend(self) -> LookupBackend:
        """Configured lookup backend."""
        return LookupBackend(self.lookup_backend.lower())

    @cached_property
    def database_config(self) -> DatabaseConfig:
        """Get database configuration."""
        url: str | URL = self.database_url or URL.create(
            "mysql+aiomysql",
            username=self.db_username or None,
            # Passwords copied from .env files sometimes keep their quotes
            password=self.db_password.strip('"') or None,
            host=self.db_host,
            port=self.db_port,
            database=self.db_database or None,
        )
        return DatabaseConfig(
            url=url,
            pool_size=self.db_pool_size,
            pool_timeout=self.db_pool_timeout,
        )

    @cached_property
    def static_schemas(self) -> list[TableSchema]:
        """Fixed candidate tables, empty when tables should be discovered."""
        return [
            TableSchema(name, self.domain_column, self.expire_column)
            for name in self.schema_tables
        ]


def load_settings() -> Settings:
    """Load and validate settings from environment."""
    settings = Settings()
    settings.validate()
    return settings
