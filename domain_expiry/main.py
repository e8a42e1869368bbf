#!/usr/bin/env python3
"""
Domain Expiry API

Composition root and application entry point.
Wires together all layers following hexagonal architecture principles.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from . import __version__
from .application.use_cases import MESSAGES_BY_BACKEND, CheckDomainExpiration, LookupDomainExpiration
from .domain.services import DomainNormalizer, LocalizedDateFormatter
from .domain.value_objects import LookupBackend
from .infrastructure.adapters import (
    CachingSchemaLocator,
    IntrospectingSchemaLocator,
    SqlDomainTableReader,
    StaticSchemaLocator,
    WhoisExpirationSource,
    create_database_engine,
)
from .infrastructure.config import Settings, load_settings

if TYPE_CHECKING:
    from fastapi import FastAPI
    from sqlalchemy.ext.asyncio import AsyncEngine

    from .application.ports import ExpirationSource, SchemaLocator

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)
logger = logging.getLogger(__name__)


class ApplicationContainer:
    """
    Dependency injection container.

    Responsible for creating and wiring all application components.
    """

    def __init__(self, settings: Settings) -> None:
        """Initialize container with settings."""
        self._settings = settings
        self._engine: AsyncEngine | None = None

    @property
    def engine(self) -> AsyncEngine:
        """Shared database engine, created on first use."""
        if self._engine is None:
            self._engine = create_database_engine(self._settings.database_config)
        return self._engine

    def create_schema_locator(self) -> SchemaLocator:
        """Create the schema locator adapter."""
        locator: SchemaLocator
        if self._settings.static_schemas:
            logger.info("Using configured tables: %s", self._settings.schema_tables)
            locator = StaticSchemaLocator(self._settings.static_schemas)
        else:
            locator = IntrospectingSchemaLocator(
                self.engine,
                default_table=self._settings.default_table,
                domain_column=self._settings.domain_column,
                expire_column=self._settings.expire_column,
            )

        if self._settings.schema_cache_seconds > 0:
            logger.info("Caching discovered tables for %ss", self._settings.schema_cache_seconds)
            locator = CachingSchemaLocator(locator, self._settings.schema_cache_seconds)
        return locator

    def create_expiration_source(self) -> ExpirationSource:
        """Create the expiration source for the configured backend."""
        match self._settings.backend:
            case LookupBackend.WHOIS:
                return WhoisExpirationSource()
            case LookupBackend.DATABASE:
                return LookupDomainExpiration(
                    schema_locator=self.create_schema_locator(),
                    table_reader=SqlDomainTableReader(self.engine),
                )

    def create_check_use_case(self) -> CheckDomainExpiration:
        """Create the main use case with all dependencies."""
        return CheckDomainExpiration(
            expiration_source=self.create_expiration_source(),
            normalizer=DomainNormalizer(),
            formatter=LocalizedDateFormatter(
                timezone=self._settings.display_timezone,
                locale=self._settings.display_locale,
            ),
            messages=MESSAGES_BY_BACKEND[self._settings.backend],
        )

    async def close(self) -> None:
        """Release the connection pool."""
        if self._engine is not None:
            await self._engine.dispose()
            logger.info("Database pool closed")


def create_api(settings: Settings) -> FastAPI:
    """Build the FastAPI app for the given settings."""
    from .infrastructure.adapters.api import create_app

    container = ApplicationContainer(settings)
    use_case = container.create_check_use_case()
    logger.info("Lookup backend: %s", settings.backend)

    return create_app(
        check_func=use_case.execute,
        version=__version__,
        domain_fields=settings.domain_fields,
        webhook_paths=settings.webhook_paths,
        cors_origins=settings.cors_origins,
        shutdown_hooks=[container.close],
    )


def run_api(settings: Settings) -> None:
    """Run in API server mode."""
    import uvicorn

    logger.info("Starting API server on %s:%d", settings.api_host, settings.api_port)
    for path in settings.webhook_paths:
        logger.info("Webhook URL: http://localhost:%d%s", settings.api_port, path)

    uvicorn.run(
        create_api(settings),
        host=settings.api_host,
        port=settings.api_port,
        log_level=settings.log_level.lower(),
    )


def main() -> None:
    """Main entry point."""
    load_dotenv()
    try:
        logger.info("Domain Expiry API starting...")

        settings = load_settings()
        logging.getLogger().setLevel(settings.log_level.upper())

        run_api(settings)

    except ValueError as e:
        logger.error("Configuration error: %s", e)
        sys.exit(1)
    except KeyboardInterrupt:
        logger.info("Shutting down...")
    except Exception:
        logger.exception("Unexpected error")
        sys.exit(1)


if __name__ == "__main__":
    main()
