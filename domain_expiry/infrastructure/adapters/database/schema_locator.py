"""Schema locator implementations."""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING

from sqlalchemy import inspect
from sqlalchemy.exc import SQLAlchemyError

from ....domain.value_objects import TableSchema

if TYPE_CHECKING:
    from sqlalchemy.engine import Connection
    from sqlalchemy.ext.asyncio import AsyncEngine

    from ....application.ports import SchemaLocator

logger = logging.getLogger(__name__)


class IntrospectingSchemaLocator:
    """
    Schema locator that discovers candidate tables by introspection.

    The default table is always tried first, followed by every other table
    in the order the database lists them. Tables lacking either required
    column are left out. Implements the SchemaLocator port.
    """

    def __init__(
        self,
        engine: AsyncEngine,
        *,
        default_table: str = "domains",
        domain_column: str = "domain_name",
        expire_column: str = "expire_date",
    ) -> None:
        """
        Initialize the locator.

        Args:
            engine: Shared async engine.
            default_table: Table name guessed before any discovery.
            domain_column: Column that holds the domain name.
            expire_column: Column that holds the expiration date.
        """
        self._engine = engine
        self._default_table = default_table
        self._domain_column = domain_column
        self._expire_column = expire_column

    async def locate(self) -> list[TableSchema]:
        """Discover candidate tables over a single pooled connection."""
        async with self._engine.connect() as conn:
            return await conn.run_sync(self._discover)

    def _discover(self, conn: Connection) -> list[TableSchema]:
        inspector = inspect(conn)
        candidates = [self._default_table]

        try:
            for name in inspector.get_table_names():
                if name not in candidates:
                    candidates.append(name)
        except SQLAlchemyError as e:
            logger.warning("Could not list tables, using %s only: %s", self._default_table, e)

        schemas: list[TableSchema] = []
        for table in candidates:
            try:
                columns = {c["name"].lower(): c["name"] for c in inspector.get_columns(table)}
            except SQLAlchemyError as e:
                logger.warning("Skipping table %s: %s", table, e)
                continue

            domain_column = columns.get(self._domain_column.lower())
            expire_column = columns.get(self._expire_column.lower())
            if domain_column and expire_column:
                schemas.append(TableSchema(table, domain_column, expire_column))

        logger.debug("Discovered candidate tables: %s", [s.table for s in schemas])
        return schemas


class StaticSchemaLocator:
    """Schema locator that returns a fixed list of tables."""

    def __init__(self, schemas: list[TableSchema]) -> None:
        """Initialize with the tables to search, in order."""
        self._schemas = list(schemas)

    async def locate(self) -> list[TableSchema]:
        """Return the configured tables."""
        return list(self._schemas)


class CachingSchemaLocator:
    """
    Schema locator that caches another locator's result for a while.

    Schema changes are picked up once the TTL runs out.
    """

    def __init__(self, inner: SchemaLocator, ttl_seconds: float) -> None:
        """
        Initialize the cache.

        Args:
            inner: Locator whose result is cached.
            ttl_seconds: How long a discovered list stays valid.
        """
        self._inner = inner
        self._ttl = ttl_seconds
        self._schemas: list[TableSchema] | None = None
        self._expires_at = 0.0

    async def locate(self) -> list[TableSchema]:
        """Return the cached tables, refreshing them when stale."""
        now = time.monotonic()
        if self._schemas is None or now >= self._expires_at:
            self._schemas = await self._inner.locate()
            self._expires_at = now + self._ttl
        return list(self._schemas)

    def invalidate(self) -> None:
        """Drop the cached tables."""
        self._schemas = None
