"""Pytest configuration and shared fixtures."""

from __future__ import annotations

from collections.abc import AsyncIterator
from datetime import date, datetime
from pathlib import Path

import pytest
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from domain_expiry.domain.entities import DomainExpiration
from domain_expiry.domain.services import DomainNormalizer, LocalizedDateFormatter
from domain_expiry.domain.value_objects import TableSchema

Row = tuple[str, date | datetime | str | None]


class InMemoryTableReader:
    """DomainTableReader fake backed by plain lists of rows."""

    def __init__(
        self,
        tables: dict[str, list[Row]] | None = None,
        failing: set[str] | None = None,
    ) -> None:
        self.tables = tables or {}
        self.failing = failing or set()
        self.queried: list[str] = []
        self.search_terms: list[list[str]] = []

    async def find_first(
        self, schema: TableSchema, search_terms: list[str]
    ) -> DomainExpiration | None:
        self.queried.append(schema.table)
        self.search_terms.append(list(search_terms))
        if schema.table in self.failing:
            msg = f"Table '{schema.table}' doesn't exist"
            raise RuntimeError(msg)

        trimmed = {term.strip() for term in search_terms}
        for domain_name, expire_date in self.tables.get(schema.table, []):
            if domain_name.strip() in trimmed or domain_name in search_terms:
                return DomainExpiration(domain_name=domain_name, expire_date=expire_date)
        return None


@pytest.fixture(scope="session")
def normalizer() -> DomainNormalizer:
    """Offline domain normalizer."""
    return DomainNormalizer()


@pytest.fixture
def formatter() -> LocalizedDateFormatter:
    """Formatter with the default Bangkok timezone and Thai locale."""
    return LocalizedDateFormatter()


@pytest.fixture
async def sqlite_engine(tmp_path: Path) -> AsyncIterator[AsyncEngine]:
    """Async engine over an empty file-backed SQLite database."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'domains.db'}")
    yield engine
    await engine.dispose()


async def create_domain_table(
    engine: AsyncEngine,
    name: str,
    rows: list[Row],
    *,
    domain_column: str = "domain_name",
    expire_column: str = "expire_date",
) -> None:
    """Create a table with domain and expiration columns and fill it."""
    async with engine.begin() as conn:
        await conn.execute(
            text(
                f'CREATE TABLE "{name}" '
                f"(id INTEGER PRIMARY KEY, {domain_column} TEXT, {expire_column} TEXT)"
            )
        )
        for domain_name, expire_date in rows:
            await conn.execute(
                text(f'INSERT INTO "{name}" ({domain_column}, {expire_column}) VALUES (:d, :e)'),
                {"d": domain_name, "e": expire_date},
            )
