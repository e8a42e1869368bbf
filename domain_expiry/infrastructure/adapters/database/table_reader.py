"""SQLAlchemy implementation of the DomainTableReader port."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from sqlalchemy import column, func, or_, select, table

from ....domain.entities import DomainExpiration

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncEngine

    from ....domain.value_objects import TableSchema

logger = logging.getLogger(__name__)


class SqlDomainTableReader:
    """Reads domain rows with parameterized queries against discovered tables."""

    def __init__(self, engine: AsyncEngine) -> None:
        """Initialize with the shared async engine."""
        self._engine = engine

    async def find_first(
        self, schema: TableSchema, search_terms: list[str]
    ) -> DomainExpiration | None:
        """
        Find one row whose domain column matches any search term.

        A row matches if its trimmed domain equals a trimmed term, or its
        stored domain equals a term exactly.
        """
        domain_col = column(schema.domain_column)
        expire_col = column(schema.expire_column)
        stmt = (
            select(domain_col, expire_col)
            .select_from(table(schema.table))
            .where(
                or_(
                    func.trim(domain_col).in_([term.strip() for term in search_terms]),
                    domain_col.in_(search_terms),
                )
            )
            .limit(1)
        )

        async with self._engine.connect() as conn:
            row = (await conn.execute(stmt)).first()

        if row is None:
            return None
        return DomainExpiration(domain_name=row[0], expire_date=row[1])
