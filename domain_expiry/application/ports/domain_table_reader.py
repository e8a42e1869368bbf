"""Port for reading domain rows from a table - driven/secondary port."""

from typing import Protocol

from ...domain.entities import DomainExpiration
from ...domain.value_objects import TableSchema


class DomainTableReader(Protocol):
    """Port for querying a single candidate table."""

    async def find_first(
        self, schema: TableSchema, search_terms: list[str]
    ) -> DomainExpiration | None:
        """
        Find the first row whose domain column matches any search term.

        Args:
            schema: Table and columns to query.
            search_terms: Values compared against the stored domain name,
                both trimmed and untrimmed.

        Returns:
            The matching row, or None if the table has no match.

        Raises:
            Exception: Any driver error; callers decide whether it is fatal.
        """
        ...
