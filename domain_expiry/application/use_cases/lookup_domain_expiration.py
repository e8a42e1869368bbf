"""Use case for finding a domain's expiration across discovered tables."""

import logging

from ...domain.entities import DomainExpiration
from ...domain.services import build_search_terms
from ...domain.value_objects import TableSchema
from ..ports import DomainTableReader, SchemaLocator

logger = logging.getLogger(__name__)


class LookupDomainExpiration:
    """
    Schema-discovery lookup engine.

    Walks the candidate tables in the order the locator returns them and
    stops at the first table with a matching row. There is no scoring and
    no merging across tables. Implements the ExpirationSource port.
    """

    def __init__(self, schema_locator: SchemaLocator, table_reader: DomainTableReader) -> None:
        """
        Initialize the lookup.

        Args:
            schema_locator: Adapter that lists candidate tables.
            table_reader: Adapter that queries one table.
        """
        self._locator = schema_locator
        self._reader = table_reader

    async def lookup(self, raw: str, normalized: str | None) -> DomainExpiration | None:
        """
        Look up a domain using both its raw and normalized forms.

        Returns:
            The first matching row, or None once every table is exhausted.
        """
        terms = build_search_terms(raw, normalized)
        schemas = await self._locator.locate()
        logger.debug("Searching %d candidate tables for %s", len(schemas), terms)

        for schema in schemas:
            found = await self._probe(schema, terms)
            if found is not None:
                logger.info("Found %s in table %s", found.domain_name, schema.table)
                return found

        logger.info("No candidate table matched %s", terms)
        return None

    async def _probe(self, schema: TableSchema, terms: list[str]) -> DomainExpiration | None:
        """Query one table; a failing table counts as a miss."""
        try:
            return await self._reader.find_first(schema, terms)
        except Exception as e:
            logger.warning("Skipping table %s: %s", schema.table, e)
            return None
