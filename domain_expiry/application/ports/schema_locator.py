"""Port for locating tables that hold expiration data - driven/secondary port."""

from typing import Protocol

from ...domain.value_objects import TableSchema


class SchemaLocator(Protocol):
    """
    Port for discovering which tables and columns hold domain expirations.

    Implementations may introspect a live store or return a fixed list;
    the lookup only relies on the order of what is returned.
    """

    async def locate(self) -> list[TableSchema]:
        """
        Return candidate tables in the order they should be searched.

        Returns:
            Ordered list of table schemas, each known to have both columns.
        """
        ...
