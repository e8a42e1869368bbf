"""Table schema value object."""

from dataclasses import dataclass

from ..exceptions import InvalidTableSchemaError


@dataclass(frozen=True, slots=True)
class TableSchema:
    """A table known to hold domain names and their expiration dates."""

    table: str
    domain_column: str = "domain_name"
    expire_column: str = "expire_date"

    def __post_init__(self) -> None:
        """Reject blank identifiers."""
        if not (self.table and self.domain_column and self.expire_column):
            msg = (
                f"Table schema needs a table and both columns, got "
                f"table={self.table!r} domain_column={self.domain_column!r} "
                f"expire_column={self.expire_column!r}"
            )
            raise InvalidTableSchemaError(msg)
