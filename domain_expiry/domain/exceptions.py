"""Domain exceptions."""


class DomainError(Exception):
    """Base exception for domain errors."""


class InvalidTableSchemaError(DomainError):
    """Raised when a table schema is missing a table or column name."""
