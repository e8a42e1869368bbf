"""Application ports - Interfaces for external adapters."""

from .domain_table_reader import DomainTableReader
from .expiration_source import ExpirationSource
from .schema_locator import SchemaLocator

__all__ = [
    "DomainTableReader",
    "ExpirationSource",
    "SchemaLocator",
]
