"""Infrastructure adapters - Implementations of application ports."""

from .database import (
    CachingSchemaLocator,
    IntrospectingSchemaLocator,
    SqlDomainTableReader,
    StaticSchemaLocator,
    create_database_engine,
)
from .whois import WhoisExpirationSource

__all__ = [
    "CachingSchemaLocator",
    "IntrospectingSchemaLocator",
    "SqlDomainTableReader",
    "StaticSchemaLocator",
    "WhoisExpirationSource",
    "create_database_engine",
]
