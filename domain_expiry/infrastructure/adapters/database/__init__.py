"""Relational store adapters built on SQLAlchemy."""

from .engine import DatabaseConfig, create_database_engine
from .schema_locator import CachingSchemaLocator, IntrospectingSchemaLocator, StaticSchemaLocator
from .table_reader import SqlDomainTableReader

__all__ = [
    "CachingSchemaLocator",
    "DatabaseConfig",
    "IntrospectingSchemaLocator",
    "SqlDomainTableReader",
    "StaticSchemaLocator",
    "create_database_engine",
]
