"""Domain value objects - Immutable objects defined by their attributes."""

from .check_error_kind import CheckErrorKind
from .lookup_backend import LookupBackend
from .table_schema import TableSchema

__all__ = [
    "CheckErrorKind",
    "LookupBackend",
    "TableSchema",
]
