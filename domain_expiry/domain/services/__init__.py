"""Domain services - Stateless operations on domain objects."""

from .date_formatter import LocalizedDateFormatter, parse_expiration
from .domain_normalizer import DomainNormalizer
from .search_terms import build_search_terms

__all__ = [
    "DomainNormalizer",
    "LocalizedDateFormatter",
    "build_search_terms",
    "parse_expiration",
]
