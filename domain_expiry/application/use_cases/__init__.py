"""Application use cases."""

from .check_domain_expiration import MESSAGES_BY_BACKEND, CheckDomainExpiration, SourceMessages
from .lookup_domain_expiration import LookupDomainExpiration

__all__ = [
    "MESSAGES_BY_BACKEND",
    "CheckDomainExpiration",
    "LookupDomainExpiration",
    "SourceMessages",
]
