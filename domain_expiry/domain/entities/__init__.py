"""Domain entities - Objects with identity and lifecycle."""

from .domain_expiration import DomainExpiration, DomainExpirationReport

__all__ = [
    "DomainExpiration",
    "DomainExpirationReport",
]
