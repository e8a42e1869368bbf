"""Port for expiration lookups - driven/secondary port."""

from typing import Protocol

from ...domain.entities import DomainExpiration


class ExpirationSource(Protocol):
    """Port for anything that can answer "when does this domain expire?"."""

    async def lookup(self, raw: str, normalized: str | None) -> DomainExpiration | None:
        """
        Look up the expiration of a domain.

        Args:
            raw: Domain exactly as the caller supplied it.
            normalized: Normalized registrable domain, or None if the raw
                value could not be normalized.

        Returns:
            The expiration record, or None if the domain is unknown.
        """
        ...
