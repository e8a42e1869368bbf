"""Live WHOIS implementation of the ExpirationSource port."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from typing import Any

import whois
from whois.parser import PywhoisError

from ....domain.entities import DomainExpiration

logger = logging.getLogger(__name__)


class WhoisExpirationSource:
    """
    Expiration source that queries WHOIS for the normalized domain.

    WHOIS needs a real registrable name, so a domain that failed
    normalization is never looked up.
    """

    def __init__(self, query: Callable[[str], Any] = whois.whois) -> None:
        """
        Initialize the source.

        Args:
            query: Blocking WHOIS query function, run in a worker thread.
        """
        self._query = query

    async def lookup(self, raw: str, normalized: str | None) -> DomainExpiration | None:
        """Look up the registry expiration date of ``normalized``."""
        if normalized is None:
            return None

        try:
            record = await asyncio.to_thread(self._query, normalized)
        except PywhoisError:
            logger.info("WHOIS has no record for %s", normalized)
            return None

        expires = self._first_expiration(record)
        if expires is None:
            logger.info("WHOIS record for %s has no expiration date", normalized)
            return None
        return DomainExpiration(domain_name=normalized, expire_date=expires)

    @staticmethod
    def _first_expiration(record: Any) -> Any:
        """Registrars may report several expiration dates; take the first."""
        if record is None:
            return None
        value = record.get("expiration_date") if hasattr(record, "get") else None
        if isinstance(value, list):
            value = next((v for v in value if v), None)
        return value or None
