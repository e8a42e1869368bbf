"""Domain service for turning free-form input into a registrable domain."""

from __future__ import annotations

import logging
import re
from urllib.parse import urlsplit

import tldextract

logger = logging.getLogger(__name__)

_ALLOWED = re.compile(r"^[a-z0-9.-]+$")
_SCHEMES = ("http://", "https://")


def _offline_extractor() -> tldextract.TLDExtract:
    """Public suffix lookup backed by the snapshot bundled with tldextract."""
    return tldextract.TLDExtract(
        suffix_list_urls=(),
        include_psl_private_domains=True,
    )


class DomainNormalizer:
    """
    Normalizes user input into a canonical registrable domain name.

    Each step is a hard gate: the first one that fails makes the whole
    normalization return None.
    """

    def __init__(self, extractor: tldextract.TLDExtract | None = None) -> None:
        """
        Initialize the normalizer.

        Args:
            extractor: Public suffix extractor. Defaults to an offline
                extractor that never fetches the list over the network.
        """
        self._extract = extractor or _offline_extractor()

    def normalize(self, raw: object) -> str | None:
        """
        Normalize a raw domain string.

        Args:
            raw: Value supplied by the caller.

        Returns:
            The registrable domain, the validated host when no public suffix
            applies, or None if the input is not a usable domain.
        """
        if not raw or not isinstance(raw, str):
            return None

        value = raw.strip()
        if not value:
            return None

        if value.startswith(_SCHEMES):
            value = self._hostname(value)
            if value is None:
                return None

        for separator in ("/", "?", "#"):
            value = value.split(separator, 1)[0]

        value = value.lower()
        value = value.removesuffix(".")

        if not _ALLOWED.match(value) or "." not in value:
            return None

        return self._registrable_domain(value) or value

    @staticmethod
    def _hostname(url: str) -> str | None:
        """Hostname of an absolute URL, or None if the URL is malformed."""
        try:
            parts = urlsplit(url)
            parts.port  # noqa: B018 - raises on a non-numeric or out-of-range port
        except ValueError:
            logger.debug("Malformed URL rejected: %s", url)
            return None
        return parts.hostname or None

    def _registrable_domain(self, host: str) -> str | None:
        """Public suffix plus one label, when the suffix list knows the host."""
        ext = self._extract(host)
        if ext.domain and ext.suffix:
            return f"{ext.domain}.{ext.suffix}"
        return None
