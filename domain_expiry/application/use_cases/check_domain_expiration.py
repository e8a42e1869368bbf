"""Use case for checking when a domain expires."""

import logging
from dataclasses import dataclass
from datetime import UTC

from ...domain.entities import DomainExpiration, DomainExpirationReport
from ...domain.services import DomainNormalizer, LocalizedDateFormatter, parse_expiration
from ...domain.value_objects import LookupBackend
from ..exceptions import (
    DomainCheckError,
    DomainNotFoundError,
    ExpirationBackendError,
    InvalidDomainError,
    InvalidExpirationDataError,
    MissingDomainError,
)
from ..ports import ExpirationSource

logger = logging.getLogger(__name__)

MISSING_DOMAIN_MESSAGE = (
    'กรุณาระบุชื่อโดเมนใน query parameter หรือ request body (เช่น { "domain": "example.com" })'
)
INVALID_DOMAIN_MESSAGE = "รูปแบบโดเมนไม่ถูกต้อง กรุณาระบุชื่อโดเมน เช่น example.com"
INVALID_DATA_MESSAGE = "ข้อมูลวันหมดอายุไม่ถูกต้อง"
SUCCESS_MESSAGE = "วันหมดอายุของโดเมน {domain} คือ {date}"


@dataclass(frozen=True, slots=True)
class SourceMessages:
    """Failure messages that name where the lookup went."""

    not_found: str
    backend_error: str


DATABASE_MESSAGES = SourceMessages(
    not_found="ไม่พบข้อมูลวันหมดอายุสำหรับโดเมนนี้ในฐานข้อมูล",
    backend_error="เกิดข้อผิดพลาดในการดึงข้อมูลจากฐานข้อมูล: {error}",
)
WHOIS_MESSAGES = SourceMessages(
    not_found="ไม่พบข้อมูลวันหมดอายุสำหรับโดเมนนี้ หรือโดเมนไม่มีอยู่จริง",
    backend_error="เกิดข้อผิดพลาดในการดึงข้อมูล WHOIS: {error}",
)
MESSAGES_BY_BACKEND = {
    LookupBackend.DATABASE: DATABASE_MESSAGES,
    LookupBackend.WHOIS: WHOIS_MESSAGES,
}


class CheckDomainExpiration:
    """
    Use case for answering "when does this domain expire?".

    Orchestrates normalization, the configured expiration source and date
    formatting into a single report, raising a DomainCheckError subclass
    for every failure.
    """

    def __init__(
        self,
        expiration_source: ExpirationSource,
        normalizer: DomainNormalizer,
        formatter: LocalizedDateFormatter,
        *,
        messages: SourceMessages = DATABASE_MESSAGES,
    ) -> None:
        """
        Initialize the use case.

        Args:
            expiration_source: Adapter (or lookup engine) that finds expirations.
            normalizer: Domain normalizer.
            formatter: Formatter for the localized date string.
            messages: Failure wording for the configured source.
        """
        self._source = expiration_source
        self._normalizer = normalizer
        self._formatter = formatter
        self._messages = messages

    async def execute(self, raw: str | None) -> DomainExpirationReport:
        """
        Check a domain's expiration date.

        Args:
            raw: Domain as supplied by the caller.

        Returns:
            The success report.

        Raises:
            DomainCheckError: With the kind matching the failure.
        """
        if not raw or not raw.strip():
            raise MissingDomainError(MISSING_DOMAIN_MESSAGE)

        # A failed normalization still goes to the source: stored names may
        # be formatted in ways the normalizer rejects.
        normalized = self._normalizer.normalize(raw)
        display_name = normalized or raw
        logger.info("Checking expiration for %r (normalized: %s)", raw, normalized)

        try:
            found = await self._source.lookup(raw, normalized)
        except DomainCheckError:
            raise
        except Exception as e:
            logger.exception("Expiration lookup failed for %r", raw)
            raise ExpirationBackendError(
                self._messages.backend_error.format(error=e),
                domain_name=display_name,
                searched=raw,
                normalized=normalized,
            ) from e

        if found is None or not found.has_expiration:
            if normalized is None:
                raise InvalidDomainError(INVALID_DOMAIN_MESSAGE, domain_name=raw, searched=raw)
            raise DomainNotFoundError(
                self._messages.not_found,
                domain_name=display_name,
                searched=raw,
                normalized=normalized,
            )

        return self._build_report(found, display_name)

    def _build_report(self, found: DomainExpiration, display_name: str) -> DomainExpirationReport:
        """Turn a found record into the success report."""
        expires_at = parse_expiration(found.expire_date)
        if expires_at is None:
            raise InvalidExpirationDataError(INVALID_DATA_MESSAGE, domain_name=display_name)

        iso_date = expires_at.astimezone(UTC).date().isoformat()
        localized = self._formatter.format(expires_at) or iso_date
        domain_name = found.domain_name or display_name

        return DomainExpirationReport(
            domain_name=domain_name,
            expiration_date=iso_date,
            expiration_date_localized=localized,
            message=SUCCESS_MESSAGE.format(domain=domain_name, date=localized),
        )
