"""Domain expiration entities."""

from dataclasses import dataclass
from datetime import date, datetime


@dataclass(frozen=True, slots=True)
class DomainExpiration:
    """A domain name paired with the expiration value found for it.

    ``expire_date`` is kept exactly as the source returned it (a date,
    datetime or string); parsing happens when the report is built.
    """

    domain_name: str | None
    expire_date: date | datetime | str | None

    @property
    def has_expiration(self) -> bool:
        """Check if an expiration value is present at all."""
        if isinstance(self.expire_date, str):
            return bool(self.expire_date.strip())
        return self.expire_date is not None


@dataclass(frozen=True, slots=True)
class DomainExpirationReport:
    """Successful outcome of a domain check."""

    domain_name: str
    expiration_date: str
    expiration_date_localized: str
    message: str
