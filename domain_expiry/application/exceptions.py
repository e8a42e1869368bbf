"""Application layer exceptions."""

from __future__ import annotations

from ..domain.value_objects import CheckErrorKind


class ApplicationError(Exception):
    """Base exception for application errors."""


class DomainCheckError(ApplicationError):
    """
    Base exception for a failed domain check.

    Carries what was searched so the failure response can echo it back.
    """

    kind: CheckErrorKind = CheckErrorKind.BACKEND_ERROR

    def __init__(
        self,
        message: str,
        *,
        domain_name: str | None = None,
        searched: str | None = None,
        normalized: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.domain_name = domain_name
        self.searched = searched
        self.normalized = normalized


class MissingDomainError(DomainCheckError):
    """Raised when the request carries no domain at all."""

    kind = CheckErrorKind.INVALID_INPUT


class InvalidDomainError(DomainCheckError):
    """Raised when the input is not a domain and nothing matched it as-is."""

    kind = CheckErrorKind.INVALID_INPUT


class DomainNotFoundError(DomainCheckError):
    """Raised when no source has an expiration date for the domain."""

    kind = CheckErrorKind.NOT_FOUND


class InvalidExpirationDataError(DomainCheckError):
    """Raised when a stored expiration value does not parse as a date."""

    kind = CheckErrorKind.INVALID_DATA


class ExpirationBackendError(DomainCheckError):
    """Raised when the expiration source fails outright."""

    kind = CheckErrorKind.BACKEND_ERROR
