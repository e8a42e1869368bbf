"""Tests for the WHOIS expiration source."""

from __future__ import annotations

from datetime import datetime

import pytest
from whois.parser import PywhoisError

from domain_expiry.infrastructure.adapters.whois import WhoisExpirationSource


class FakeWhois:
    """Stands in for whois.whois."""

    def __init__(self, record: dict | None = None, error: Exception | None = None) -> None:
        self.record = record
        self.error = error
        self.queried: list[str] = []

    def __call__(self, domain: str) -> dict | None:
        self.queried.append(domain)
        if self.error is not None:
            raise self.error
        return self.record


class TestWhoisExpirationSource:
    """Tests for WhoisExpirationSource."""

    async def test_unnormalized_domain_not_queried(self) -> None:
        """A domain that failed normalization should not hit WHOIS."""
        query = FakeWhois({"expiration_date": datetime(2030, 1, 15)})  # noqa: DTZ001

        assert await WhoisExpirationSource(query).lookup("xn--zzz", None) is None
        assert query.queried == []

    async def test_queries_normalized_domain(self) -> None:
        """WHOIS should be asked about the normalized domain."""
        expires = datetime(2030, 1, 15, 4, 0)  # noqa: DTZ001
        query = FakeWhois({"expiration_date": expires})

        result = await WhoisExpirationSource(query).lookup("https://www.example.com", "example.com")

        assert query.queried == ["example.com"]
        assert result is not None
        assert result.domain_name == "example.com"
        assert result.expire_date == expires

    async def test_first_of_several_dates(self) -> None:
        """Registrars that report several dates should yield the first."""
        first = datetime(2030, 1, 15)  # noqa: DTZ001
        query = FakeWhois({"expiration_date": [first, datetime(2030, 1, 16)]})  # noqa: DTZ001

        result = await WhoisExpirationSource(query).lookup("example.com", "example.com")

        assert result is not None
        assert result.expire_date == first

    async def test_record_without_date(self) -> None:
        """A record with no expiration date should be not found."""
        query = FakeWhois({"expiration_date": None})
        assert await WhoisExpirationSource(query).lookup("example.com", "example.com") is None

    async def test_unknown_domain(self) -> None:
        """WHOIS reporting no such domain should be not found."""
        query = FakeWhois(error=PywhoisError("No match for domain"))
        assert await WhoisExpirationSource(query).lookup("nope.com", "nope.com") is None

    async def test_other_errors_propagate(self) -> None:
        """Network failures should propagate to the use case."""
        query = FakeWhois(error=ConnectionResetError("whois server closed"))
        with pytest.raises(ConnectionResetError):
            await WhoisExpirationSource(query).lookup("example.com", "example.com")
