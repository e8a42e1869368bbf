"""Lookup backend value object."""

from enum import StrEnum, auto


class LookupBackend(StrEnum):
    """Where expiration dates are looked up."""

    DATABASE = auto()
    WHOIS = auto()

    def __str__(self) -> str:
        return self.value
