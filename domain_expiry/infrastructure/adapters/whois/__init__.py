"""WHOIS adapter."""

from .source import WhoisExpirationSource

__all__ = ["WhoisExpirationSource"]
