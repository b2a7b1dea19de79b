"""
Domain Errors - Conversion and Registry Exceptions

This module defines domain-specific exceptions raised by the currency
registry, the rate calculator and the quote builder. Every error carries an
ErrorKind tag plus structured fields (e.g. the offending ISO code), so
callers can branch on kind rather than on message text.

Files that USE this module:
- fxquote.application.registry (raises EmptySourceError, InvalidSourceError, CurrencyNotFoundError)
- fxquote.application.rates_service (raises BaseCurrencyNotFoundError, InvalidRateError)
- fxquote.application.quotes (raises MissingRegistryError)
- fxquote.app (catches DomainError to report CLI failures)

Files that this module USES:
- None (pure domain layer, no external dependencies)
"""
from __future__ import annotations

from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    """Tag identifying the kind of a domain error."""
    EMPTY_SOURCE = "empty_source"
    CURRENCY_NOT_FOUND = "currency_not_found"
    BASE_CURRENCY_NOT_FOUND = "base_currency_not_found"
    INVALID_SOURCE = "invalid_source"
    MISSING_REGISTRY = "missing_registry"
    INVALID_RATE = "invalid_rate"


class DomainError(Exception):
    """Base exception for domain errors."""
    kind: ErrorKind


class EmptySourceError(DomainError):
    """Raised when a currency source (or registry) holds no records."""
    kind = ErrorKind.EMPTY_SOURCE

    def __init__(self) -> None:
        super().__init__("empty currency source: no rates or currency")


class CurrencyNotFoundError(DomainError):
    """Raised when a requested ISO code is absent from the registry."""
    kind = ErrorKind.CURRENCY_NOT_FOUND

    def __init__(self, code: str) -> None:
        self.code = code
        super().__init__(f"currency {code} not found")


class BaseCurrencyNotFoundError(DomainError):
    """
    Raised when the designated base currency is absent from the registry.

    Kept apart from CurrencyNotFoundError so a misconfigured base can be told
    apart from a bad user-supplied code.
    """
    kind = ErrorKind.BASE_CURRENCY_NOT_FOUND

    def __init__(self, code: str) -> None:
        self.code = code
        super().__init__("base currency not found")


class InvalidSourceError(DomainError):
    """Raised when a source record cannot be converted to a Currency."""
    kind = ErrorKind.INVALID_SOURCE

    def __init__(self, reason: str, index: Optional[int] = None) -> None:
        self.reason = reason
        self.index = index
        where = f" at index {index}" if index is not None else ""
        super().__init__(f"invalid currency source{where}: {reason}")


class MissingRegistryError(DomainError):
    """Raised when a quote is requested without a currency registry."""
    kind = ErrorKind.MISSING_REGISTRY

    def __init__(self) -> None:
        super().__init__("currency registry is missing")


class InvalidRateError(DomainError):
    """Raised when a rate cannot be used as a divisor (zero buy rate)."""
    kind = ErrorKind.INVALID_RATE

    def __init__(self, code: str) -> None:
        self.code = code
        super().__init__(f"currency {code} has a zero buy rate")
