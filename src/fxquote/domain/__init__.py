"""
Domain Layer - Pure Business Objects

This package contains domain models and domain errors.
No dependencies on infrastructure or external systems.
"""

from fxquote.domain.models import (
    Currency,
    Quote,
    normalize_code,
)
from fxquote.domain.errors import (
    BaseCurrencyNotFoundError,
    CurrencyNotFoundError,
    DomainError,
    EmptySourceError,
    ErrorKind,
    InvalidRateError,
    InvalidSourceError,
    MissingRegistryError,
)

__all__ = [
    "Currency",
    "Quote",
    "normalize_code",
    "DomainError",
    "ErrorKind",
    "EmptySourceError",
    "CurrencyNotFoundError",
    "BaseCurrencyNotFoundError",
    "InvalidSourceError",
    "MissingRegistryError",
    "InvalidRateError",
]
