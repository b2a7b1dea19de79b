"""
Application Layer - Use Cases and Services

This package contains the currency registry, the rate calculator and the
quote builder. No I/O: everything here is in-process computation.
"""

from fxquote.application.registry import Currencies, to_currency
from fxquote.application.rates_service import RatesService, calculate_rate
from fxquote.application.quotes import new_quote

__all__ = [
    "Currencies",
    "to_currency",
    "RatesService",
    "calculate_rate",
    "new_quote",
]
