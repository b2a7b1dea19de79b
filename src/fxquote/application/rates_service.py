"""
Rates Service - Exchange Rate Calculation

This module contains the core business logic for exchange rates. Rates are
quoted from the registry owner's side: it sells a currency at its sell rate
and buys it back at its buy rate, both relative to the base currency. Rates
between two non-base currencies chain the two single hops through the base.

Files that USE this module:
- fxquote.application.quotes (new_quote uses calculate_rate)
- fxquote.app (RatesService for the CLI commands)
- tests.test_rates_service (unit tests)

Files that this module USES:
- fxquote.application.registry (Currencies registry lookups)
- fxquote.application.quotes (RatesService.quote builds quotes)
- fxquote.domain.errors (BaseCurrencyNotFoundError, InvalidRateError)
- fxquote.domain.models (Currency, Quote, normalize_code)
"""
from __future__ import annotations  # Enable postponed evaluation of annotations

from datetime import datetime, timezone  # Date/time utilities for quote timestamps
from decimal import Decimal  # Exact decimal arithmetic for rates
from typing import Callable, Optional  # Type hints for clock collaborator and optional values

from fxquote.application.registry import Currencies  # Registry the rates are read from
from fxquote.domain.errors import (
    BaseCurrencyNotFoundError,  # Base currency missing from the registry
    CurrencyNotFoundError,  # Lookup failure to translate for the base
    EmptySourceError,  # Registry holds no currencies
    InvalidRateError,  # Zero buy rate used as a divisor
)
from fxquote.domain.models import Currency, Quote, normalize_code  # Domain models and code normalization
from fxquote.shared.money import Amount  # Accepted monetary input types

ONE = Decimal(1)


def _inverse_buy_rate(currency: Currency) -> Decimal:
    """Rate for selling one unit of currency back to the base: 1 / buy rate."""
    if currency.buy_rate == 0:
        raise InvalidRateError(currency.iso_code)
    return ONE / currency.buy_rate


def calculate_rate(currencies: Currencies, base_currency: str, from_currency: str, to_currency: str) -> Decimal:
    """
    Calculate the exchange rate between two currencies.

    Same currency:
        from == to, rate is 1 (no lookups, the base is not checked either)
    Base to target:
        from == base, rate is the sell rate of to
    Target to base:
        to == base, rate is 1 / buy rate of from
    Cross rate:
        neither is the base, rate is (1 / buy rate of from) * sell rate of to

    Args:
        currencies: Registry to read rates from
        base_currency: ISO code rates are quoted against
        from_currency: ISO code the customer has
        to_currency: ISO code the customer wants

    Returns:
        Exchange rate as an unrounded Decimal

    Raises:
        BaseCurrencyNotFoundError: If base_currency is not in the registry
        CurrencyNotFoundError: If from_currency or to_currency is not in the registry
        InvalidRateError: If a zero buy rate would be used as a divisor
    """
    base = normalize_code(base_currency)
    from_code = normalize_code(from_currency)
    to_code = normalize_code(to_currency)

    if from_code == to_code:
        return ONE

    try:
        currencies.find_currency(base)
    except (CurrencyNotFoundError, EmptySourceError):
        raise BaseCurrencyNotFoundError(base) from None

    if from_code == base:
        return currencies.find_currency(to_code).sell_rate

    if to_code == base:
        return _inverse_buy_rate(currencies.find_currency(from_code))

    source = currencies.find_currency(from_code)
    target = currencies.find_currency(to_code)
    return _inverse_buy_rate(source) * target.sell_rate


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class RatesService:
    """
    High-level service binding a registry to a configured base currency.
    """
    def __init__(
        self,
        currencies: Currencies,
        base_currency: str,
        clock: Callable[[], datetime] = _utc_now,
    ):
        """
        Initialize rates service.

        Args:
            currencies: Registry to read rates from
            base_currency: ISO code all rates are quoted against
            clock: Returns the timestamp stamped on new quotes
        """
        self.currencies = currencies
        self.base_currency = normalize_code(base_currency)
        self.clock = clock

    def rate(self, from_currency: str, to_currency: str) -> Decimal:
        """Exchange rate from from_currency to to_currency against the configured base."""
        return calculate_rate(self.currencies, self.base_currency, from_currency, to_currency)

    def quote(
        self,
        from_currency: str,
        to_currency: str,
        amount: Amount,
        fee: Amount = 0,
        now: Optional[datetime] = None,
    ) -> Quote:
        """
        Build a quote against the configured base.

        Args:
            from_currency: ISO code the customer pays with
            to_currency: ISO code the customer receives
            amount: Amount to convert
            fee: Fee in from_currency (default: 0)
            now: Quote timestamp (default: the service clock)

        Returns:
            Quote for the conversion
        """
        from fxquote.application.quotes import new_quote

        return new_quote(
            self.currencies,
            self.base_currency,
            from_currency,
            to_currency,
            amount,
            fee,
            now=now if now is not None else self.clock(),
        )
