"""
Quote Builder - Transaction Quotes

Builds Quote snapshots for a single conversion. Amounts are rounded toward
positive infinity at each currency's precision: the amount to deduct is
rounded at the "from" precision, the final amount at the "to" precision.

Files that USE this module:
- fxquote.application.rates_service (RatesService.quote)
- fxquote.app (quote command)
- tests.test_quotes (unit tests)

Files that this module USES:
- fxquote.application.rates_service (calculate_rate)
- fxquote.domain.models (Quote, normalize_code)
- fxquote.application.registry (Currencies registry lookups)
- fxquote.shared.money (to_amount, round_up)
"""
from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Optional

from fxquote.application.rates_service import calculate_rate
from fxquote.application.registry import Currencies
from fxquote.domain.errors import MissingRegistryError
from fxquote.domain.models import Quote, normalize_code
from fxquote.shared.money import Amount, round_up, to_amount

log = logging.getLogger(__name__)


def new_quote(
    currencies: Optional[Currencies],
    base_currency: str,
    from_currency: str,
    to_currency: str,
    from_amount: Amount,
    fee: Amount = 0,
    now: Optional[datetime] = None,
) -> Quote:
    """
    Create a quote for converting from_amount of from_currency into to_currency.

    Args:
        currencies: Registry to read rates and precisions from
        base_currency: ISO code rates are quoted against
        from_currency: ISO code the customer pays with
        to_currency: ISO code the customer receives
        from_amount: Amount to convert, before fee
        fee: Fee in from_currency (default: 0)
        now: Quote timestamp (default: current UTC time)

    Returns:
        Quote with amount_to_deduct and final_amount rounded up

    Raises:
        MissingRegistryError: If currencies is None
        BaseCurrencyNotFoundError: If base_currency is not in the registry
        CurrencyNotFoundError: If from_currency or to_currency is not in the registry
        InvalidRateError: If a zero buy rate would be used as a divisor
        ValueError: If from_amount or fee is not a finite number
    """
    if currencies is None:
        raise MissingRegistryError()

    amount = to_amount(from_amount)
    fee_amount = to_amount(fee)

    rate = calculate_rate(currencies, base_currency, from_currency, to_currency)
    info_from = currencies.find_currency(from_currency)
    info_to = currencies.find_currency(to_currency)

    quote = Quote(
        base_currency=normalize_code(base_currency),
        from_currency=normalize_code(from_currency),
        from_amount=amount,
        fee=fee_amount,
        amount_to_deduct=round_up(amount + fee_amount, info_from.precision),
        rate=rate,
        to_currency=normalize_code(to_currency),
        final_amount=round_up(amount * rate, info_to.precision),
        date=now if now is not None else datetime.now(timezone.utc),
    )
    log.debug(
        "Quote %s->%s: deduct %s, receive %s at %s",
        quote.from_currency,
        quote.to_currency,
        quote.amount_to_deduct,
        quote.final_amount,
        quote.rate,
    )
    return quote
