"""
Formatter - Text Formatting and Presentation

This module handles text formatting for the command-line output: single
rates, full quotes and the list of loaded currencies.

Files that USE this module:
- fxquote.app (prints rates, quotes and currency lists)
- tests.test_formatter (unit tests)

Files that this module USES:
- fxquote.domain.models (Currency and Quote value objects, normalize_code)
"""
from __future__ import annotations

from decimal import Decimal
from typing import Iterable, List

from fxquote.domain.models import Currency, Quote, normalize_code


def _fmt_decimal(value: Decimal, decimals: int) -> str:
    """Format a decimal with a fixed number of places, no exponent."""
    return f"{value:.{decimals}f}"


def format_rate(from_currency: str, to_currency: str, rate: Decimal, decimals: int = 6) -> str:
    """
    Format an exchange rate as one line.

    Args:
        from_currency: ISO code converted from
        to_currency: ISO code converted to
        rate: Units of to_currency per unit of from_currency
        decimals: Number of decimal places (default: 6)

    Returns:
        Formatted string, e.g. "1 USD = 0.950000 EUR"
    """
    return f"1 {normalize_code(from_currency)} = {_fmt_decimal(rate, decimals)} {normalize_code(to_currency)}"


def format_quote(quote: Quote, rate_decimals: int = 6) -> str:
    """
    Format a quote as plain text lines.

    Args:
        quote: Quote to format
        rate_decimals: Decimal places shown for the rate (default: 6)

    Returns:
        Multi-line string with amounts, fee, rate and timestamp
    """
    lines: List[str] = [
        f"Quote {quote.from_currency} -> {quote.to_currency} (base {quote.base_currency})",
        f"- Amount: {quote.from_amount} {quote.from_currency}",
        f"- Fee: {quote.fee} {quote.from_currency}",
        f"- To deduct: {quote.amount_to_deduct} {quote.from_currency}",
        f"- Rate: {_fmt_decimal(quote.rate, rate_decimals)}",
        f"- You receive: {quote.final_amount} {quote.to_currency}",
        f"- Date: {quote.date.strftime('%Y-%m-%d %H:%M:%S %Z').strip()}",
    ]
    return "\n".join(lines)


def currency_lines(currencies: Iterable[Currency]) -> str:
    """
    Format currencies as a table-like list, one per line.

    Returns:
        Lines of "CODE  precision=N  buy=X  sell=Y"
    """
    return "\n".join(
        f"{c.iso_code:<4} precision={c.precision}  buy={c.buy_rate}  sell={c.sell_rate}"
        for c in currencies
    )
