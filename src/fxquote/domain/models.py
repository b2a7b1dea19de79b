"""
Domain Models - Currency and Quote Value Objects

This module contains the value objects of the converter:
- Currency records held by the registry
- Quotes produced for a single conversion

Both are frozen pydantic models. Field names serialize in camelCase
(isoCode, buyRate, amountToDeduct, ...) for logging or transport by callers.

Files that USE this module:
- fxquote.application.* (registry, rate calculator and quote builder)
- fxquote.adapters.formatting.formatter (renders currencies and quotes)
- tests.* (tests use domain models for test data)

Files that this module USES:
- pydantic (validation and camelCase serialization)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

from datetime import datetime  # Date/time utilities for quote timestamps
from decimal import Decimal  # Exact decimal arithmetic for rates and amounts
from typing import Any  # Type hints for JSON-ready dictionaries

from pydantic import BaseModel, ConfigDict, Field, field_validator  # Data validation and field configuration
from pydantic.alias_generators import to_camel  # iso_code -> isoCode


def normalize_code(code: str) -> str:
    """Upper-case an ISO code and drop surrounding whitespace."""
    return code.strip().upper()


def to_decimal(value: Any) -> Any:
    """
    Convert floats to Decimal through their string form.

    Decimal(0.85) would carry the binary float error; Decimal("0.85") does
    not. Values of any other type are returned untouched.
    """
    if isinstance(value, float):
        return Decimal(str(value))
    return value


class Currency(BaseModel):
    """
    A currency known to the registry.

    Attributes:
        iso_code: ISO code (e.g. "USD"), compared after normalize_code
        precision: Decimal places used when rounding amounts in this currency
        buy_rate: Price at which the registry owner buys one unit, in base terms
        sell_rate: Price at which the registry owner sells one unit, in base terms
    """
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
    )

    iso_code: str = Field(min_length=1)
    precision: int = Field(default=0, ge=0)
    buy_rate: Decimal = Decimal(0)
    sell_rate: Decimal = Decimal(0)

    @field_validator("buy_rate", "sell_rate", mode="before")
    @classmethod
    def _float_via_str(cls, v: Any) -> Any:
        return to_decimal(v)

    def matches(self, code: str) -> bool:
        """Return True if code names this currency, ignoring case."""
        return normalize_code(self.iso_code) == normalize_code(code)


class Quote(BaseModel):
    """
    Snapshot of one conversion computation.

    Attributes:
        base_currency: Base currency the rate was computed against
        from_currency: Currency the customer pays with
        from_amount: Amount to convert, before fee
        fee: Fee charged in the "from" currency
        amount_to_deduct: from_amount + fee, rounded up at the "from" precision
        rate: Exchange rate used (unrounded)
        to_currency: Currency the customer receives
        final_amount: from_amount * rate, rounded up at the "to" precision
        date: When the quote was created
    """
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    base_currency: str
    from_currency: str
    from_amount: Decimal
    fee: Decimal
    amount_to_deduct: Decimal
    rate: Decimal
    to_currency: str
    final_amount: Decimal = Field(alias="totalAmount")
    date: datetime

    def to_json(self) -> dict[str, Any]:
        """
        Convert the quote to a JSON-serializable dictionary.

        Returns:
            Dictionary keyed by camelCase field names, decimals as strings
            and the date in ISO-8601 format
        """
        return self.model_dump(mode="json", by_alias=True)
