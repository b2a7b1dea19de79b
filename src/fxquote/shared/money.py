"""Money / rounding helpers.

Centralized so the quote builder and the formatter share identical
conversion and rounding semantics.
"""

from __future__ import annotations

from decimal import ROUND_CEILING, Decimal, InvalidOperation, localcontext
from typing import Union

Amount = Union[Decimal, int, str, float]


def to_amount(value: Amount) -> Decimal:
    """
    Coerce a monetary value to Decimal.

    Floats go through str() so 0.1 becomes Decimal("0.1").

    Raises:
        ValueError: If value is not a finite number
    """
    if isinstance(value, Decimal):
        result = value
    else:
        try:
            result = Decimal(str(value).strip())
        except InvalidOperation as e:
            raise ValueError(f"invalid amount: {value!r}") from e
    if not result.is_finite():
        raise ValueError(f"invalid amount: {value!r}")
    return result


def round_up(value: Decimal, precision: int) -> Decimal:
    """Round toward positive infinity at the given number of decimal places."""
    # quantize fails when the result needs more digits than the context holds
    digits = max(value.adjusted(), 0) + precision + 2
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, digits)
        return value.quantize(Decimal(1).scaleb(-precision), rounding=ROUND_CEILING)
