"""
Currency Registry - Ordered, Immutable Collection of Currencies

This module holds the registry the rate calculator and quote builder read
from. A registry is built once from any iterable of currency-shaped records
and never changes afterwards, so it can be shared between threads without
locking.

Files that USE this module:
- fxquote.application.rates_service (calculate_rate looks currencies up here)
- fxquote.application.quotes (new_quote looks up precisions here)
- fxquote.app (builds the registry from settings or the sample set)
- tests.test_registry (unit tests)

Files that this module USES:
- fxquote.domain.models (Currency model)
- fxquote.domain.errors (EmptySourceError, InvalidSourceError, CurrencyNotFoundError)
"""
from __future__ import annotations

import dataclasses
import logging
from collections.abc import Iterable, Iterator, Mapping
from typing import Any, Optional

from pydantic import BaseModel, ValidationError

from fxquote.domain.errors import CurrencyNotFoundError, EmptySourceError, InvalidSourceError
from fxquote.domain.models import Currency

log = logging.getLogger(__name__)

# Source keys are matched case-insensitively with underscores removed, so
# "isoCode", "iso_code" and "ISOCode" all land on the same field.
_FIELD_NAMES = {
    "isocode": "iso_code",
    "precision": "precision",
    "buyrate": "buy_rate",
    "sellrate": "sell_rate",
}


def _as_mapping(record: Any) -> Mapping[str, Any]:
    """Expose a record's fields as a mapping, or raise TypeError."""
    if isinstance(record, Mapping):
        return record
    if isinstance(record, BaseModel):
        return record.model_dump()
    if dataclasses.is_dataclass(record) and not isinstance(record, type):
        return dataclasses.asdict(record)
    if hasattr(record, "_asdict"):  # namedtuple
        return record._asdict()
    if isinstance(record, (str, bytes)) or not hasattr(record, "__dict__"):
        raise TypeError(f"cannot read currency fields from {type(record).__name__}")
    return vars(record)


def to_currency(record: Any) -> Currency:
    """
    Map one source record onto a Currency.

    Args:
        record: A Currency, mapping, pydantic model, dataclass, namedtuple or
            plain object carrying iso code, precision, buy and sell rates

    Returns:
        Validated Currency

    Raises:
        TypeError: If the record exposes no fields at all
        pydantic.ValidationError: If the fields do not form a valid Currency
    """
    if isinstance(record, Currency):
        return record
    fields = {}
    for key, value in _as_mapping(record).items():
        name = _FIELD_NAMES.get(str(key).replace("_", "").casefold())
        if name is not None:
            fields[name] = value
    return Currency.model_validate(fields)


def _describe(exc: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(part) for part in err['loc']) or 'record'}: {err['msg']}"
        for err in exc.errors()
    )


class Currencies:
    """
    Registry of currencies, kept in source order.

    The collection is an immutable tuple; there are no update or delete
    operations.
    """

    def __init__(self, currencies: Iterable[Currency]):
        """
        Initialize the registry from already-validated Currency records.

        Raises:
            EmptySourceError: If no currencies are given
        """
        self._currencies: tuple[Currency, ...] = tuple(currencies)
        if not self._currencies:
            raise EmptySourceError()

    @classmethod
    def from_source(cls, source: Optional[Iterable[Any]]) -> "Currencies":
        """
        Build a registry from any iterable of currency-shaped records.

        Args:
            source: Records to convert (see to_currency); None counts as empty

        Returns:
            A new Currencies registry

        Raises:
            EmptySourceError: If the source holds no records
            InvalidSourceError: If source is not iterable or a record cannot be converted
        """
        if source is None:
            raise EmptySourceError()
        try:
            records = list(source)
        except TypeError as e:
            raise InvalidSourceError(str(e)) from e

        currencies = []
        for index, record in enumerate(records):
            try:
                currencies.append(to_currency(record))
            except TypeError as e:
                raise InvalidSourceError(str(e), index=index) from e
            except ValidationError as e:
                raise InvalidSourceError(_describe(e), index=index) from e

        registry = cls(currencies)
        log.debug("Loaded %d currencies: %s", len(registry), ", ".join(registry.codes()))
        return registry

    def find_currency(self, code: str) -> Currency:
        """
        Find a currency by ISO code, ignoring case.

        Raises:
            EmptySourceError: If the registry holds no currencies
            CurrencyNotFoundError: If no currency matches code
        """
        if not self._currencies:
            raise EmptySourceError()

        for currency in self._currencies:
            if currency.matches(code):
                return currency

        raise CurrencyNotFoundError(code)

    def codes(self) -> list[str]:
        """Return the ISO codes in registry order."""
        return [c.iso_code for c in self._currencies]

    def __contains__(self, code: object) -> bool:
        return isinstance(code, str) and any(c.matches(code) for c in self._currencies)

    def __iter__(self) -> Iterator[Currency]:
        return iter(self._currencies)

    def __len__(self) -> int:
        return len(self._currencies)

    def __repr__(self) -> str:
        return f"Currencies({self.codes()!r})"
