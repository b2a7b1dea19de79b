"""
Registry Tests - Unit Tests for the Currency Registry

This module contains unit tests for building a Currencies registry from
heterogeneous sources and for case-insensitive currency lookup.

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- fxquote.application.registry (Currencies, to_currency)
- fxquote.domain (Currency model and registry errors)
- pytest (testing framework)
"""
import pytest  # Testing framework for writing and running tests

from collections import namedtuple  # Tuple-shaped source records
from dataclasses import dataclass  # Struct-shaped source records
from decimal import Decimal  # Exact decimals for rates

from pydantic import BaseModel, ValidationError  # Model-shaped source records, frozen-model errors

from fxquote.application.registry import Currencies, to_currency  # Registry under test
from fxquote.domain.errors import (
    CurrencyNotFoundError,
    EmptySourceError,
    ErrorKind,
    InvalidSourceError,
)
from fxquote.domain.models import Currency, normalize_code  # Domain model for test data


@dataclass
class RateRow:
    ISOCode: str
    BuyRate: Decimal
    SellRate: Decimal


class RateModel(BaseModel):
    iso_code: str
    precision: int
    buy_rate: Decimal
    sell_rate: Decimal


RateTuple = namedtuple("RateTuple", ["isoCode", "precision", "buyRate", "sellRate"])


class PlainRate:
    def __init__(self, iso_code, buy_rate, sell_rate):
        self.iso_code = iso_code
        self.buy_rate = buy_rate
        self.sell_rate = sell_rate


class TestFromSource:
    def test_from_struct_like_records(self):
        registry = Currencies.from_source([
            RateRow("USD", Decimal(100), Decimal(101)),
            RateRow("EUR", Decimal(120), Decimal(121)),
        ])
        assert len(registry) == 2
        assert registry.codes() == ["USD", "EUR"]
        assert registry.find_currency("EUR").sell_rate == Decimal(121)

    def test_from_mixed_record_shapes(self):
        registry = Currencies.from_source([
            {"isoCode": "USD", "precision": 2, "buyRate": "1", "sellRate": "1"},
            {"iso_code": "EUR", "precision": 2, "buy_rate": "0.9", "sell_rate": "0.95"},
            RateModel(iso_code="GBP", precision=2, buy_rate=Decimal("0.8"), sell_rate=Decimal("0.82")),
            RateTuple("NGN", 2, Decimal(450), Decimal(460)),
            PlainRate("JPY", Decimal("0.0081"), Decimal("123.45")),
            Currency(iso_code="CHF", precision=2, buy_rate=Decimal("0.9"), sell_rate=Decimal("0.91")),
        ])
        assert registry.codes() == ["USD", "EUR", "GBP", "NGN", "JPY", "CHF"]
        assert registry.find_currency("EUR").buy_rate == Decimal("0.9")
        assert registry.find_currency("NGN").precision == 2
        assert registry.find_currency("JPY").precision == 0

    def test_record_with_only_iso_code(self):
        registry = Currencies.from_source([{"ISOCode": "USD"}])
        usd = registry.find_currency("USD")
        assert len(registry) == 1
        assert usd.precision == 0
        assert usd.buy_rate == Decimal(0)
        assert usd.sell_rate == Decimal(0)

    def test_float_rates_become_exact_decimals(self):
        registry = Currencies.from_source([{"isoCode": "EUR", "buyRate": 0.85, "sellRate": 1.18}])
        eur = registry.find_currency("EUR")
        assert eur.buy_rate == Decimal("0.85")
        assert eur.sell_rate == Decimal("1.18")

    def test_unknown_keys_are_ignored(self):
        currency = to_currency({"isoCode": "USD", "name": "US Dollar", "symbol": "$"})
        assert currency.iso_code == "USD"

    def test_empty_source(self):
        with pytest.raises(EmptySourceError) as exc_info:
            Currencies.from_source([])
        assert exc_info.value.kind is ErrorKind.EMPTY_SOURCE

    def test_none_source(self):
        with pytest.raises(EmptySourceError):
            Currencies.from_source(None)

    def test_empty_constructor(self):
        with pytest.raises(EmptySourceError):
            Currencies([])

    def test_string_record_is_invalid(self):
        with pytest.raises(InvalidSourceError) as exc_info:
            Currencies.from_source(["invalid data"])
        assert exc_info.value.kind is ErrorKind.INVALID_SOURCE
        assert exc_info.value.index == 0

    def test_non_iterable_source_is_invalid(self):
        with pytest.raises(InvalidSourceError):
            Currencies.from_source(42)

    def test_negative_precision_is_invalid(self):
        with pytest.raises(InvalidSourceError) as exc_info:
            Currencies.from_source([
                {"isoCode": "USD", "precision": 2},
                {"isoCode": "EUR", "precision": -1},
            ])
        assert exc_info.value.index == 1

    def test_non_numeric_rate_is_invalid(self):
        with pytest.raises(InvalidSourceError):
            Currencies.from_source([{"isoCode": "USD", "buyRate": "one"}])

    def test_missing_iso_code_is_invalid(self):
        with pytest.raises(InvalidSourceError):
            Currencies.from_source([{"precision": 2, "buyRate": "1", "sellRate": "1"}])


class TestFindCurrency:
    def test_find_by_code(self, currencies):
        currency = currencies.find_currency("USD")
        assert currency.iso_code == "USD"

    def test_lookup_is_case_insensitive(self, currencies):
        assert currencies.find_currency("usd") is currencies.find_currency("USD")
        assert currencies.find_currency("eUr").iso_code == "EUR"

    def test_unknown_code(self, currencies):
        with pytest.raises(CurrencyNotFoundError) as exc_info:
            currencies.find_currency("GBP")
        assert exc_info.value.code == "GBP"
        assert exc_info.value.kind is ErrorKind.CURRENCY_NOT_FOUND
        assert str(exc_info.value) == "currency GBP not found"

    def test_membership_and_iteration(self, currencies):
        assert "jpy" in currencies
        assert "GBP" not in currencies
        assert 42 not in currencies
        assert [c.iso_code for c in currencies] == ["USD", "EUR", "JPY"]


class TestCurrencyModel:
    def test_serializes_with_camel_case_names(self):
        currency = Currency(iso_code="USD", precision=2, buy_rate=Decimal("1"), sell_rate=Decimal("1.01"))
        assert currency.model_dump(mode="json", by_alias=True) == {
            "isoCode": "USD",
            "precision": 2,
            "buyRate": "1",
            "sellRate": "1.01",
        }

    def test_currency_is_immutable(self):
        currency = Currency(iso_code="USD")
        with pytest.raises(ValidationError):
            currency.precision = 4

    def test_matches_uses_code_normalization(self):
        currency = Currency(iso_code="tri")
        assert currency.matches(" TRI ")
        assert currency.matches("trı")
        assert normalize_code(" trı ") == "TRI"
