"""
Shared Test Fixtures

Registries used across the registry, rate and quote tests.
"""
from decimal import Decimal  # Exact decimals for rates

import pytest  # Testing framework for writing and running tests

from fxquote.application.registry import Currencies  # Registry under test


@pytest.fixture
def currencies() -> Currencies:
    """USD base with EUR and JPY, as floats to exercise float-to-decimal conversion."""
    return Currencies.from_source([
        {"isoCode": "USD", "precision": 2, "buyRate": 1.0, "sellRate": 1.0},
        {"isoCode": "EUR", "precision": 2, "buyRate": 0.85, "sellRate": 1.18},
        {"isoCode": "JPY", "precision": 2, "buyRate": 0.0081, "sellRate": 123.45},
    ])


@pytest.fixture
def quote_currencies() -> Currencies:
    return Currencies.from_source([
        {"isoCode": "USD", "precision": 2, "buyRate": Decimal("1"), "sellRate": Decimal("1")},
        {"isoCode": "EUR", "precision": 2, "buyRate": Decimal("0.95"), "sellRate": Decimal("0.95")},
        {"isoCode": "JPY", "precision": 0, "buyRate": Decimal("0.0081"), "sellRate": Decimal("123.45")},
    ])
