"""
File Source - Currency Records from JSON

This module reads currency records for the registry from a JSON file holding
an array of objects with isoCode, precision, buyRate and sellRate keys.
Numbers are parsed straight into Decimal so rates never pass through float.

Files that USE this module:
- fxquote.app (loads the configured currencies file, or the sample set)
- tests.test_file_source (unit tests)

Files that this module USES:
- fxquote.domain.errors (InvalidSourceError for unreadable files)
"""
from __future__ import annotations

import json
import logging
from decimal import Decimal
from pathlib import Path
from typing import Any, Union

from fxquote.domain.errors import InvalidSourceError

log = logging.getLogger(__name__)

# Demo set used when no currencies file is configured
SAMPLE_CURRENCIES: list[dict[str, Any]] = [
    {"isoCode": "USD", "precision": 2, "buyRate": Decimal("1"), "sellRate": Decimal("1")},
    {"isoCode": "EUR", "precision": 2, "buyRate": Decimal("0.9"), "sellRate": Decimal("0.95")},
    {"isoCode": "NGN", "precision": 2, "buyRate": Decimal("450"), "sellRate": Decimal("460")},
]


def load_currency_records(path: Union[str, Path]) -> list[Any]:
    """
    Load currency records from a JSON file.

    Args:
        path: JSON file containing an array of currency objects

    Returns:
        List of raw records, ready for Currencies.from_source

    Raises:
        OSError: If the file cannot be opened (missing, a directory, no permission)
        InvalidSourceError: If the file is not UTF-8 JSON or not an array
    """
    p = Path(path)
    with p.open("r", encoding="utf-8") as f:
        try:
            data = json.load(f, parse_float=Decimal)
        except json.JSONDecodeError as e:
            raise InvalidSourceError(f"{p} is not valid JSON: {e}") from e
        except UnicodeDecodeError as e:
            raise InvalidSourceError(f"{p} is not UTF-8 text: {e.reason}") from e

    if not isinstance(data, list):
        raise InvalidSourceError(f"{p} must contain a JSON array, got {type(data).__name__}")

    log.debug("Read %d currency records from %s", len(data), p)
    return data
