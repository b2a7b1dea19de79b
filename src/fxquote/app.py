"""
Application Entry Point - Command-Line Interface

This module serves as the composition root for the fxquote command. It
wires settings, logging, the currency source and the rates service, then
prints a rate, a quote or the loaded currencies.

Files that USE this module:
- fxquote.__main__ (python -m fxquote)
- the fxquote console script (pyproject.toml)
- tests.test_app (unit tests)

Files that this module USES:
- fxquote.shared.logging_conf (setup_logging for logging configuration)
- fxquote.shared.validators (argument validation)
- fxquote.config (settings for configuration management)
- fxquote.adapters.sources (currency records from file or sample set)
- fxquote.adapters.formatting (text output)
- fxquote.application (Currencies registry and RatesService)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations for forward references

import argparse  # Command-line argument parsing
import json  # JSON output for quotes
import logging  # Standard library for logging messages and errors
from decimal import Decimal  # Exact decimal amounts
from pathlib import Path  # Object-oriented filesystem paths
from typing import Optional, Sequence  # Type hints for optional values and argv

from fxquote.shared.logging_conf import setup_logging  # Configure logging with file rotation
from fxquote.shared.validators import validate_amount, validate_iso_code  # CLI argument checks
from fxquote.adapters.sources import SAMPLE_CURRENCIES, load_currency_records  # Currency record sources
from fxquote.adapters.formatting import currency_lines, format_quote, format_rate  # Text output
from fxquote.application import Currencies, RatesService  # Registry and rate/quote service
from fxquote.domain.errors import DomainError  # Base class of all conversion errors
from fxquote.domain.models import normalize_code  # ISO code normalization shared with lookups


def _amount_arg(value: str) -> Decimal:
    if not validate_amount(value):
        raise argparse.ArgumentTypeError(f"invalid amount: {value!r}")
    return Decimal(value.strip())


def _code_arg(value: str) -> str:
    if not validate_iso_code(value):
        raise argparse.ArgumentTypeError(f"invalid currency code: {value!r}")
    return normalize_code(value)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the fxquote command."""
    parser = argparse.ArgumentParser(
        prog="fxquote",
        description="Compute exchange rates and conversion quotes against a base currency.",
    )
    parser.add_argument("--base", type=_code_arg, help="Base currency (default: FXQUOTE_BASE_CURRENCY)")
    parser.add_argument(
        "--currencies",
        type=Path,
        help="JSON file with currency records (default: FXQUOTE_CURRENCIES_FILE or built-in sample)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    rate = sub.add_parser("rate", help="Show the exchange rate between two currencies")
    rate.add_argument("from_currency", metavar="FROM")
    rate.add_argument("to_currency", metavar="TO")

    quote = sub.add_parser("quote", help="Build a conversion quote")
    quote.add_argument("from_currency", metavar="FROM")
    quote.add_argument("to_currency", metavar="TO")
    quote.add_argument("amount", type=_amount_arg, metavar="AMOUNT")
    quote.add_argument("--fee", type=_amount_arg, help="Fee in FROM (default: FXQUOTE_DEFAULT_FEE)")
    quote.add_argument("--json", action="store_true", help="Print the quote as JSON")

    sub.add_parser("list", help="List the loaded currencies")
    return parser


def load_registry(currencies_file: Optional[Path]) -> Currencies:
    """
    Build the registry from a JSON file, or from the sample set when no file is given.

    Raises:
        OSError: If currencies_file cannot be opened
        DomainError: If the records are empty or invalid
    """
    logger = logging.getLogger(__name__)
    if currencies_file is None:
        logger.info("No currencies file configured, using built-in sample set")
        return Currencies.from_source(SAMPLE_CURRENCIES)

    logger.info("Loading currencies from %s", currencies_file)
    return Currencies.from_source(load_currency_records(currencies_file))


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Run the fxquote command.

    Args:
        argv: Command-line arguments (default: sys.argv[1:])

    Returns:
        Process exit status: 0 on success, 1 on a conversion or input error
    """
    args = build_parser().parse_args(argv)

    # Import settings here so a bad environment surfaces after argument parsing
    from fxquote.config import settings

    setup_logging(
        level=settings.log_level_value,
        log_file=settings.log_file,
        log_dir=settings.log_dir,
        max_bytes=settings.log_max_bytes,
        backup_count=settings.log_backup_count,
        log_to_stdout=settings.log_stdout,
    )
    logger = logging.getLogger(__name__)

    base = args.base or settings.base_currency
    currencies_file = args.currencies or settings.currencies_file

    try:
        registry = load_registry(currencies_file)
        service = RatesService(registry, base)

        if args.command == "list":
            print(currency_lines(registry))
        elif args.command == "rate":
            rate = service.rate(args.from_currency, args.to_currency)
            print(format_rate(args.from_currency, args.to_currency, rate))
        elif args.command == "quote":
            fee = args.fee if args.fee is not None else settings.default_fee
            quote = service.quote(args.from_currency, args.to_currency, args.amount, fee)
            if args.json:
                print(json.dumps(quote.to_json(), indent=2))
            else:
                print(format_quote(quote))
    except DomainError as e:
        logger.error("%s failed (%s): %s", args.command, e.kind.value, e)
        return 1
    except OSError as e:
        logger.error("Cannot read currencies file %s: %s", e.filename, e.strerror or e)
        return 1

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
