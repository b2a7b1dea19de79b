"""
Input Validation Utilities - Configuration and CLI Input Validation

This module provides validation functions for configuration values and
command-line input: ISO currency codes, log level names and non-negative
amounts.

Files that USE this module:
- fxquote.config.settings (uses validation functions in Settings field validators)
- fxquote.app (validates CLI arguments)

Files that this module USES:
- None (pure utility functions)
"""
import logging
import re
from decimal import Decimal, InvalidOperation


def validate_iso_code(code: str) -> bool:
    """
    Validate ISO 4217 style currency code format.

    Args:
        code: Currency code to validate (any case)

    Returns:
        True if valid, False otherwise
    """
    if not code:
        return False

    # Three letters, e.g. USD, eur
    return bool(re.match(r'^[A-Za-z]{3}$', code.strip()))


def validate_log_level(level: str) -> bool:
    """
    Validate a logging level name.

    Args:
        level: Level name such as "INFO" or "debug"

    Returns:
        True if the standard logging module knows the level, False otherwise
    """
    if not level:
        return False

    return isinstance(logging.getLevelName(level.strip().upper()), int)


def validate_amount(value: str, allow_zero: bool = True) -> bool:
    """
    Validate a non-negative decimal amount string.

    Args:
        value: String value to validate
        allow_zero: Whether zero is accepted (default: True)

    Returns:
        True if valid, False otherwise
    """
    if not value:
        return False

    try:
        amount = Decimal(value.strip())
    except InvalidOperation:
        return False
    if not amount.is_finite() or amount < 0:
        return False
    return allow_zero or amount > 0
