"""
Shared Utilities - Cross-cutting Concerns

This package contains shared utilities used across all layers:
- Validation
- Money conversion and rounding
- Logging configuration
"""

from fxquote.shared.validators import (
    validate_amount,
    validate_iso_code,
    validate_log_level,
)
from fxquote.shared.money import Amount, round_up, to_amount

__all__ = [
    "validate_iso_code",
    "validate_log_level",
    "validate_amount",
    "Amount",
    "round_up",
    "to_amount",
]
