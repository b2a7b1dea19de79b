"""
Formatting Adapters - Text Formatting

This package contains text formatting adapters for command-line output.
"""

from fxquote.adapters.formatting.formatter import (
    currency_lines,
    format_quote,
    format_rate,
)

__all__ = [
    "currency_lines",
    "format_quote",
    "format_rate",
]
