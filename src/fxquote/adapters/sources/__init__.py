"""
Source Adapters - Currency Records

This package contains adapters that supply currency records for the registry:
- JSON file loading
- Built-in sample set
"""

from fxquote.adapters.sources.file_source import SAMPLE_CURRENCIES, load_currency_records

__all__ = [
    "SAMPLE_CURRENCIES",
    "load_currency_records",
]
