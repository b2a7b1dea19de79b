"""
FXQuote - Currency Conversion Helper

Holds a registry of currencies with buy/sell rates against a base currency,
computes direct and cross exchange rates, and builds conversion quotes with
amounts rounded up at each currency's precision.
"""

__version__ = "1.0.0"
