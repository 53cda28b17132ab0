"""Immutable data model: regions, currencies and denominations.

Python 3.13+.
"""

from .currency import Currency, currency_symbol
from .denomination import Denomination
from .localized import LocalizedText
from .region import Region

__all__ = [
    "Currency",
    "Denomination",
    "LocalizedText",
    "Region",
    "currency_symbol",
]
