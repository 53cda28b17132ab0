"""Hypothesis strategies for mena property-based testing.

Usage:
    from tests.strategies import regions, locale_spellings, currencies

Event-Emitting Strategies (HypoFuzz-Optimized):
    - locale_spellings, currencies
"""

from .dataset import (
    concrete_field_keys,
    currencies,
    denominations,
    field_keys,
    locale_spellings,
    locale_tags,
    localized_texts,
    non_empty_text,
    regions,
    unsupported_locales,
)

__all__ = [
    "concrete_field_keys",
    "currencies",
    "denominations",
    "field_keys",
    "locale_spellings",
    "locale_tags",
    "localized_texts",
    "non_empty_text",
    "regions",
    "unsupported_locales",
]
