"""Shared constants for mena.

This module provides centralized configuration constants used across
the models, lookup and runtime packages. Placing constants here avoids
circular imports and provides a single source of truth.

Constants are grouped by domain:
- Locales: Supported display locales and the process-start default
- Flags: Flag image CDN location
- Currency symbols: Conventional symbols per display locale

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Locales
    "LOCALE_EN",
    "LOCALE_AR",
    "SUPPORTED_LOCALES",
    "DEFAULT_LOCALE",
    # Flags
    "FLAG_CDN_BASE_URL",
    # Currency symbols
    "ARABIC_CURRENCY_SYMBOLS",
]

# ============================================================================
# LOCALES
# ============================================================================

LOCALE_EN: str = "en"
LOCALE_AR: str = "ar"

# Order matters for error messages: listed as shown to callers.
SUPPORTED_LOCALES: tuple[str, ...] = (LOCALE_AR, LOCALE_EN)

# Locale in effect at import time, before any set_locale() call.
DEFAULT_LOCALE: str = LOCALE_AR

# ============================================================================
# FLAGS
# ============================================================================

# No trailing slash. URL helpers append "/<path>".
FLAG_CDN_BASE_URL: str = "https://flagcdn.com"

# ============================================================================
# CURRENCY SYMBOLS
# ============================================================================

# Traditional Arabic abbreviations (currency initial + country initial).
# English symbols are the ISO 4217 codes themselves; see models.currency.
ARABIC_CURRENCY_SYMBOLS: dict[str, str] = {
    "AED": "د.إ",
    "SAR": "ر.س",
    "EGP": "ج.م",
    "QAR": "ر.ق",
    "KWD": "د.ك",
    "BHD": "د.ب",
    "OMR": "ر.ع",
    "JOD": "د.أ",
    "LBP": "ل.ل",
    "ILS": "₪",
    "TND": "د.ت",
    "DZD": "د.ج",
    "LYD": "د.ل",
    "MAD": "د.م",
    "IQD": "د.ع",
    "SYP": "ل.س",
    "SDG": "ج.س",
    "YER": "ر.ي",
    "MRU": "أ.م",
}
