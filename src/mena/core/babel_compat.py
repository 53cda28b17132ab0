"""Babel compatibility layer for optional dependency handling.

Provides centralized, lazy import infrastructure for Babel to ensure consistent
error messaging and import behavior across all Babel-dependent modules.

Design Rationale:
    mena supports two installation modes:
    - Data-only: `pip install mena` (no external dependencies)
    - CLDR extras: `pip install mena[babel]` (text direction, currency
      precision, CLDR cross-checks of the dataset)

    This module ensures that:
    1. Data-only installations never trigger Babel imports
    2. Babel-dependent features get consistent, helpful error messages
    3. Babel types are available for TYPE_CHECKING without runtime import

Usage Pattern:
    from mena.core.babel_compat import get_babel_numbers

    def currency_precision(code: str) -> int:
        numbers = get_babel_numbers()  # Raises BabelImportError if missing
        return numbers.get_currency_precision(code)

Python 3.13+.
"""

from __future__ import annotations

from datetime import date
from functools import lru_cache
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from babel import Locale


# pylint: disable=unnecessary-ellipsis
# Reason: Ellipsis (...) is the standard Protocol method body per PEP 544
class BabelNumbersProtocol(Protocol):
    """Protocol for Babel numbers module interface.

    Defines the subset of babel.numbers API actually used by mena.
    Provides type safety without requiring full Babel type stubs.
    """

    def get_currency_precision(self, currency: str) -> int:
        """Return the number of decimal digits used by a currency."""
        ...

    def get_territory_currencies(
        self,
        territory: str,
        start_date: date | None = None,
        end_date: date | None = None,
        tender: bool = True,
        non_tender: bool = False,
        include_details: bool = False,
    ) -> list[str]:
        """Return currencies in use by a territory."""
        ...
# pylint: enable=unnecessary-ellipsis


__all__ = [
    "BabelImportError",
    "BabelNumbersProtocol",
    "get_babel_numbers",
    "get_locale_class",
    "is_babel_available",
    "require_babel",
]


@lru_cache(maxsize=1)
def _check_babel_available() -> bool:
    """Check if Babel is installed (computed once, cached via lru_cache)."""
    try:
        import babel  # noqa: F401, PLC0415  # pylint: disable=unused-import

        return True
    except ImportError:
        return False


class BabelImportError(ImportError):
    """Raised when Babel is required but not installed.

    Provides a consistent, helpful error message directing users to install
    the Babel dependency.
    """

    def __init__(self, feature: str) -> None:
        """Create error with feature-specific message.

        Args:
            feature: Name of the feature/function requiring Babel
        """
        message = (
            f"{feature} requires Babel for CLDR locale data. "
            "Install with: pip install mena[babel]"
        )
        super().__init__(message)
        self.feature = feature


def is_babel_available() -> bool:
    """Check if Babel is installed.

    Uses cached result to avoid repeated import attempts.

    Returns:
        True if Babel is installed and importable, False otherwise.
    """
    return _check_babel_available()


def require_babel(feature: str) -> None:
    """Assert that Babel is available, raising BabelImportError if not.

    Use at the entry point of functions/methods that require Babel.

    Args:
        feature: Name of the feature requiring Babel (for error message)

    Raises:
        BabelImportError: If Babel is not installed
    """
    if not _check_babel_available():
        raise BabelImportError(feature)


def get_locale_class() -> type[Locale]:
    """Get the Babel Locale class.

    Raises:
        BabelImportError: If Babel is not installed
    """
    require_babel("get_locale_class")
    from babel import Locale  # noqa: PLC0415

    return Locale


def get_babel_numbers() -> BabelNumbersProtocol:
    """Get the Babel numbers module.

    Returns:
        The babel.numbers module (typed via BabelNumbersProtocol)

    Raises:
        BabelImportError: If Babel is not installed
    """
    require_babel("get_babel_numbers")
    from babel import numbers  # noqa: PLC0415

    return numbers  # type: ignore[return-value]
