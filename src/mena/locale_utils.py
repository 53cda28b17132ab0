"""Locale utilities: tag normalization, validation and text direction.

Centralizes locale tag handling used throughout the codebase so that
every entry point accepts the same spellings and rejects the same values.

Python 3.13+.
"""

from __future__ import annotations

import functools
from typing import TYPE_CHECKING

from mena.constants import SUPPORTED_LOCALES
from mena.core.babel_compat import get_locale_class
from mena.diagnostics import InvalidArgumentError
from mena.enums import LocaleTag

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "get_babel_locale",
    "get_text_direction",
    "normalize_locale",
    "parse_locale_tag",
]


def normalize_locale(locale_code: str) -> str:
    """Normalize a locale spelling for comparison.

    Strips surrounding whitespace, lowercases and converts BCP-47 hyphens
    to POSIX underscores.

    Args:
        locale_code: Locale spelling (e.g., "AR", " en ", "en-US")

    Returns:
        Normalized spelling (e.g., "ar", "en", "en_us")

    Example:
        >>> normalize_locale("EN")
        'en'
        >>> normalize_locale("en-US")
        'en_us'
    """
    return locale_code.strip().lower().replace("-", "_")


def parse_locale_tag(locale_code: str | LocaleTag) -> LocaleTag:
    """Convert a locale spelling to a supported LocaleTag.

    Args:
        locale_code: LocaleTag member or its string spelling (case-insensitive)

    Returns:
        The matching LocaleTag

    Raises:
        InvalidArgumentError: If the value is not a supported locale. Region
            subtags ("ar-EG") are not accepted.
    """
    if isinstance(locale_code, LocaleTag):
        return locale_code
    if isinstance(locale_code, str):
        normalized = normalize_locale(locale_code)
        if normalized in SUPPORTED_LOCALES:
            return LocaleTag(normalized)
    msg = (
        f"Unsupported locale {locale_code!r}; "
        f"expected one of: {', '.join(SUPPORTED_LOCALES)}"
    )
    raise InvalidArgumentError(
        msg, value=locale_code, field="locale", accepted=SUPPORTED_LOCALES
    )


@functools.lru_cache(maxsize=len(SUPPORTED_LOCALES))
def get_babel_locale(locale: LocaleTag) -> Locale:
    """Get a Babel Locale object with caching.

    Thread-safe via lru_cache internal locking.

    Raises:
        BabelImportError: If Babel is not installed
    """
    return get_locale_class().parse(locale.value)


def get_text_direction(locale: LocaleTag) -> str:
    """Return the CLDR text direction of a locale: "rtl" or "ltr".

    Raises:
        BabelImportError: If Babel is not installed

    Example:
        >>> get_text_direction(LocaleTag.AR)
        'rtl'
    """
    return get_babel_locale(locale).text_direction
