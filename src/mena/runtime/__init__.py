"""Runtime state: the process-wide display locale.

Python 3.13+.
"""

from .locale_context import (
    LocaleContext,
    get_locale,
    locale_context,
    resolve,
    set_locale,
    using_locale,
)

__all__ = [
    "LocaleContext",
    "get_locale",
    "locale_context",
    "resolve",
    "set_locale",
    "using_locale",
]
