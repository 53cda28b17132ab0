"""Process-wide display locale for locale-aware accessors.

Every "current-locale" accessor in mena (Region.resolved_common_name,
Currency.full_name() without an argument, FieldKey.COMMON_NAME lookups, ...)
reads the locale held here. The value is ambient: it is not scoped per call,
thread or task.

Architecture:
    - LocaleContext: Lock-guarded holder of the current LocaleTag
    - locale_context: The process-wide instance used by the library
    - get_locale/set_locale/resolve: Module-level shortcuts to that instance

Thread Safety:
    Reads and writes are serialized by an RLock, so a single read always
    observes a complete LocaleTag and resolve() reads the locale exactly once.
    There is NO atomicity across calls: a caller computing two locale-aware
    values in two calls may see them rendered under different locales if
    another thread calls set_locale() in between. Callers that need a fixed
    locale should pass it explicitly (LocalizedText.get(locale),
    Currency.full_name(locale), Currency.symbol(locale)).

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import AbstractContextManager, contextmanager
from threading import RLock

from mena.constants import DEFAULT_LOCALE
from mena.enums import LocaleTag
from mena.locale_utils import get_text_direction, parse_locale_tag

__all__ = [
    "LocaleContext",
    "get_locale",
    "locale_context",
    "resolve",
    "set_locale",
    "using_locale",
]

logger = logging.getLogger(__name__)


class LocaleContext:
    """Mutable, lock-guarded holder of the current display locale.

    Examples:
        >>> ctx = LocaleContext()
        >>> ctx.get()
        <LocaleTag.AR: 'ar'>
        >>> ctx.set("en")
        >>> ctx.resolve("Cairo", "القاهرة")
        'Cairo'
        >>> ctx.set("fr")
        Traceback (most recent call last):
        ...
        mena.diagnostics.errors.InvalidArgumentError: Unsupported locale 'fr'; ...
    """

    __slots__ = ("_default", "_generation", "_locale", "_lock")

    def __init__(self, default: str | LocaleTag = DEFAULT_LOCALE) -> None:
        """Initialize with a default locale.

        Raises:
            InvalidArgumentError: If default is not a supported locale
        """
        self._default = parse_locale_tag(default)
        self._locale = self._default
        self._generation = 0
        self._lock = RLock()

    def get(self) -> LocaleTag:
        """Return the current locale."""
        with self._lock:
            return self._locale

    def set(self, locale: str | LocaleTag) -> None:
        """Change the current locale.

        Args:
            locale: LocaleTag or its spelling ("ar", "EN", ...)

        Raises:
            InvalidArgumentError: If the value is not a supported locale.
                The current locale is left unchanged.
        """
        tag = parse_locale_tag(locale)
        with self._lock:
            previous = self._locale
            self._locale = tag
            self._generation += 1
        logger.debug("Display locale changed: %s -> %s", previous, tag)

    def reset(self) -> None:
        """Restore the locale this context was created with."""
        self.set(self._default)

    @property
    def default(self) -> LocaleTag:
        return self._default

    @property
    def generation(self) -> int:
        """Number of successful set() calls so far.

        Lets callers detect that the locale may have changed between two reads.
        """
        with self._lock:
            return self._generation

    def resolve[T](self, en_value: T, ar_value: T) -> T:
        """Pick the value matching the current locale.

        Reads the locale exactly once. No caching, no side effects.
        """
        return en_value if self.get() is LocaleTag.EN else ar_value

    @contextmanager
    def using(self, locale: str | LocaleTag) -> Iterator[LocaleTag]:
        """Temporarily switch the locale, restoring the previous one on exit.

        The switch is process-wide, not thread-local: other threads observe
        it for the duration of the block.

        Raises:
            InvalidArgumentError: If the value is not a supported locale
                (raised before any change is made)
        """
        tag = parse_locale_tag(locale)
        # Read and switch under one hold; set() re-enters the RLock.
        with self._lock:
            previous = self._locale
            self.set(tag)
        try:
            yield tag
        finally:
            self.set(previous)

    def text_direction(self, locale: str | LocaleTag | None = None) -> str:
        """CLDR text direction ("rtl"/"ltr") of locale, or of the current one.

        Raises:
            BabelImportError: If Babel is not installed
        """
        tag = self.get() if locale is None else parse_locale_tag(locale)
        return get_text_direction(tag)


locale_context = LocaleContext()


def get_locale() -> LocaleTag:
    """Return the process-wide display locale."""
    return locale_context.get()


def set_locale(locale: str | LocaleTag) -> None:
    """Set the process-wide display locale.

    Raises:
        InvalidArgumentError: If the value is not "ar" or "en"
    """
    locale_context.set(locale)


def resolve[T](en_value: T, ar_value: T) -> T:
    """Return en_value under the English locale, ar_value under Arabic."""
    return locale_context.resolve(en_value, ar_value)


def using_locale(locale: str | LocaleTag) -> AbstractContextManager[LocaleTag]:
    """Shortcut for locale_context.using(locale)."""
    return locale_context.using(locale)
