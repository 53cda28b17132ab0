"""Bilingual text value shared by all localized fields.

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from mena.diagnostics import InvalidArgumentError
from mena.enums import LocaleTag
from mena.locale_utils import parse_locale_tag
from mena.runtime.locale_context import get_locale

__all__ = ["LocalizedText", "require_str"]


def require_str(data: Mapping[str, object], field: str, owner: str) -> str:
    """Fetch a required string field from a JSON-like mapping.

    Raises:
        InvalidArgumentError: If the field is absent or not a string
    """
    if field not in data:
        msg = f"Missing required {owner} field: {field!r}"
        raise InvalidArgumentError(msg, field=field)
    value = data[field]
    if not isinstance(value, str):
        msg = f"{owner} field {field!r} must be a string, got {type(value).__name__}"
        raise InvalidArgumentError(msg, value=value, field=field)
    return value


@dataclass(frozen=True, slots=True)
class LocalizedText:
    """One value in English and Arabic.

    Immutable, thread-safe, hashable. Safe for use as dict key or set member.

    Attributes:
        en: English value (left-to-right, Latin script)
        ar: Arabic value (right-to-left, Arabic script)
    """

    en: str
    ar: str

    def get(self, locale: str | LocaleTag) -> str:
        """Value for an explicit locale. Does not read the global locale.

        Raises:
            InvalidArgumentError: If locale is not supported
        """
        return self.en if parse_locale_tag(locale) is LocaleTag.EN else self.ar

    def resolve(self, locale: str | LocaleTag | None = None) -> str:
        """Value for locale, or for the current display locale if None."""
        return self.get(get_locale() if locale is None else locale)

    def to_dict(self) -> dict[str, str]:
        return {"en": self.en, "ar": self.ar}

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> LocalizedText:
        """Build from {"en": ..., "ar": ...}.

        Raises:
            InvalidArgumentError: If either key is missing or not a string
        """
        return cls(
            en=require_str(data, "en", "localized text"),
            ar=require_str(data, "ar", "localized text"),
        )
