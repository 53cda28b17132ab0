"""Currency record embedded in every region.

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from mena.constants import ARABIC_CURRENCY_SYMBOLS
from mena.core.babel_compat import get_babel_numbers
from mena.enums import LocaleTag
from mena.locale_utils import parse_locale_tag
from mena.models.denomination import Denomination
from mena.models.localized import LocalizedText, require_str
from mena.runtime.locale_context import get_locale

__all__ = ["Currency", "currency_symbol"]


def currency_symbol(iso_code: str, locale: str | LocaleTag) -> str | None:
    """Conventional symbol of a regional currency in the given locale.

    English symbols are the ISO codes themselves; Arabic symbols are the
    traditional abbreviations (د.إ, ر.س, ...). Codes outside the regional
    denomination sets have no symbol in either locale.

    Returns:
        Symbol string, or None for codes without a known symbol
    """
    code = iso_code.upper()
    if parse_locale_tag(locale) is LocaleTag.EN:
        return code if Denomination.for_currency_code(code) is not None else None
    return ARABIC_CURRENCY_SYMBOLS.get(code)


@dataclass(frozen=True, slots=True)
class Currency:
    """ISO 4217 currency with bilingual naming.

    Immutable, thread-safe, hashable. Equality is structural over all fields.

    Attributes:
        iso_code: ISO 4217 code, 3 uppercase letters (e.g., 'AED')
        adjective: Country adjective used to build the full name
            (e.g., Emirati / إماراتي)
        denomination: Denomination family (e.g., Denomination.DIRHAM)

    Example:
        >>> aed = Currency("AED", LocalizedText("Emirati", "إماراتي"), Denomination.DIRHAM)
        >>> aed.full_name("en")
        'Emirati Dirham'
        >>> aed.full_name("ar")
        'درهم إماراتي'
    """

    iso_code: str
    adjective: LocalizedText
    denomination: Denomination

    def full_name(self, locale: str | LocaleTag | None = None) -> str:
        """Full currency name for locale, or for the current display locale.

        English puts the adjective first ("Egyptian Pound"); Arabic puts the
        denomination noun first ("جنيه مصري").
        """
        tag = get_locale() if locale is None else parse_locale_tag(locale)
        if tag is LocaleTag.EN:
            return f"{self.adjective.en} {self.denomination.en_name}"
        return f"{self.denomination.ar_name} {self.adjective.ar}"

    def symbol(self, locale: str | LocaleTag | None = None) -> str | None:
        """Conventional symbol for locale, or for the current display locale.

        Returns:
            Symbol string, or None when the code has no known symbol
        """
        return currency_symbol(self.iso_code, get_locale() if locale is None else locale)

    @property
    def decimal_digits(self) -> int:
        """Number of minor-unit digits per CLDR (e.g. 3 for KWD).

        Raises:
            BabelImportError: If Babel is not installed
        """
        return get_babel_numbers().get_currency_precision(self.iso_code)

    def to_dict(self) -> dict[str, str]:
        """JSON-compatible projection."""
        return {
            "code": self.iso_code,
            "enAdjective": self.adjective.en,
            "arAdjective": self.adjective.ar,
            "type": self.denomination.value,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Currency:
        """Inverse of to_dict().

        Raises:
            InvalidArgumentError: If a field is missing or not a string, or
                "type" is not a known denomination tag
        """
        code = require_str(data, "code", "currency")
        en = require_str(data, "enAdjective", "currency")
        ar = require_str(data, "arAdjective", "currency")
        denomination = Denomination.from_tag(require_str(data, "type", "currency"))
        return cls(
            iso_code=code,
            adjective=LocalizedText(en=en, ar=ar),
            denomination=denomination,
        )
