"""Region record: one country of the dataset.

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from mena import flags
from mena.diagnostics import InvalidArgumentError
from mena.enums import EmojiSize, ImageSize, ImageType
from mena.models.currency import Currency
from mena.models.localized import LocalizedText, require_str

__all__ = ["Region"]


@dataclass(frozen=True, slots=True)
class Region:
    """Country entry: identity codes, bilingual names and currency.

    Immutable, thread-safe, hashable. Equality is structural over all fields,
    including the embedded Currency.

    Attributes:
        code: ISO 3166-1 alpha-2 code, lowercase (e.g., 'ps')
        dial_code: International calling code without '+' (e.g., '970')
        common_name: Everyday name (Palestine / فلسطين)
        official_name: Formal name (State of Palestine / دولة فلسطين)
        capital_name: Capital city (Jerusalem / القدس)
        currency: Currency in use

    The resolved_* properties read the process-wide display locale (see
    mena.runtime.locale_context). Each property reads it once; two
    properties read in sequence may observe different locales if another
    thread changes it in between. Use common_name.get(locale) and friends
    to pin a locale explicitly.
    """

    code: str
    dial_code: str
    common_name: LocalizedText
    official_name: LocalizedText
    capital_name: LocalizedText
    currency: Currency

    # ------------------------------------------------------------------
    # Locale-aware accessors
    # ------------------------------------------------------------------

    @property
    def resolved_common_name(self) -> str:
        return self.common_name.resolve()

    @property
    def resolved_official_name(self) -> str:
        return self.official_name.resolve()

    @property
    def resolved_capital_name(self) -> str:
        return self.capital_name.resolve()

    @property
    def resolved_currency_full_name(self) -> str:
        return self.currency.full_name()

    @property
    def resolved_currency_symbol(self) -> str | None:
        return self.currency.symbol()

    # ------------------------------------------------------------------
    # Derived values
    # ------------------------------------------------------------------

    @property
    def dial_code_with_plus(self) -> str:
        """Dial code formatted for display, e.g. '+970'."""
        return f"+{self.dial_code}"

    @property
    def svg_url(self) -> str:
        return flags.svg_url(self.code)

    def emoji_url(self, size: EmojiSize) -> str:
        return flags.emoji_url(self.code, size)

    def image_url(self, size: ImageSize, image_type: ImageType = ImageType.JPEG) -> str:
        return flags.image_url(self.code, size, image_type)

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    def to_dict(self) -> dict[str, Any]:
        """Flat JSON-compatible projection; currency is nested."""
        return {
            "code": self.code,
            "dialCode": self.dial_code,
            "englishName": self.common_name.en,
            "arabicName": self.common_name.ar,
            "officialEn": self.official_name.en,
            "officialAr": self.official_name.ar,
            "capitalEn": self.capital_name.en,
            "capitalAr": self.capital_name.ar,
            "currency": self.currency.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Region:
        """Inverse of to_dict().

        Raises:
            InvalidArgumentError: If a field is missing or ill-typed, or the
                currency payload is invalid
        """

        def field(name: str) -> str:
            return require_str(data, name, "region")

        currency_data = data.get("currency")
        if not isinstance(currency_data, Mapping):
            msg = "Missing required region field: 'currency' (expected an object)"
            raise InvalidArgumentError(msg, value=currency_data, field="currency")

        return cls(
            code=field("code"),
            dial_code=field("dialCode"),
            common_name=LocalizedText(en=field("englishName"), ar=field("arabicName")),
            official_name=LocalizedText(en=field("officialEn"), ar=field("officialAr")),
            capital_name=LocalizedText(en=field("capitalEn"), ar=field("capitalAr")),
            currency=Currency.from_dict(currency_data),
        )
