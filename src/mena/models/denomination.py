"""Currency denomination families used across the MENA region.

Each Denomination member owns its bilingual display names and the closed
set of ISO 4217 codes that belong to it. Every currency in the dataset must
appear in exactly one member's set; see mena.validation.

Python 3.13+.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from mena.diagnostics import InvalidArgumentError
from mena.enums import LocaleTag
from mena.models.localized import LocalizedText

__all__ = ["Denomination"]


@dataclass(frozen=True, slots=True)
class _DenominationInfo:
    name: LocalizedText
    en_alternative: str
    description: str
    plural_name: str
    origin: str
    subdivision_unit: str
    currency_codes: frozenset[str]
    region_note: str


class Denomination(StrEnum):
    """Denomination family of a currency (dinar, riyal, ...).

    StrEnum provides automatic string conversion: str(Denomination.DINAR) == "dinar".
    The string value is the serialization tag used by Currency.to_dict().
    """

    DINAR = "dinar"
    RIYAL = "riyal"
    DIRHAM = "dirham"
    POUND = "pound"
    SHEKEL = "shekel"
    OUGUIYA = "ouguiya"

    @property
    def _info(self) -> _DenominationInfo:
        return _DENOMINATIONS[self]

    @property
    def en_name(self) -> str:
        return self._info.name.en

    @property
    def ar_name(self) -> str:
        return self._info.name.ar

    def display_name(self, locale: str | LocaleTag | None = None) -> str:
        """Localized label for locale, or for the current display locale."""
        return self._info.name.resolve(locale)

    @property
    def member_currency_codes(self) -> frozenset[str]:
        """ISO 4217 codes of the regional currencies in this family."""
        return self._info.currency_codes

    @property
    def en_alternative(self) -> str:
        """Historical or alternative English spelling (e.g. 'Denarius')."""
        return self._info.en_alternative

    @property
    def description(self) -> str:
        return self._info.description

    @property
    def plural_name(self) -> str:
        return self._info.plural_name

    @property
    def origin(self) -> str:
        return self._info.origin

    @property
    def subdivision_unit(self) -> str:
        """Name of the minor unit (fils, halala, ...)."""
        return self._info.subdivision_unit

    @property
    def is_gold_based(self) -> bool:
        return self is Denomination.DINAR

    @property
    def is_silver_based(self) -> bool:
        return self in (Denomination.DIRHAM, Denomination.POUND, Denomination.SHEKEL)

    @property
    def is_decimal_based(self) -> bool:
        # 1 ouguiya = 5 khoums
        return self is not Denomination.OUGUIYA

    @property
    def regional_usage(self) -> str:
        count = len(self.member_currency_codes)
        noun = "currency" if count == 1 else "currencies"
        return f"{count} {noun}: {self._info.region_note}"

    @property
    def bilingual_name(self) -> str:
        """English and Arabic names, e.g. 'Dinar (دينار)'."""
        return f"{self.en_name} ({self.ar_name})"

    @property
    def all_names(self) -> dict[str, str]:
        return {
            "english": self.en_name,
            "arabic": self.ar_name,
            "alternative": self.en_alternative,
            "plural": self.plural_name,
            "origin": self.origin,
        }

    def matches_name(self, name: str) -> bool:
        """Check a free-form name against the English (any case), Arabic,
        alternative and plural spellings.
        """
        lowered = name.lower()
        return (
            self.en_name.lower() == lowered
            or self.ar_name == name
            or self.en_alternative.lower() == lowered
            or self.plural_name.lower() == lowered
        )

    @classmethod
    def for_currency_code(cls, iso_code: str) -> Denomination | None:
        """Family whose member set contains iso_code (case-insensitive), else None."""
        code = iso_code.upper()
        for member in cls:
            if code in member.member_currency_codes:
                return member
        return None

    @classmethod
    def from_tag(cls, tag: str) -> Denomination:
        """Parse a serialization tag ("dinar", ...).

        Raises:
            InvalidArgumentError: If tag names no known denomination
        """
        try:
            return cls(tag)
        except ValueError:
            accepted = tuple(member.value for member in cls)
            msg = f"Invalid currency type: {tag!r}; expected one of: {', '.join(accepted)}"
            raise InvalidArgumentError(
                msg, value=tag, field="type", accepted=accepted
            ) from None


_DENOMINATIONS: dict[Denomination, _DenominationInfo] = {
    Denomination.DINAR: _DenominationInfo(
        name=LocalizedText(en="Dinar", ar="دينار"),
        en_alternative="Denarius",
        description="Traditional Arabian currency unit derived from Roman denarius",
        plural_name="Dinars",
        origin="Roman",
        subdivision_unit="fils",
        currency_codes=frozenset({"KWD", "BHD", "JOD", "IQD", "TND", "DZD", "LYD"}),
        region_note="Dominant in Gulf states and North Africa",
    ),
    Denomination.RIYAL: _DenominationInfo(
        name=LocalizedText(en="Riyal", ar="ريال"),
        en_alternative="Rial",
        description="Royal currency denomination derived from Spanish real",
        plural_name="Riyals",
        origin="Spanish",
        subdivision_unit="halala",
        currency_codes=frozenset({"SAR", "QAR", "OMR", "YER"}),
        region_note="Gulf monarchies and Arabian Peninsula",
    ),
    Denomination.DIRHAM: _DenominationInfo(
        name=LocalizedText(en="Dirham", ar="درهم"),
        en_alternative="Drachma",
        description="Silver-based currency derived from Greek drachma",
        plural_name="Dirhams",
        origin="Greek",
        subdivision_unit="fils",
        currency_codes=frozenset({"AED", "MAD"}),
        region_note="UAE federation and Morocco",
    ),
    Denomination.POUND: _DenominationInfo(
        name=LocalizedText(en="Pound", ar="جنيه"),
        en_alternative="Livre",
        description="Weight-based currency system with colonial heritage",
        plural_name="Pounds",
        origin="British",
        subdivision_unit="piastre",
        currency_codes=frozenset({"EGP", "SDG", "LBP", "SYP"}),
        region_note="Levant region and Nile Valley",
    ),
    Denomination.SHEKEL: _DenominationInfo(
        name=LocalizedText(en="Shekel", ar="شيكل"),
        en_alternative="Sheqel",
        description="Ancient weight-based currency with biblical origins",
        plural_name="Shekels",
        origin="Ancient Hebrew",
        subdivision_unit="agora",
        currency_codes=frozenset({"ILS"}),
        region_note="Levantine region",
    ),
    Denomination.OUGUIYA: _DenominationInfo(
        name=LocalizedText(en="Ouguiya", ar="أوقية"),
        en_alternative="Uqiyyah",
        description="Unique non-decimal currency subdivided into 5 khoums",
        plural_name="Ouguiyas",
        origin="Islamic",
        subdivision_unit="khoum",
        currency_codes=frozenset({"MRU"}),
        region_note="West African transition zone",
    ),
}
