"""FieldKey: selects which Region field a lookup or index targets.

Keys come in two kinds:
    - Concrete keys (CODE, COMMON_NAME_EN, CURRENCY_SYMBOL_AR, ...) map to a
      selector function in _SELECTORS.
    - Current-locale keys (COMMON_NAME, CAPITAL_NAME, ...) have no selector
      of their own. concrete() swaps them for their EN or AR variant after
      reading the display locale once.

Both tables are checked against the enum at import time, so adding a member
without a selector fails on import rather than at lookup.

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Callable
from enum import StrEnum

from mena.enums import LocaleTag
from mena.models import Region
from mena.runtime.locale_context import get_locale

__all__ = ["FieldKey", "Selector"]

type Selector = Callable[[Region], str | None]


class FieldKey(StrEnum):
    """Region field used as lookup or index key.

    StrEnum provides automatic string conversion: str(FieldKey.CODE) == "code"
    """

    # Identity
    CODE = "code"
    DIAL_CODE = "dial_code"
    CURRENCY_CODE = "currency_code"

    # Names
    COMMON_NAME = "common_name"
    COMMON_NAME_EN = "common_name_en"
    COMMON_NAME_AR = "common_name_ar"
    OFFICIAL_NAME = "official_name"
    OFFICIAL_NAME_EN = "official_name_en"
    OFFICIAL_NAME_AR = "official_name_ar"
    CAPITAL_NAME = "capital_name"
    CAPITAL_NAME_EN = "capital_name_en"
    CAPITAL_NAME_AR = "capital_name_ar"

    # Currency
    CURRENCY_NAME = "currency_name"
    CURRENCY_NAME_EN = "currency_name_en"
    CURRENCY_NAME_AR = "currency_name_ar"
    CURRENCY_SYMBOL = "currency_symbol"
    CURRENCY_SYMBOL_EN = "currency_symbol_en"
    CURRENCY_SYMBOL_AR = "currency_symbol_ar"

    @property
    def is_unique(self) -> bool:
        """True for keys whose values identify one region (code, dial code).

        Other fields may repeat across regions; two countries can share a
        currency.
        """
        return self in _UNIQUE_KEYS

    @property
    def is_locale_dependent(self) -> bool:
        """True for keys that follow the current display locale."""
        return self in _CURRENT_VARIANTS

    def concrete(self, locale: LocaleTag | None = None) -> FieldKey:
        """Concrete key for this key under locale (default: current locale).

        Concrete keys return themselves without reading the locale.
        """
        variants = _CURRENT_VARIANTS.get(self)
        if variants is None:
            return self
        en_key, ar_key = variants
        tag = get_locale() if locale is None else locale
        return en_key if tag is LocaleTag.EN else ar_key

    def select(self, region: Region) -> str | None:
        """Extract this key's value from region.

        Returns None for regions with no value (currency symbol unknown).
        """
        return _SELECTORS[self.concrete()](region)


_SELECTORS: dict[FieldKey, Selector] = {
    FieldKey.CODE: lambda r: r.code,
    FieldKey.DIAL_CODE: lambda r: r.dial_code,
    FieldKey.CURRENCY_CODE: lambda r: r.currency.iso_code,
    FieldKey.COMMON_NAME_EN: lambda r: r.common_name.en,
    FieldKey.COMMON_NAME_AR: lambda r: r.common_name.ar,
    FieldKey.OFFICIAL_NAME_EN: lambda r: r.official_name.en,
    FieldKey.OFFICIAL_NAME_AR: lambda r: r.official_name.ar,
    FieldKey.CAPITAL_NAME_EN: lambda r: r.capital_name.en,
    FieldKey.CAPITAL_NAME_AR: lambda r: r.capital_name.ar,
    FieldKey.CURRENCY_NAME_EN: lambda r: r.currency.full_name(LocaleTag.EN),
    FieldKey.CURRENCY_NAME_AR: lambda r: r.currency.full_name(LocaleTag.AR),
    FieldKey.CURRENCY_SYMBOL_EN: lambda r: r.currency.symbol(LocaleTag.EN),
    FieldKey.CURRENCY_SYMBOL_AR: lambda r: r.currency.symbol(LocaleTag.AR),
}

_UNIQUE_KEYS: frozenset[FieldKey] = frozenset({FieldKey.CODE, FieldKey.DIAL_CODE})

# Current-locale key -> (EN variant, AR variant)
_CURRENT_VARIANTS: dict[FieldKey, tuple[FieldKey, FieldKey]] = {
    FieldKey.COMMON_NAME: (FieldKey.COMMON_NAME_EN, FieldKey.COMMON_NAME_AR),
    FieldKey.OFFICIAL_NAME: (FieldKey.OFFICIAL_NAME_EN, FieldKey.OFFICIAL_NAME_AR),
    FieldKey.CAPITAL_NAME: (FieldKey.CAPITAL_NAME_EN, FieldKey.CAPITAL_NAME_AR),
    FieldKey.CURRENCY_NAME: (FieldKey.CURRENCY_NAME_EN, FieldKey.CURRENCY_NAME_AR),
    FieldKey.CURRENCY_SYMBOL: (FieldKey.CURRENCY_SYMBOL_EN, FieldKey.CURRENCY_SYMBOL_AR),
}


def _check_exhaustive() -> None:
    covered = set(_SELECTORS) | set(_CURRENT_VARIANTS)
    missing = set(FieldKey) - covered
    overlap = set(_SELECTORS) & set(_CURRENT_VARIANTS)
    if missing or overlap:
        msg = (
            f"FieldKey dispatch out of sync: missing={sorted(missing)}, "
            f"overlap={sorted(overlap)}"
        )
        raise RuntimeError(msg)
    for en_key, ar_key in _CURRENT_VARIANTS.values():
        if en_key not in _SELECTORS or ar_key not in _SELECTORS:
            msg = f"Current-locale variants must be concrete: {en_key}, {ar_key}"
            raise RuntimeError(msg)


_check_exhaustive()
