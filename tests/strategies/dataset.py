"""Hypothesis strategies for mena dataset and locale testing.

Usage:
    from hypothesis import given
    from tests.strategies.dataset import regions, locale_spellings

    @given(region=regions)
    def test_region_property(region):
        ...
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from hypothesis import event
from hypothesis import strategies as st
from hypothesis.strategies import composite

from mena.data import ALL_REGIONS
from mena.enums import LocaleTag
from mena.lookup import FieldKey
from mena.models import Currency, Denomination, LocalizedText

if TYPE_CHECKING:
    from hypothesis.strategies import SearchStrategy

# ============================================================================
# DATASET
# ============================================================================

regions = st.sampled_from(ALL_REGIONS)

field_keys: SearchStrategy[FieldKey] = st.sampled_from(list(FieldKey))

concrete_field_keys: SearchStrategy[FieldKey] = st.sampled_from(
    [key for key in FieldKey if not key.is_locale_dependent]
)

denominations: SearchStrategy[Denomination] = st.sampled_from(list(Denomination))

# ============================================================================
# LOCALES
# ============================================================================

locale_tags: SearchStrategy[LocaleTag] = st.sampled_from(list(LocaleTag))


@composite
def locale_spellings(draw: st.DrawFn) -> str:
    """Accepted spelling of a supported locale: any case, padded with whitespace.

    Events emitted:
    - locale_spelling={exact|cased|padded}
    """
    tag = draw(locale_tags).value
    form = draw(st.sampled_from(["exact", "cased", "padded"]))
    match form:
        case "exact":
            spelling = tag
        case "cased":
            spelling = "".join(
                ch.upper() if draw(st.booleans()) else ch for ch in tag
            )
        case _:
            prefix = draw(st.sampled_from(["", " ", "\t"]))
            suffix = draw(st.sampled_from(["", " ", "\n"]))
            spelling = f"{prefix}{tag}{suffix}"
    event(f"locale_spelling={form}")
    return spelling


unsupported_locales: SearchStrategy[str] = st.text(max_size=8).filter(
    lambda s: s.strip().lower().replace("-", "_") not in ("ar", "en")
)

# ============================================================================
# MODEL VALUES
# ============================================================================

non_empty_text: SearchStrategy[str] = st.text(min_size=1, max_size=30)

localized_texts: SearchStrategy[LocalizedText] = st.builds(
    LocalizedText, en=non_empty_text, ar=non_empty_text
)


@composite
def currencies(draw: st.DrawFn) -> Currency:
    """Well-formed Currency with a denomination-consistent ISO code.

    Events emitted:
    - currency_denomination={tag}
    """
    denomination = draw(denominations)
    iso_code = draw(st.sampled_from(sorted(denomination.member_currency_codes)))
    event(f"currency_denomination={denomination.value}")
    return Currency(
        iso_code=iso_code,
        adjective=draw(localized_texts),
        denomination=denomination,
    )
