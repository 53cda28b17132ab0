"""Compact constructor for the static region tables."""

from mena.models import Currency, Denomination, LocalizedText, Region

__all__ = ["region"]


def region(
    code: str,
    dial_code: str,
    name: tuple[str, str],
    official: tuple[str, str],
    capital: tuple[str, str],
    currency: tuple[str, str, str, Denomination],
) -> Region:
    """Build a Region from (en, ar) pairs and (iso, adj_en, adj_ar, denomination)."""
    iso_code, adjective_en, adjective_ar, denomination = currency
    return Region(
        code=code,
        dial_code=dial_code,
        common_name=LocalizedText(*name),
        official_name=LocalizedText(*official),
        capital_name=LocalizedText(*capital),
        currency=Currency(
            iso_code=iso_code,
            adjective=LocalizedText(adjective_en, adjective_ar),
            denomination=denomination,
        ),
    )
