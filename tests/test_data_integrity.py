"""Property tests over the bundled dataset."""

import re

from hypothesis import given

from mena import ALL_REGIONS, MIDDLE_EAST, NORTH_AFRICA, Denomination
from mena.models import Region
from tests.strategies import denominations, regions


class TestCollections:
    """Master collection and sub-collections."""

    def test_master_is_concatenation(self) -> None:
        assert len(ALL_REGIONS) == len(MIDDLE_EAST) + len(NORTH_AFRICA)
        assert ALL_REGIONS == MIDDLE_EAST + NORTH_AFRICA

    def test_sizes(self) -> None:
        assert len(MIDDLE_EAST) == 12
        assert len(NORTH_AFRICA) == 7

    def test_sub_collections_disjoint(self) -> None:
        assert not {r.code for r in MIDDLE_EAST} & {r.code for r in NORTH_AFRICA}

    def test_declaration_order(self) -> None:
        assert [r.code for r in MIDDLE_EAST] == [
            "sa", "ae", "kw", "qa", "bh", "om", "jo", "lb", "ps", "iq", "sy", "ye",
        ]
        assert [r.code for r in NORTH_AFRICA] == ["eg", "sd", "ly", "tn", "dz", "ma", "mr"]


class TestRecordInvariants:
    """Field formats and uniqueness."""

    def test_codes_unique(self) -> None:
        codes = [r.code for r in ALL_REGIONS]
        assert len(set(codes)) == len(codes)

    def test_dial_codes_unique(self) -> None:
        dial_codes = [r.dial_code for r in ALL_REGIONS]
        assert len(set(dial_codes)) == len(dial_codes)

    @given(region=regions)
    def test_formats(self, region: Region) -> None:
        assert re.fullmatch(r"[a-z]{2}", region.code)
        assert region.dial_code.isdigit()
        assert re.fullmatch(r"[A-Z]{3}", region.currency.iso_code)

    @given(region=regions)
    def test_names_non_empty(self, region: Region) -> None:
        for text in (region.common_name, region.official_name, region.capital_name):
            assert text.en
            assert text.ar

    @given(denomination=denominations)
    def test_denomination_cross_consistency(self, denomination: Denomination) -> None:
        """Every record using a member code is classified as that denomination."""
        for region in ALL_REGIONS:
            if region.currency.iso_code in denomination.member_currency_codes:
                assert region.currency.denomination is denomination

    def test_every_currency_has_a_denomination(self) -> None:
        for region in ALL_REGIONS:
            assert Denomination.for_currency_code(region.currency.iso_code) is not None
