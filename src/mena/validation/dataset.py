"""Dataset consistency checks.

Validates a region collection against the invariants every lookup relies on.
Useful for CI and for callers assembling their own RegionLookup collections.

Architecture:
    - validate_dataset(): Main entry point, orchestrates the passes
    - _check_formats(): Pass 1 - code, dial code and ISO 4217 shapes
    - _check_names(): Pass 2 - every localized name non-empty
    - _check_uniqueness(): Pass 3 - region codes and dial codes
    - _check_member_sets(): Pass 4 - each ISO code in at most one denomination
    - _check_denominations(): Pass 5 - ISO code vs denomination member sets
    - _check_partition(): Pass 6 - sub-collections disjoint, master complete
    - _check_cldr(): Optional - ISO code is tender in its territory (Babel)

Python 3.13+.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Sequence
from datetime import date

from mena.core.babel_compat import get_babel_numbers
from mena.data import ALL_REGIONS, MIDDLE_EAST, NORTH_AFRICA
from mena.diagnostics import ValidationError, ValidationResult, ValidationWarning
from mena.models import Denomination, Region

__all__ = ["validate_dataset"]

logger = logging.getLogger(__name__)

_CODE_PATTERN = re.compile(r"[a-z]{2}")
_DIAL_CODE_PATTERN = re.compile(r"[0-9]{1,4}")
_ISO_CODE_PATTERN = re.compile(r"[A-Z]{3}")


def _check_formats(regions: Sequence[Region]) -> list[ValidationError]:
    errors: list[ValidationError] = []
    for region in regions:
        if not _CODE_PATTERN.fullmatch(region.code):
            errors.append(
                ValidationError(
                    code="invalid-code",
                    message=f"Region code {region.code!r} is not two lowercase letters",
                    region=region.code,
                )
            )
        if not _DIAL_CODE_PATTERN.fullmatch(region.dial_code):
            errors.append(
                ValidationError(
                    code="invalid-dial-code",
                    message=f"Dial code {region.dial_code!r} is not 1-4 digits",
                    region=region.code,
                )
            )
        if not _ISO_CODE_PATTERN.fullmatch(region.currency.iso_code):
            errors.append(
                ValidationError(
                    code="invalid-currency-code",
                    message=(
                        f"Currency code {region.currency.iso_code!r} "
                        "is not three uppercase letters"
                    ),
                    region=region.code,
                )
            )
    return errors


def _check_names(regions: Sequence[Region]) -> list[ValidationError]:
    errors: list[ValidationError] = []
    for region in regions:
        fields = {
            "common_name": region.common_name,
            "official_name": region.official_name,
            "capital_name": region.capital_name,
            "currency.adjective": region.currency.adjective,
        }
        for field_name, text in fields.items():
            for locale, value in (("en", text.en), ("ar", text.ar)):
                if not value.strip():
                    errors.append(
                        ValidationError(
                            code="empty-name",
                            message=f"{field_name} is empty for locale {locale!r}",
                            region=region.code,
                        )
                    )
    return errors


def _duplicates(values: Iterable[tuple[str, str]]) -> dict[str, list[str]]:
    """Group region codes by value; keep only values seen more than once."""
    seen: dict[str, list[str]] = {}
    for value, code in values:
        seen.setdefault(value, []).append(code)
    return {value: codes for value, codes in seen.items() if len(codes) > 1}


def _check_uniqueness(regions: Sequence[Region]) -> list[ValidationError]:
    errors: list[ValidationError] = []
    for value, codes in _duplicates((r.code.lower(), r.code) for r in regions).items():
        errors.append(
            ValidationError(
                code="duplicate-code",
                message=f"Region code {value!r} used {len(codes)} times",
            )
        )
    for value, codes in _duplicates((r.dial_code, r.code) for r in regions).items():
        errors.append(
            ValidationError(
                code="duplicate-dial-code",
                message=f"Dial code {value!r} shared by regions {', '.join(codes)}",
            )
        )
    return errors


def _check_member_sets() -> list[ValidationError]:
    """No ISO code may appear in the member sets of two denominations."""
    owners: dict[str, list[Denomination]] = {}
    for denomination in Denomination:
        for iso_code in denomination.member_currency_codes:
            owners.setdefault(iso_code, []).append(denomination)
    return [
        ValidationError(
            code="denomination-overlap",
            message=(
                f"{iso_code} is listed in several denominations: "
                f"{', '.join(d.value for d in families)}"
            ),
        )
        for iso_code, families in sorted(owners.items())
        if len(families) > 1
    ]


def _check_denominations(regions: Sequence[Region]) -> list[ValidationError]:
    """Every ISO code must sit in the member set of its record's denomination."""
    errors: list[ValidationError] = []
    for region in regions:
        currency = region.currency
        expected = Denomination.for_currency_code(currency.iso_code)
        if expected is None:
            errors.append(
                ValidationError(
                    code="unknown-currency",
                    message=f"{currency.iso_code} belongs to no denomination",
                    region=region.code,
                )
            )
        elif expected is not currency.denomination:
            errors.append(
                ValidationError(
                    code="denomination-mismatch",
                    message=(
                        f"{currency.iso_code} is declared {currency.denomination} "
                        f"but belongs to {expected}"
                    ),
                    region=region.code,
                )
            )
    return errors


def _check_partition() -> list[ValidationError]:
    errors: list[ValidationError] = []
    overlap = {r.code for r in MIDDLE_EAST} & {r.code for r in NORTH_AFRICA}
    if overlap:
        errors.append(
            ValidationError(
                code="subregion-overlap",
                message=f"Regions listed in both sub-collections: {', '.join(sorted(overlap))}",
            )
        )
    if ALL_REGIONS != MIDDLE_EAST + NORTH_AFRICA:
        errors.append(
            ValidationError(
                code="master-mismatch",
                message="ALL_REGIONS is not MIDDLE_EAST followed by NORTH_AFRICA",
            )
        )
    return errors


def _check_cldr(regions: Sequence[Region], on_date: date) -> list[ValidationWarning]:
    """Compare each record's currency with the CLDR tender list of its territory.

    Raises:
        BabelImportError: If Babel is not installed
    """
    numbers = get_babel_numbers()
    warnings: list[ValidationWarning] = []
    for region in regions:
        territory = region.code.upper()
        tender = numbers.get_territory_currencies(territory, start_date=on_date)
        if region.currency.iso_code not in tender:
            logger.warning(
                "CLDR mismatch for %s: %s not in %s", territory, region.currency.iso_code, tender
            )
            warnings.append(
                ValidationWarning(
                    code="cldr-currency-mismatch",
                    message=(
                        f"{region.currency.iso_code} is not a current tender "
                        f"of {territory} in CLDR"
                    ),
                    context=", ".join(tender) or None,
                )
            )
    return warnings


def validate_dataset(
    regions: Iterable[Region] | None = None,
    *,
    check_cldr: bool = False,
    on_date: date | None = None,
) -> ValidationResult:
    """Validate a region collection.

    Args:
        regions: Records to check. None checks the bundled dataset,
            including the sub-collection partition.
        check_cldr: Also cross-check currencies against Babel CLDR data.
            Findings are warnings; they never invalidate the result.
        on_date: Date for the CLDR tender check (default: today)

    Returns:
        ValidationResult with errors and warnings

    Raises:
        BabelImportError: If check_cldr is True and Babel is not installed

    Example:
        >>> validate_dataset().is_valid
        True
    """
    records = ALL_REGIONS if regions is None else tuple(regions)

    errors = [
        *_check_formats(records),
        *_check_names(records),
        *_check_uniqueness(records),
        *_check_member_sets(),
        *_check_denominations(records),
    ]
    if regions is None:
        errors.extend(_check_partition())

    warnings: list[ValidationWarning] = []
    if check_cldr:
        warnings.extend(_check_cldr(records, on_date or date.today()))

    logger.debug(
        "Validated %d regions: %d errors, %d warnings",
        len(records),
        len(errors),
        len(warnings),
    )
    return ValidationResult(errors=tuple(errors), warnings=tuple(warnings))
