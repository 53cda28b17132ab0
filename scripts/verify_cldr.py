#!/usr/bin/env python3
"""Verify the bundled dataset against its invariants and Babel CLDR data.

Runs mena.validate_dataset() with the CLDR cross-check enabled, then compares
each currency's minor-unit precision as reported by Babel.

Checks:
    1. Structural: dataset invariants (formats, uniqueness, denominations).
    2. Tender: record currency is a current tender of its territory in CLDR.
    3. Precision: Babel decimal digits per currency (informational, --verbose).

Exit codes:
    0: No structural errors (CLDR mismatches are warnings, not failures).
    1: Structural errors, or Babel missing.

Usage:
    verify_cldr.py [--verbose]

Python 3.13+. Requires Babel.
"""

from __future__ import annotations

import argparse
import sys


def _print_section(header: str, explanation: str, lines: list[str]) -> None:
    """Print a report section if non-empty."""
    if not lines:
        return
    print(f"{header} ({len(lines)}):")
    print(f"  ({explanation})")
    for line in lines:
        print(line)
    print()


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Verify the MENA dataset against Babel CLDR data.",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="List CLDR decimal digits for every currency.",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Run dataset verification checks."""
    args = _parse_args(argv)

    from mena import ALL_REGIONS, validate_dataset  # noqa: PLC0415
    from mena.core import BabelImportError  # noqa: PLC0415

    try:
        result = validate_dataset(check_cldr=True)
    except BabelImportError as e:
        print(f"[ERROR] {e}")
        return 1

    print("MENA Dataset CLDR Verification")
    print("=" * 50)
    print(f"Regions: {len(ALL_REGIONS)}")
    print()

    _print_section(
        "[ERROR] Structural errors",
        "Dataset invariants violated",
        [f"  {error.format()}" for error in result.errors],
    )
    _print_section(
        "[WARN] CLDR tender mismatches",
        "Record currency not listed as current tender; CLDR value shown",
        [f"  {w.message} (CLDR: {w.context})" for w in result.warnings],
    )

    if args.verbose:
        _print_section(
            "[INFO] Decimal digits",
            "Minor-unit precision per Babel CLDR",
            [
                f"  {r.currency.iso_code}: {r.currency.decimal_digits}"
                for r in ALL_REGIONS
            ],
        )

    if not result.is_valid:
        print(f"[FAIL] {result.error_count} structural error(s) found.")
        print("[EXIT-CODE] 1")
        return 1

    if result.warning_count:
        print(f"[PASS] {result.warning_count} CLDR mismatch(es).")
    else:
        print("[PASS] All checks passed.")
    print("[EXIT-CODE] 0")
    return 0


if __name__ == "__main__":
    sys.exit(main())
