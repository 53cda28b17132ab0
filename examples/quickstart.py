"""Quickstart example for mena.

This example demonstrates lookups, the display locale and derived values.

Note: The display locale is process-wide. Examples switch it freely; in a
multi-threaded application prefer the explicit-locale accessors shown in
Example 3.
"""

import json

from mena import (
    ALL_REGIONS,
    FieldKey,
    ImageSize,
    ImageType,
    build_index,
    find_by,
    set_locale,
    using_locale,
)

# Example 1: Lookup by code
print("=" * 50)
print("Example 1: Lookup by Code")
print("=" * 50)

palestine = find_by("PS", FieldKey.CODE)
assert palestine is not None
print(palestine.code, palestine.dial_code_with_plus, palestine.currency.iso_code)
# Output: ps +970 ILS

print(find_by("zz", FieldKey.CODE))
# Output: None

# Example 2: Locale-aware accessors
print("\n" + "=" * 50)
print("Example 2: Display Locale")
print("=" * 50)

set_locale("en")
print(palestine.resolved_common_name, "-", palestine.resolved_capital_name)
# Output: Palestine - Jerusalem

set_locale("ar")
print(palestine.resolved_common_name, "-", palestine.resolved_capital_name)
# Output: فلسطين - القدس

with using_locale("en"):
    print(palestine.resolved_currency_full_name)
    # Output: Palestinian Shekel

# Example 3: Explicit locale (ignores the global setting)
print("\n" + "=" * 50)
print("Example 3: Explicit Locale")
print("=" * 50)

egypt = find_by("Egypt", FieldKey.COMMON_NAME_EN)
assert egypt is not None
print(egypt.currency.full_name("en"), "/", egypt.currency.full_name("ar"))
# Output: Egyptian Pound / جنيه مصري
print(egypt.currency.symbol("ar"), egypt.currency.decimal_digits)
# Output: ج.م 2

# Example 4: Indexes
print("\n" + "=" * 50)
print("Example 4: Indexes")
print("=" * 50)

by_dial_code = build_index(FieldKey.DIAL_CODE)
print(by_dial_code["966"].common_name.en)
# Output: Saudi Arabia

set_locale("en")
by_capital = build_index(FieldKey.CAPITAL_NAME)
print(sorted(by_capital)[:3])
# Output: ['abu dhabi', 'algiers', 'amman']

# Example 5: Flags
print("\n" + "=" * 50)
print("Example 5: Flag URLs")
print("=" * 50)

print(egypt.svg_url)
# Output: https://flagcdn.com/eg.svg
print(egypt.image_url(ImageSize.W320, ImageType.PNG))
# Output: https://flagcdn.com/w320/eg.png

# Example 6: JSON
print("\n" + "=" * 50)
print("Example 6: JSON Projection")
print("=" * 50)

print(json.dumps(ALL_REGIONS[0].to_dict(), ensure_ascii=False, indent=2))
