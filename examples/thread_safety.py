"""Thread Safety Example - The process-wide display locale under threads.

Thread Safety:
    Every read and write of the display locale is serialized by an RLock, and
    every locale-aware accessor reads it exactly once. Two accessors called
    one after another may still observe different locales if another thread
    calls set_locale() in between.

Demonstrates:
1. Concurrent lookups (always safe; indexes are immutable once built)
2. The cross-call race with locale-aware accessors
3. The race-free pattern: pass the locale explicitly

Python 3.13+.
"""

from __future__ import annotations

import threading
from concurrent.futures import ThreadPoolExecutor

from mena import ALL_REGIONS, FieldKey, LocaleTag, find_by, set_locale


# Example 1: Concurrent lookups
def example_1_concurrent_lookups() -> None:
    """Example 1: Many threads reading from the shared index cache."""
    print("=" * 60)
    print("Example 1: Concurrent Lookups")
    print("=" * 60)

    codes = [region.code for region in ALL_REGIONS]

    def worker(code: str) -> str:
        region = find_by(code, FieldKey.CODE)
        assert region is not None
        return f"{region.code}:{region.dial_code}"

    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(worker, codes * 10))

    print(f"[OK] {len(results)} lookups, {len(set(results))} distinct results")


# Example 2: The cross-call race
def example_2_cross_call_race() -> None:
    """Example 2: Two locale-aware reads may straddle a set_locale()."""
    print("\n" + "=" * 60)
    print("Example 2: Cross-call Race (documented, not prevented)")
    print("=" * 60)

    region = find_by("eg", FieldKey.CODE)
    assert region is not None
    stop = threading.Event()

    def toggler() -> None:
        while not stop.is_set():
            set_locale("en")
            set_locale("ar")

    thread = threading.Thread(target=toggler)
    thread.start()
    mixed = 0
    for _ in range(2000):
        name = region.resolved_common_name
        capital = region.resolved_capital_name
        if (name == region.common_name.en) != (capital == region.capital_name.en):
            mixed += 1
    stop.set()
    thread.join()
    set_locale("ar")

    print(f"[INFO] {mixed} of 2000 pairs rendered under two different locales")


# Example 3: Explicit locale
def example_3_explicit_locale() -> None:
    """Example 3: Explicit-locale accessors never read the global setting."""
    print("\n" + "=" * 60)
    print("Example 3: Explicit Locale (race-free)")
    print("=" * 60)

    region = find_by("eg", FieldKey.CODE)
    assert region is not None

    def render(locale: LocaleTag) -> str:
        return f"{region.common_name.get(locale)} / {region.capital_name.get(locale)}"

    with ThreadPoolExecutor(max_workers=4) as pool:
        rendered = set(pool.map(render, [LocaleTag.EN, LocaleTag.AR] * 50))

    for line in sorted(rendered):
        print(f"  {line}")
    # Output: exactly two lines, never a mixed pair


if __name__ == "__main__":
    example_1_concurrent_lookups()
    example_2_cross_call_race()
    example_3_explicit_locale()
