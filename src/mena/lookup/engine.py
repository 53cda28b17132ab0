"""Lookup engine: exact, case-insensitive search and indexing over regions.

Architecture:
    - RegionLookup: owns a record tuple and a lock-guarded per-key index cache
    - default_lookup: instance over ALL_REGIONS backing the module functions
    - find_by/build_index/get_by_*: module-level shortcuts to default_lookup

Matching:
    A query matches a record when query.lower() == stored_value.lower().
    There is no substring, prefix or fuzzy matching. Absence is reported as
    None, never as an exception.

Thread Safety:
    Cached indexes are keyed by CONCRETE FieldKey. Current-locale keys are
    resolved to their EN/AR variant once per call, so a concurrent
    set_locale() can never leave a call holding an index built for the
    other locale. Index construction runs under the cache lock; the cached
    dicts are never handed out, only read.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from threading import RLock

from mena.data import ALL_REGIONS
from mena.diagnostics import DuplicateKeyError
from mena.models import Region

from .keys import FieldKey

__all__ = [
    "RegionLookup",
    "build_index",
    "clear_index_cache",
    "default_lookup",
    "find_by",
    "get_by_code",
    "get_by_currency_code",
    "get_by_dial_code",
    "get_by_index",
    "get_by_name",
]

logger = logging.getLogger(__name__)


class RegionLookup:
    """Search and index a fixed collection of regions.

    Examples:
        >>> lookup = RegionLookup(ALL_REGIONS)
        >>> lookup.find_by("PS", FieldKey.CODE).dial_code
        '970'
        >>> lookup.find_by("zz", FieldKey.CODE) is None
        True
        >>> lookup.build_index(FieldKey.DIAL_CODE)["966"].code
        'sa'
    """

    __slots__ = ("_hits", "_indexes", "_lock", "_misses", "_regions")

    def __init__(self, regions: Iterable[Region]) -> None:
        self._regions: tuple[Region, ...] = tuple(regions)
        self._indexes: dict[FieldKey, dict[str, Region]] = {}
        self._lock = RLock()
        self._hits = 0
        self._misses = 0

    @property
    def regions(self) -> tuple[Region, ...]:
        return self._regions

    def __len__(self) -> int:
        return len(self._regions)

    # ------------------------------------------------------------------
    # Search
    # ------------------------------------------------------------------

    def find_by(self, query: str, key: FieldKey) -> Region | None:
        """Return the record whose key field equals query, ignoring case.

        Args:
            query: Value to look for. Empty queries never match.
            key: Field to compare; current-locale keys follow get_locale()

        Returns:
            Matching Region, or None when nothing matches
        """
        if not query:
            return None
        return self._cached_index(key.concrete()).get(query.lower())

    def build_index(self, key: FieldKey) -> dict[str, Region]:
        """Map every record's lowercased key field to the record.

        Records with no value for key (e.g. no currency symbol) are skipped.
        When records share a value of a non-unique field (currency code,
        symbol, names), the first record in declaration order is indexed.
        The returned dict is a fresh copy owned by the caller.

        Raises:
            DuplicateKeyError: If two records share a code or dial code
        """
        return dict(self._cached_index(key.concrete()))

    def clear_cache(self) -> None:
        """Drop all cached indexes and reset hit/miss counters."""
        with self._lock:
            self._indexes.clear()
            self._hits = 0
            self._misses = 0

    def cache_info(self) -> dict[str, int | tuple[str, ...]]:
        """Cache statistics: built index keys, hits and misses."""
        with self._lock:
            return {
                "size": len(self._indexes),
                "hits": self._hits,
                "misses": self._misses,
                "keys": tuple(str(key) for key in self._indexes),
            }

    # ------------------------------------------------------------------
    # Convenience getters
    # ------------------------------------------------------------------

    def get_by_index(self, index: int) -> Region | None:
        """Record at position index in declaration order, or None if out of range.

        Negative indexes are out of range.
        """
        if 0 <= index < len(self._regions):
            return self._regions[index]
        return None

    def get_by_code(self, code: str) -> Region | None:
        return self.find_by(code, FieldKey.CODE)

    def get_by_name(self, name: str) -> Region | None:
        """Look up by English common name ("Egypt")."""
        return self.find_by(name, FieldKey.COMMON_NAME_EN)

    def get_by_dial_code(self, dial_code: str) -> Region | None:
        """Look up by dial code; a leading '+' is accepted."""
        return self.find_by(dial_code.removeprefix("+"), FieldKey.DIAL_CODE)

    def get_by_currency_code(self, iso_code: str) -> Region | None:
        return self.find_by(iso_code, FieldKey.CURRENCY_CODE)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _cached_index(self, key: FieldKey) -> dict[str, Region]:
        with self._lock:
            index = self._indexes.get(key)
            if index is not None:
                self._hits += 1
                return index
            self._misses += 1
            index = self._build(key)
            self._indexes[key] = index
            return index

    def _build(self, key: FieldKey) -> dict[str, Region]:
        index: dict[str, Region] = {}
        for region in self._regions:
            value = key.select(region)
            if value is None:
                continue
            normalized = value.lower()
            # Non-unique fields (shared currency): first record in declaration order wins.
            existing = index.get(normalized)
            if existing is None:
                index[normalized] = region
            elif key.is_unique:
                raise DuplicateKeyError(normalized, str(key), (existing.code, region.code))
        logger.debug(
            "Built %s index: %d entries from %d regions", key, len(index), len(self._regions)
        )
        return index


default_lookup = RegionLookup(ALL_REGIONS)


def find_by(query: str, key: FieldKey) -> Region | None:
    """Find a region in ALL_REGIONS. See RegionLookup.find_by()."""
    return default_lookup.find_by(query, key)


def build_index(key: FieldKey) -> dict[str, Region]:
    """Index ALL_REGIONS by key. See RegionLookup.build_index()."""
    return default_lookup.build_index(key)


def clear_index_cache() -> None:
    default_lookup.clear_cache()


def get_by_index(index: int) -> Region | None:
    return default_lookup.get_by_index(index)


def get_by_code(code: str) -> Region | None:
    return default_lookup.get_by_code(code)


def get_by_name(name: str) -> Region | None:
    return default_lookup.get_by_name(name)


def get_by_dial_code(dial_code: str) -> Region | None:
    return default_lookup.get_by_dial_code(dial_code)


def get_by_currency_code(iso_code: str) -> Region | None:
    return default_lookup.get_by_currency_code(iso_code)
