"""Concurrency tests for the display locale and index cache."""

from concurrent.futures import ThreadPoolExecutor

from mena import ALL_REGIONS, FieldKey, LocaleTag, find_by, get_locale, set_locale
from mena.lookup import RegionLookup


class TestLocaleUnderContention:
    """Concurrent set/get never observes a torn value."""

    def test_reads_always_supported(self) -> None:
        def writer(i: int) -> None:
            set_locale("en" if i % 2 else "ar")

        def reader(_: int) -> LocaleTag:
            return get_locale()

        with ThreadPoolExecutor(max_workers=8) as pool:
            list(pool.map(writer, range(200)))
            seen = set(pool.map(reader, range(200)))
        assert seen <= {LocaleTag.EN, LocaleTag.AR}

    def test_lookup_consistent_with_locale_read(self) -> None:
        """Current-locale lookups always use one locale per call."""

        def task(i: int) -> bool:
            set_locale("en" if i % 2 else "ar")
            region = find_by("ps", FieldKey.CODE)
            assert region is not None
            name = FieldKey.COMMON_NAME.select(region)
            return name in (region.common_name.en, region.common_name.ar)

        with ThreadPoolExecutor(max_workers=8) as pool:
            assert all(pool.map(task, range(200)))


class TestIndexCacheUnderContention:
    """Indexes are built once per concrete key."""

    def test_single_build_per_key(self) -> None:
        lookup = RegionLookup(ALL_REGIONS)

        def task(_: int) -> str | None:
            region = lookup.find_by("966", FieldKey.DIAL_CODE)
            return region.code if region else None

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = set(pool.map(task, range(100)))

        assert results == {"sa"}
        info = lookup.cache_info()
        assert info["misses"] == 1
        assert info["hits"] == 99
