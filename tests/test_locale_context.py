"""Tests for the process-wide display locale."""

import logging

import pytest
from hypothesis import given
from hypothesis import strategies as st

from mena import InvalidArgumentError, LocaleTag, get_locale, resolve, set_locale, using_locale
from mena.locale_utils import normalize_locale, parse_locale_tag
from mena.runtime import LocaleContext, locale_context
from tests.strategies import locale_spellings, unsupported_locales


class TestDefaults:
    """State at process start."""

    def test_default_is_arabic(self) -> None:
        assert get_locale() is LocaleTag.AR
        assert locale_context.default is LocaleTag.AR

    def test_fresh_context_with_custom_default(self) -> None:
        ctx = LocaleContext("en")
        assert ctx.get() is LocaleTag.EN
        ctx.set("ar")
        ctx.reset()
        assert ctx.get() is LocaleTag.EN

    def test_invalid_default_rejected(self) -> None:
        with pytest.raises(InvalidArgumentError):
            LocaleContext("fr")


class TestSetLocale:
    """set_locale validation and effects."""

    def test_set_and_get(self) -> None:
        set_locale("en")
        assert get_locale() is LocaleTag.EN
        set_locale(LocaleTag.AR)
        assert get_locale() is LocaleTag.AR

    @given(spelling=locale_spellings())
    def test_accepts_case_and_whitespace_variants(self, spelling: str) -> None:
        set_locale(spelling)
        assert get_locale().value == spelling.strip().lower()

    @pytest.mark.parametrize("value", ["fr", "ar-EG", "en_US", "", "english"])
    def test_rejects_unsupported(self, value: str) -> None:
        with pytest.raises(InvalidArgumentError) as exc_info:
            set_locale(value)
        assert exc_info.value.value == value
        assert exc_info.value.field == "locale"
        assert exc_info.value.accepted == ("ar", "en")

    @given(value=unsupported_locales)
    def test_rejection_keeps_previous_locale(self, value: str) -> None:
        set_locale("en")
        with pytest.raises(InvalidArgumentError):
            set_locale(value)
        assert get_locale() is LocaleTag.EN

    def test_rejects_non_string(self) -> None:
        with pytest.raises(InvalidArgumentError):
            set_locale(42)  # type: ignore[arg-type]

    def test_invalid_argument_is_value_error(self) -> None:
        with pytest.raises(ValueError, match="Unsupported locale 'fr'"):
            set_locale("fr")

    def test_generation_counts_successful_sets(self) -> None:
        start = locale_context.generation
        set_locale("en")
        set_locale("en")
        with pytest.raises(InvalidArgumentError):
            set_locale("xx")
        assert locale_context.generation == start + 2

    def test_change_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="mena.runtime.locale_context"):
            set_locale("en")
        assert "Display locale changed: ar -> en" in caplog.text


class TestResolve:
    """resolve() picks by current locale."""

    @given(en_value=st.text(), ar_value=st.text())
    def test_resolve_picks_by_locale(self, en_value: str, ar_value: str) -> None:
        set_locale("en")
        assert resolve(en_value, ar_value) == en_value
        set_locale("ar")
        assert resolve(en_value, ar_value) == ar_value

    def test_resolve_is_generic(self) -> None:
        set_locale("en")
        assert resolve(1, 2) == 1


class TestUsingLocale:
    """Temporary locale switch."""

    def test_restores_previous(self) -> None:
        with using_locale("en") as tag:
            assert tag is LocaleTag.EN
            assert get_locale() is LocaleTag.EN
        assert get_locale() is LocaleTag.AR

    def test_restores_on_error(self) -> None:
        with pytest.raises(RuntimeError), using_locale("en"):
            raise RuntimeError
        assert get_locale() is LocaleTag.AR

    def test_switch_is_atomic_with_read(self) -> None:
        """The previous locale is read and replaced under one lock hold."""

        class RecordingContext(LocaleContext):
            def __init__(self) -> None:
                super().__init__()
                self.lock_held: list[bool] = []

            def set(self, locale: str | LocaleTag) -> None:
                self.lock_held.append(self._lock._is_owned())  # type: ignore[attr-defined]
                super().set(locale)

        ctx = RecordingContext()
        with ctx.using("en"):
            assert ctx.get() is LocaleTag.EN
        assert ctx.get() is LocaleTag.AR
        assert ctx.lock_held[0] is True

    def test_invalid_locale_raises_before_switch(self) -> None:
        start = locale_context.generation
        with pytest.raises(InvalidArgumentError), using_locale("de"):
            pass
        assert locale_context.generation == start


class TestTextDirection:
    """CLDR text direction via Babel."""

    def test_arabic_is_rtl(self) -> None:
        assert locale_context.text_direction("ar") == "rtl"

    def test_english_is_ltr(self) -> None:
        assert locale_context.text_direction(LocaleTag.EN) == "ltr"

    def test_defaults_to_current(self) -> None:
        set_locale("en")
        assert locale_context.text_direction() == "ltr"


class TestLocaleUtils:
    """Locale tag normalization."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [("EN", "en"), (" ar ", "ar"), ("en-US", "en_us"), ("Ar_Eg", "ar_eg")],
    )
    def test_normalize_locale(self, raw: str, expected: str) -> None:
        assert normalize_locale(raw) == expected

    def test_parse_locale_tag_passthrough(self) -> None:
        assert parse_locale_tag(LocaleTag.EN) is LocaleTag.EN
