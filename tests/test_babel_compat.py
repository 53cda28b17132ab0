"""Tests for babel_compat module - optional Babel dependency handling."""

import pytest

from mena.core.babel_compat import (
    BabelImportError,
    get_babel_numbers,
    get_locale_class,
    is_babel_available,
    require_babel,
)
from mena.enums import LocaleTag
from mena.locale_utils import get_babel_locale, get_text_direction


class TestBabelAvailability:
    """Test Babel availability checking."""

    def test_is_babel_available_returns_bool(self) -> None:
        assert isinstance(is_babel_available(), bool)

    def test_babel_is_available_in_test_environment(self) -> None:
        """Babel is part of the test extra."""
        assert is_babel_available() is True

    def test_require_babel_does_not_raise_when_available(self) -> None:
        require_babel("decimal_digits")


class TestBabelImportError:
    """Test BabelImportError exception class."""

    def test_message_includes_feature_and_install_hint(self) -> None:
        error = BabelImportError("text_direction")
        assert "text_direction" in str(error)
        assert "pip install mena[babel]" in str(error)
        assert error.feature == "text_direction"

    def test_is_import_error(self) -> None:
        assert isinstance(BabelImportError("x"), ImportError)

    def test_require_babel_raises_when_missing(self, monkeypatch: pytest.MonkeyPatch) -> None:
        from mena.core import babel_compat

        monkeypatch.setattr(babel_compat, "_check_babel_available", lambda: False)
        assert not is_babel_available()
        with pytest.raises(BabelImportError, match="my_feature"):
            require_babel("my_feature")
        with pytest.raises(BabelImportError):
            get_locale_class()


class TestLazyAccessors:
    """Accessors return the real Babel objects."""

    def test_get_locale_class(self) -> None:
        from babel import Locale

        assert get_locale_class() is Locale

    def test_get_babel_numbers(self) -> None:
        numbers = get_babel_numbers()
        assert numbers.get_currency_precision("JOD") == 3

    def test_get_babel_locale_cached(self) -> None:
        assert get_babel_locale(LocaleTag.AR) is get_babel_locale(LocaleTag.AR)
        assert get_babel_locale(LocaleTag.AR).language == "ar"

    def test_text_direction(self) -> None:
        assert get_text_direction(LocaleTag.AR) == "rtl"
        assert get_text_direction(LocaleTag.EN) == "ltr"
