"""Tests for the mena package __init__.py module.

Covers:
- __all__ integrity: every exported name is accessible
- Fallback version when package metadata is unavailable
- Top-level re-exports are the same objects as their defining modules
"""

from __future__ import annotations

import sys
from importlib.metadata import PackageNotFoundError
from unittest.mock import MagicMock, patch

import mena


class TestPublicApi:
    """Exported names."""

    def test_all_names_accessible(self) -> None:
        for name in mena.__all__:
            assert hasattr(mena, name), name

    def test_all_is_unique(self) -> None:
        assert len(set(mena.__all__)) == len(mena.__all__)

    def test_reexports_are_identical(self) -> None:
        from mena.lookup.engine import find_by
        from mena.models.region import Region
        from mena.runtime.locale_context import set_locale

        assert mena.find_by is find_by
        assert mena.Region is Region
        assert mena.set_locale is set_locale

    def test_version_is_string(self) -> None:
        assert isinstance(mena.__version__, str)
        assert mena.__version__


def test_package_not_found_error() -> None:
    """PackageNotFoundError during metadata lookup sets __version__ to the dev fallback."""
    saved = sys.modules.pop("mena")
    try:
        mock_version = MagicMock(side_effect=PackageNotFoundError("mena"))
        with patch("importlib.metadata.version", mock_version):
            import mena as reloaded

            assert reloaded.__version__ == "0.0.0+dev"
    finally:
        sys.modules["mena"] = saved
