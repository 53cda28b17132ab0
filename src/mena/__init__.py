"""mena - Bilingual reference data for Middle East and North Africa countries.

A static, immutable dataset of 19 MENA regions with English and Arabic names,
currencies, dial codes and flag image URLs, plus exact case-insensitive
lookup and a process-wide display locale.

Public API:
    Region, Currency, Denomination, LocalizedText - Immutable data model
    ALL_REGIONS, MIDDLE_EAST, NORTH_AFRICA - The dataset
    FieldKey - Field selector for lookups and indexes
    find_by, build_index - Lookup over ALL_REGIONS
    RegionLookup - Lookup over a caller-supplied collection
    get_locale, set_locale, resolve, using_locale - Display locale
    validate_dataset - Dataset consistency checks

Exceptions:
    MenaError - Base exception class
    InvalidArgumentError - Rejected locale or payload
    DataIntegrityError - Dataset invariant violated
    DuplicateKeyError - Index key collision
    BabelImportError - Babel-only feature used without Babel

Submodules:
    mena.flags - Flag image URL helpers
    mena.enums - LocaleTag, ImageSize, ImageType, EmojiSize
    mena.diagnostics - Error types and validation results
    mena.runtime.locale_context - Thread-safe display locale holder
"""

from .core import BabelImportError
from .data import ALL_REGIONS, MIDDLE_EAST, NORTH_AFRICA
from .diagnostics import (
    DataIntegrityError,
    DuplicateKeyError,
    InvalidArgumentError,
    MenaError,
)
from .enums import EmojiSize, ImageSize, ImageType, LocaleTag
from .lookup import (
    FieldKey,
    RegionLookup,
    build_index,
    clear_index_cache,
    find_by,
    get_by_code,
    get_by_currency_code,
    get_by_dial_code,
    get_by_index,
    get_by_name,
)
from .models import Currency, Denomination, LocalizedText, Region
from .runtime import get_locale, resolve, set_locale, using_locale
from .validation import validate_dataset

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("mena")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "ALL_REGIONS",
    "BabelImportError",
    "Currency",
    "DataIntegrityError",
    "Denomination",
    "DuplicateKeyError",
    "EmojiSize",
    "FieldKey",
    "ImageSize",
    "ImageType",
    "InvalidArgumentError",
    "LocaleTag",
    "LocalizedText",
    "MIDDLE_EAST",
    "MenaError",
    "NORTH_AFRICA",
    "Region",
    "RegionLookup",
    "__version__",
    "build_index",
    "clear_index_cache",
    "find_by",
    "get_by_code",
    "get_by_currency_code",
    "get_by_dial_code",
    "get_by_index",
    "get_by_name",
    "get_locale",
    "resolve",
    "set_locale",
    "using_locale",
    "validate_dataset",
]
