"""Region lookup by field: FieldKey dispatch and the lookup engine.

Python 3.13+.
"""

from .engine import (
    RegionLookup,
    build_index,
    clear_index_cache,
    default_lookup,
    find_by,
    get_by_code,
    get_by_currency_code,
    get_by_dial_code,
    get_by_index,
    get_by_name,
)
from .keys import FieldKey

__all__ = [
    "FieldKey",
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
