"""mena exception hierarchy.

Hierarchy:
    MenaError (base)
    ├─ InvalidArgumentError (also ValueError) - rejected caller input
    └─ DataIntegrityError - dataset violates a consistency invariant
       └─ DuplicateKeyError - two records normalize to the same index key

Lookups never raise for "not found"; absence is reported as None.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Iterable

__all__ = [
    "DataIntegrityError",
    "DuplicateKeyError",
    "InvalidArgumentError",
    "MenaError",
]


class MenaError(Exception):
    """Base exception for all mena errors."""


class InvalidArgumentError(MenaError, ValueError):
    """Caller-supplied value was rejected.

    Raised by set_locale() for unrecognized locale tags and by from_dict()
    deserializers for missing fields or unknown denomination tags. The
    operation has no side effects when this is raised.

    Attributes:
        value: The offending value (None when a field was absent)
        field: Name of the parameter or payload field involved
        accepted: Accepted values, when the set is closed (empty otherwise)
    """

    def __init__(
        self,
        message: str,
        *,
        value: object = None,
        field: str = "",
        accepted: Iterable[str] = (),
    ) -> None:
        """Initialize InvalidArgumentError.

        Args:
            message: Human-readable error message
            value: The offending value
            field: Parameter or payload field name
            accepted: Closed set of accepted values, if any
        """
        super().__init__(message)
        self.value = value
        self.field = field
        self.accepted: tuple[str, ...] = tuple(accepted)


class DataIntegrityError(MenaError):
    """Dataset violates a consistency invariant.

    These indicate a bug in the static data, not bad caller input.
    """


class DuplicateKeyError(DataIntegrityError):
    """Two records produced the same normalized index key.

    Attributes:
        key: Normalized key that collided
        field_key: Name of the field the index was built over
        codes: Region codes of the colliding records (first, second)
    """

    def __init__(self, key: str, field_key: str, codes: tuple[str, str]) -> None:
        super().__init__(
            f"Duplicate index key {key!r} for field {field_key!r}: "
            f"regions {codes[0]!r} and {codes[1]!r}"
        )
        self.key = key
        self.field_key = field_key
        self.codes = codes
