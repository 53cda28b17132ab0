"""Error types and validation results for mena.

Python 3.13+. Zero external dependencies.
"""

from .errors import (
    DataIntegrityError,
    DuplicateKeyError,
    InvalidArgumentError,
    MenaError,
)
from .validation import ValidationError, ValidationResult, ValidationWarning

__all__ = [
    "DataIntegrityError",
    "DuplicateKeyError",
    "InvalidArgumentError",
    "MenaError",
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
]
