"""Validation result types for dataset consistency checks.

Python 3.13+.
"""

from dataclasses import dataclass

__all__ = [
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
]


@dataclass(frozen=True, slots=True)
class ValidationError:
    """Structured invariant violation found in the dataset.

    Attributes:
        code: Error code (e.g., "duplicate-code", "denomination-mismatch")
        message: Human-readable error message
        region: Region code of the offending record (None for collection-wide errors)
    """

    code: str
    message: str
    region: str | None = None

    def format(self) -> str:
        """Format error as human-readable string."""
        location = f" in region {self.region!r}" if self.region is not None else ""
        return f"[{self.code}]{location}: {self.message}"


@dataclass(frozen=True, slots=True)
class ValidationWarning:
    """Informational finding that does not invalidate the dataset.

    Attributes:
        code: Warning code (e.g., "cldr-currency-mismatch")
        message: Human-readable warning message
        context: Additional context (e.g., the CLDR value)
    """

    code: str
    message: str
    context: str | None = None


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Outcome of a dataset validation run.

    Immutable result object for thread-safe validation feedback.

    Attributes:
        errors: Invariant violations
        warnings: Informational findings

    Example:
        >>> result = ValidationResult.valid()
        >>> result.is_valid
        True
        >>> result.error_count
        0
    """

    errors: tuple[ValidationError, ...]
    warnings: tuple[ValidationWarning, ...]

    @property
    def is_valid(self) -> bool:
        """True if no errors were found. Warnings do not affect validity."""
        return len(self.errors) == 0

    @property
    def error_count(self) -> int:
        return len(self.errors)

    @property
    def warning_count(self) -> int:
        return len(self.warnings)

    @staticmethod
    def valid() -> "ValidationResult":
        """Create a valid result with no errors or warnings."""
        return ValidationResult(errors=(), warnings=())
