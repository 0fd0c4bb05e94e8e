"""
Exception classes for patient-related domain operations.

These exceptions represent domain-specific error conditions and are independent
of any infrastructure or application framework.
"""

from collections.abc import Sequence
from dataclasses import dataclass

from patient_records.domain.exceptions.base_exceptions import ValidationError


@dataclass(frozen=True)
class ValidationViolation:
    """A single failed rule: the offending field and a client-facing message."""

    field: str
    message: str


class PatientValidationError(ValidationError):
    """Exception raised when patient data fails one or more validation rules."""

    def __init__(
        self,
        violations: Sequence[ValidationViolation],
        message: str | None = None,
    ) -> None:
        """
        Initialize a PatientValidationError exception.

        Args:
            violations: Every rule violation found in the candidate
            message: Optional override; defaults to the joined violation messages
        """
        self.violations = list(violations)
        if message is None:
            joined = "; ".join(v.message for v in self.violations)
            message = f"Validation failed: {joined}"
        super().__init__(message)

    @property
    def fields(self) -> set[str]:
        return {v.field for v in self.violations}
