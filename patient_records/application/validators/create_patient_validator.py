"""
Validation rules for patient registration.

The validator evaluates every rule against the candidate and reports all
violations together so a client can fix its input in one round trip.
"""

import re
from datetime import date

from patient_records.application.dtos.patient_dtos import CreatePatientDto
from patient_records.core.interfaces.clock import IClock
from patient_records.domain.exceptions.patient_exceptions import ValidationViolation
from patient_records.domain.utils.datetime_utils import years_before

NAME_MAX_LENGTH = 100
EMAIL_MAX_LENGTH = 255
MAX_AGE_YEARS = 150

NAME_PATTERN = re.compile(r"^[a-zA-Z\s\-\.]+$")


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def is_valid_email_syntax(email: str) -> bool:
    """
    Check email syntax: exactly one ``@`` that is neither first nor last.

    This mirrors the permissive check most clients apply. Deliverability is
    not verified.
    """
    if email.count("@") != 1:
        return False
    at = email.index("@")
    return 0 < at < len(email) - 1


class CreatePatientValidator:
    """
    Stateless rule set for :class:`CreatePatientDto`.

    Rules never short-circuit: an empty name reports both the missing value
    and the character-class rule it fails.
    """

    def __init__(self, clock: IClock):
        """
        Initialize the validator.

        Args:
            clock: Source of "today" for the date of birth rule
        """
        self._clock = clock

    def validate(self, candidate: CreatePatientDto) -> list[ValidationViolation]:
        """
        Evaluate every registration rule.

        Args:
            candidate: Raw creation input

        Returns:
            list[ValidationViolation]: Empty when the candidate is valid
        """
        violations: list[ValidationViolation] = []
        violations.extend(self._validate_name("first_name", "First name", candidate.first_name))
        violations.extend(self._validate_name("last_name", "Last name", candidate.last_name))
        violations.extend(self._validate_email(candidate.email))
        violations.extend(self._validate_date_of_birth(candidate.date_of_birth))
        return violations

    def _validate_name(
        self, field: str, label: str, value: str | None
    ) -> list[ValidationViolation]:
        if value is None:
            return [ValidationViolation(field, f"{label} is required")]

        violations = []
        if _is_blank(value):
            violations.append(ValidationViolation(field, f"{label} is required"))
        if len(value) > NAME_MAX_LENGTH:
            violations.append(
                ValidationViolation(
                    field, f"{label} cannot exceed {NAME_MAX_LENGTH} characters"
                )
            )
        if not NAME_PATTERN.match(value):
            violations.append(
                ValidationViolation(
                    field,
                    f"{label} can only contain letters, spaces, hyphens, and periods",
                )
            )
        return violations

    def _validate_email(self, value: str | None) -> list[ValidationViolation]:
        if value is None:
            return [ValidationViolation("email", "Email is required")]

        violations = []
        if _is_blank(value):
            violations.append(ValidationViolation("email", "Email is required"))
        if not is_valid_email_syntax(value):
            violations.append(
                ValidationViolation("email", "Email must be a valid email address")
            )
        if len(value) > EMAIL_MAX_LENGTH:
            violations.append(
                ValidationViolation(
                    "email", f"Email cannot exceed {EMAIL_MAX_LENGTH} characters"
                )
            )
        return violations

    def _validate_date_of_birth(self, value: date | None) -> list[ValidationViolation]:
        if value is None:
            return [ValidationViolation("date_of_birth", "Date of birth is required")]

        today = self._clock.utc_now.date()
        earliest = years_before(today, MAX_AGE_YEARS)
        if not earliest <= value < today:
            return [
                ValidationViolation(
                    "date_of_birth",
                    f"Date of birth must be in the past and not more than "
                    f"{MAX_AGE_YEARS} years ago",
                )
            ]
        return []
