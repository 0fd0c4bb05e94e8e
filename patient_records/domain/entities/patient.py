"""Domain entity representing a patient.

This module defines the *pure* domain model for a patient. It carries no
persistence or transport concerns; the SQLAlchemy layer maps it to and from
the ``patients`` table and the presentation layer renders it for REST and
gRPC clients.

Patients are immutable once created. Changing contact details goes through
:meth:`Patient.with_contact`, which returns a new instance instead of
mutating one that other code may still hold.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date, datetime
from uuid import UUID

from patient_records.domain.utils.datetime_utils import full_years_between

ADULT_AGE = 18


def normalize_email(email: str) -> str:
    """Trim and lower-case an email address for storage and comparison."""
    return email.strip().lower()


@dataclass(frozen=True)
class Patient:
    """Core domain model for a patient."""

    id: UUID
    first_name: str
    last_name: str
    email: str
    date_of_birth: date
    created_at: datetime

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    def age_on(self, reference: date) -> int:
        """Age in complete years on the ``reference`` date."""
        return full_years_between(self.date_of_birth, reference)

    def is_minor_on(self, reference: date) -> bool:
        return self.age_on(reference) < ADULT_AGE

    def with_contact(self, email: str) -> Patient:
        """
        Return a copy of this patient with a new email address.

        The address is normalized the same way it is at creation. Identity
        and ``created_at`` are carried over unchanged.
        """
        return replace(self, email=normalize_email(email))
