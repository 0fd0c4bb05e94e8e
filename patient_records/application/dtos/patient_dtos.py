"""
Data transfer objects for patient use cases.

DTOs carry raw caller input into the application layer. Nothing here is
validated or normalized; that is the validator's and the service's job.
"""

from dataclasses import dataclass
from datetime import date


@dataclass
class CreatePatientDto:
    """Input for registering a new patient."""

    first_name: str | None
    last_name: str | None
    email: str | None
    date_of_birth: date | None
