"""
Domain entities package.

This package contains business domain entities representing core objects
in the system with their properties and behaviors.
"""

from patient_records.domain.entities.patient import Patient

__all__ = ["Patient"]
