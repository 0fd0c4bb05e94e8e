"""
SQLAlchemy models package.

Importing this package registers every table on the shared metadata.
"""

from patient_records.infrastructure.persistence.sqlalchemy.models.patient import PatientModel

__all__ = ["PatientModel"]
