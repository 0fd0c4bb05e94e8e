"""
Patient entity to SQLAlchemy model mapper.

This module provides bidirectional mapping between the domain Patient entity
and the SQLAlchemy PatientModel.
"""

from patient_records.domain.entities.patient import Patient
from patient_records.domain.utils.datetime_utils import ensure_utc
from patient_records.infrastructure.persistence.sqlalchemy.models.patient import PatientModel


class PatientMapper:
    """Maps between domain Patient entities and SQLAlchemy PatientModel rows."""

    @staticmethod
    def to_domain(model: PatientModel) -> Patient:
        """
        Convert a SQLAlchemy PatientModel to a domain Patient entity.

        SQLite drops the offset of timezone-aware columns, so ``created_at``
        is re-attached to UTC on the way out.
        """
        return Patient(
            id=model.id,
            first_name=model.first_name,
            last_name=model.last_name,
            email=model.email,
            date_of_birth=model.date_of_birth,
            created_at=ensure_utc(model.created_at),
        )

    @staticmethod
    def to_model(entity: Patient) -> PatientModel:
        return PatientModel(
            id=entity.id,
            first_name=entity.first_name,
            last_name=entity.last_name,
            email=entity.email,
            date_of_birth=entity.date_of_birth,
            created_at=entity.created_at,
        )
