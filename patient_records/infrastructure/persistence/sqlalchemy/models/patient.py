"""
SQLAlchemy model for patient records.

Row shape of the ``patients`` table. The domain entity lives in
``domain.entities.patient``; ``PatientMapper`` converts between the two.
"""

import uuid
from datetime import date, datetime

from sqlalchemy import Date, DateTime, Index, String
from sqlalchemy.orm import Mapped, mapped_column

from patient_records.infrastructure.persistence.sqlalchemy.config.base import Base
from patient_records.infrastructure.persistence.sqlalchemy.types.guid import GUID


class PatientModel(Base):
    """Persistent representation of a patient."""

    __tablename__ = "patients"
    __table_args__ = (Index("ix_patients_email", "email", unique=True),)

    id: Mapped[uuid.UUID] = mapped_column(GUID(), primary_key=True, default=uuid.uuid4)
    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    date_of_birth: Mapped[date] = mapped_column(Date, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
