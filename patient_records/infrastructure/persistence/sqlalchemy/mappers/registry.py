"""
Entity-to-table mapping registry.

The unit of work looks up an entity type here to find the ORM model and the
conversion functions for it. Supporting a new entity means adding one entry
to ``DEFAULT_MAPPINGS``.
"""

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from patient_records.domain.entities.patient import Patient
from patient_records.infrastructure.persistence.sqlalchemy.config.base import Base
from patient_records.infrastructure.persistence.sqlalchemy.mappers.patient_mapper import (
    PatientMapper,
)
from patient_records.infrastructure.persistence.sqlalchemy.models.patient import PatientModel


@dataclass(frozen=True)
class EntityMapping:
    """How one domain entity type is stored."""

    model: type[Base]
    to_domain: Callable[[Any], Any]
    to_model: Callable[[Any], Any]


DEFAULT_MAPPINGS: Mapping[type, EntityMapping] = {
    Patient: EntityMapping(
        model=PatientModel,
        to_domain=PatientMapper.to_domain,
        to_model=PatientMapper.to_model,
    ),
}
