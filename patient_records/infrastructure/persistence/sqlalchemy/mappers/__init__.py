from patient_records.infrastructure.persistence.sqlalchemy.mappers.patient_mapper import (
    PatientMapper,
)
from patient_records.infrastructure.persistence.sqlalchemy.mappers.registry import (
    DEFAULT_MAPPINGS,
    EntityMapping,
)

__all__ = ["DEFAULT_MAPPINGS", "EntityMapping", "PatientMapper"]
