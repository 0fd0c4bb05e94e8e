"""
Exception classes for the application domain.

This module exports common exceptions used throughout the application.
"""

from patient_records.domain.exceptions.base_exceptions import (
    BaseApplicationError,
    InvalidArgumentError,
    OperationCancelledError,
    ValidationError,
)
from patient_records.domain.exceptions.patient_exceptions import (
    PatientValidationError,
    ValidationViolation,
)
from patient_records.domain.exceptions.persistence_exceptions import (
    MappingNotRegisteredError,
    PersistenceError,
    RepositoryError,
    UnitOfWorkDisposedError,
)

__all__ = [
    "BaseApplicationError",
    "InvalidArgumentError",
    "MappingNotRegisteredError",
    "OperationCancelledError",
    "PatientValidationError",
    "PersistenceError",
    "RepositoryError",
    "UnitOfWorkDisposedError",
    "ValidationError",
    "ValidationViolation",
]
