"""
Core interfaces.

Abstract contracts the application layer depends on. Infrastructure
provides the concrete implementations.
"""

from patient_records.core.interfaces.clock import IClock
from patient_records.core.interfaces.repository import IRepository
from patient_records.core.interfaces.unit_of_work import IUnitOfWork

__all__ = ["IClock", "IRepository", "IUnitOfWork"]
