"""
Patient service dependency provider.

This module defines dependencies for patient-related services, following
Clean Architecture principles with proper abstraction between layers.
"""

from typing import Annotated

from fastapi import Depends, Request

from patient_records.application.services.patient_service import PatientService
from patient_records.core.interfaces.clock import IClock
from patient_records.core.interfaces.unit_of_work import IUnitOfWork
from patient_records.infrastructure.services.system_clock import SystemClock
from patient_records.presentation.api.dependencies.database import get_unit_of_work


def get_clock(request: Request) -> IClock:
    """Clock stored on app state, or the system clock when none was set."""
    return getattr(request.app.state, "clock", None) or SystemClock()


def get_patient_service(
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
    clock: IClock = Depends(get_clock),
) -> PatientService:
    """
    Provides a patient service bound to the request's unit of work.

    Args:
        unit_of_work: Request-scoped unit of work
        clock: Time source for validation and timestamps

    Returns:
        PatientService instance
    """
    return PatientService(unit_of_work=unit_of_work, clock=clock)


# Type annotations for dependency injection
ClockDep = Annotated[IClock, Depends(get_clock)]
PatientServiceDep = Annotated[PatientService, Depends(get_patient_service)]


__all__ = [
    "ClockDep",
    "PatientServiceDep",
    "get_clock",
    "get_patient_service",
]
