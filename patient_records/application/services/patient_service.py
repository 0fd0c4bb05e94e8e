"""
Patient application service.

Orchestrates registration and lookup of patients. The service is transport
agnostic: REST and gRPC adapters call it and translate its results and
exceptions into their own wire formats.
"""

import asyncio
import logging
import uuid
from uuid import UUID

from patient_records.application.dtos.patient_dtos import CreatePatientDto
from patient_records.application.validators.create_patient_validator import (
    CreatePatientValidator,
)
from patient_records.core.interfaces.clock import IClock
from patient_records.core.interfaces.unit_of_work import IUnitOfWork
from patient_records.domain.entities.patient import Patient, normalize_email
from patient_records.domain.exceptions import (
    InvalidArgumentError,
    OperationCancelledError,
    PatientValidationError,
)

logger = logging.getLogger(__name__)


def _raise_if_cancelled(cancel_event: asyncio.Event | None) -> None:
    if cancel_event is not None and cancel_event.is_set():
        logger.debug("Operation cancelled by caller before start")
        raise OperationCancelledError()


class PatientService:
    """
    Application service for patient registration and retrieval.

    Each instance works against a single unit of work, so one service
    instance serves one request.
    """

    def __init__(
        self,
        unit_of_work: IUnitOfWork,
        clock: IClock,
        validator: CreatePatientValidator | None = None,
    ):
        """
        Initialize the service.

        Args:
            unit_of_work: Transaction boundary and repository source
            clock: Supplies the creation timestamp and "today"
            validator: Registration rules; built from ``clock`` when omitted
        """
        self._uow = unit_of_work
        self._clock = clock
        self._validator = validator or CreatePatientValidator(clock)

    async def create_patient(
        self,
        request: CreatePatientDto | None,
        cancel_event: asyncio.Event | None = None,
    ) -> UUID:
        """
        Validate and register a new patient.

        Args:
            request: Raw registration input
            cancel_event: Optional signal that the caller withdrew interest

        Returns:
            UUID: Identifier of the newly stored patient

        Raises:
            OperationCancelledError: If ``cancel_event`` is already set
            InvalidArgumentError: If ``request`` is None
            PatientValidationError: If any registration rule fails
            RepositoryError: If the store rejects the insert
        """
        _raise_if_cancelled(cancel_event)
        if request is None:
            raise InvalidArgumentError("Request is required", "request")

        logger.info("Creating patient")
        violations = self._validator.validate(request)
        if violations:
            error = PatientValidationError(violations)
            logger.warning(f"Patient creation rejected: {error.message}")
            raise error

        patient = Patient(
            id=uuid.uuid4(),
            first_name=request.first_name.strip(),
            last_name=request.last_name.strip(),
            email=normalize_email(request.email),
            date_of_birth=request.date_of_birth,
            created_at=self._clock.utc_now,
        )

        await self._uow.repo(Patient).add(patient)
        await self._uow.save()

        logger.info(f"Created patient {patient.id}")
        return patient.id

    async def get_patient(
        self,
        patient_id: UUID,
        cancel_event: asyncio.Event | None = None,
    ) -> Patient | None:
        """
        Look up a patient by identifier.

        Returns:
            Patient | None: The patient, or None when no such patient exists
        """
        _raise_if_cancelled(cancel_event)
        logger.info(f"Retrieving patient {patient_id}")
        return await self._uow.repo(Patient).get(patient_id)

    async def get_all_patients(
        self, cancel_event: asyncio.Event | None = None
    ) -> list[Patient]:
        """Return every stored patient."""
        _raise_if_cancelled(cancel_event)
        logger.info("Retrieving all patients")
        return await self._uow.repo(Patient).get_all()
