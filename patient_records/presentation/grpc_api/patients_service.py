"""
gRPC servicer for the ``healthvoice.v1.Patients`` service.

Every RPC opens its own unit of work and closes it before returning. Errors
are reported the way each RPC's contract expects: lookups use gRPC status
codes, creation reports failure inside the response message.
"""

import logging
from collections.abc import Callable
from datetime import datetime
from uuid import UUID

import grpc

from patient_records.application.dtos.patient_dtos import CreatePatientDto
from patient_records.application.services.patient_service import PatientService
from patient_records.core.interfaces.clock import IClock
from patient_records.core.interfaces.unit_of_work import IUnitOfWork
from patient_records.domain.exceptions import PatientValidationError
from patient_records.presentation.grpc_api.messages import (
    CreatePatientRequest,
    CreatePatientResponse,
    GetAllPatientsRequest,
    GetAllPatientsResponse,
    GetPatientRequest,
    PatientResponse,
    patient_to_message,
)

logger = logging.getLogger(__name__)

INVALID_ID_MESSAGE = "Invalid patient ID format"
NOT_FOUND_MESSAGE = "Patient not found"
INTERNAL_ERROR_MESSAGE = "Internal server error"
INVALID_DATE_MESSAGE = "Invalid date of birth format. Use yyyy-MM-dd."

DATE_FORMAT = "%Y-%m-%d"


def _set_status(context: grpc.aio.ServicerContext, code: grpc.StatusCode, details: str) -> None:
    context.set_code(code)
    context.set_details(details)


def _create_result(patient_id: str = "", error_message: str = "") -> CreatePatientResponse:
    return CreatePatientResponse(
        patient_id=patient_id,
        success=not error_message,
        error_message=error_message,
    )


class PatientsServicer:
    """Implements GetPatient, CreatePatient and GetAllPatients."""

    def __init__(self, unit_of_work_factory: Callable[[], IUnitOfWork], clock: IClock):
        """
        Initialize the servicer.

        Args:
            unit_of_work_factory: Builds a fresh unit of work per RPC
            clock: Time source handed to the patient service
        """
        self._unit_of_work_factory = unit_of_work_factory
        self._clock = clock

    async def GetPatient(
        self, request: GetPatientRequest, context: grpc.aio.ServicerContext
    ) -> PatientResponse:
        try:
            patient_id = UUID(request.patient_id)
        except ValueError:
            _set_status(context, grpc.StatusCode.INVALID_ARGUMENT, INVALID_ID_MESSAGE)
            return PatientResponse()

        logger.info(f"gRPC GetPatient {patient_id}")
        try:
            async with self._unit_of_work_factory() as uow:
                patient = await PatientService(uow, self._clock).get_patient(patient_id)
        except Exception:
            logger.error(f"gRPC GetPatient failed for {patient_id}", exc_info=True)
            _set_status(context, grpc.StatusCode.INTERNAL, INTERNAL_ERROR_MESSAGE)
            return PatientResponse()

        if patient is None:
            _set_status(context, grpc.StatusCode.NOT_FOUND, NOT_FOUND_MESSAGE)
            return PatientResponse()
        return patient_to_message(patient)

    async def CreatePatient(
        self, request: CreatePatientRequest, context: grpc.aio.ServicerContext
    ) -> CreatePatientResponse:
        """
        Register a patient.

        Failures never surface as a gRPC status: the response carries
        ``success = false`` and a client-facing ``error_message``.
        """
        try:
            date_of_birth = datetime.strptime(request.date_of_birth, DATE_FORMAT).date()
        except ValueError:
            return _create_result(error_message=INVALID_DATE_MESSAGE)

        dto = CreatePatientDto(
            first_name=request.first_name,
            last_name=request.last_name,
            email=request.email,
            date_of_birth=date_of_birth,
        )

        logger.info("gRPC CreatePatient")
        try:
            async with self._unit_of_work_factory() as uow:
                patient_id = await PatientService(uow, self._clock).create_patient(dto)
        except PatientValidationError as e:
            return _create_result(error_message=e.message)
        except Exception:
            logger.error("gRPC CreatePatient failed", exc_info=True)
            return _create_result(error_message=INTERNAL_ERROR_MESSAGE)

        return _create_result(patient_id=str(patient_id))

    async def GetAllPatients(
        self, request: GetAllPatientsRequest, context: grpc.aio.ServicerContext
    ) -> GetAllPatientsResponse:
        logger.info("gRPC GetAllPatients")
        try:
            async with self._unit_of_work_factory() as uow:
                patients = await PatientService(uow, self._clock).get_all_patients()
        except Exception:
            logger.error("gRPC GetAllPatients failed", exc_info=True)
            _set_status(context, grpc.StatusCode.INTERNAL, INTERNAL_ERROR_MESSAGE)
            return GetAllPatientsResponse()

        return GetAllPatientsResponse(patients=[patient_to_message(p) for p in patients])
