"""Patient API routes.

Create and read endpoints for patient records. Business rule failures and
infrastructure errors are turned into responses by the exception handlers
registered in ``presentation.api.exception_handlers``.
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Body, HTTPException, Request, Response, status

from patient_records.application.dtos.patient_dtos import CreatePatientDto
from patient_records.presentation.api.dependencies.services.patient_service import (
    PatientServiceDep,
)
from patient_records.presentation.api.schemas.patient import (
    ErrorResponse,
    PatientCreateRequest,
    PatientCreateResponse,
    PatientRead,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "",
    response_model=PatientCreateResponse,
    status_code=status.HTTP_201_CREATED,
    name="patients:create_patient",
    summary="Create a new patient",
    responses={
        400: {"model": ErrorResponse, "description": "Invalid patient data"},
        500: {"model": ErrorResponse, "description": "Internal server error"},
    },
)
async def create_patient(
    request: Request,
    response: Response,
    service: PatientServiceDep,
    patient_data: PatientCreateRequest = Body(...),
) -> PatientCreateResponse:
    """Create a new patient.

    Args:
        request: Incoming request, used to build the Location header
        response: Outgoing response
        service: Patient service dependency
        patient_data: Patient data for creation

    Returns:
        Identifier of the created patient
    """
    logger.info("Endpoint create_patient called")
    patient_id = await service.create_patient(
        CreatePatientDto(
            first_name=patient_data.first_name,
            last_name=patient_data.last_name,
            email=patient_data.email,
            date_of_birth=patient_data.date_of_birth,
        )
    )
    response.headers["Location"] = str(
        request.url_for("patients:read_patient", patient_id=str(patient_id)).path
    )
    return PatientCreateResponse(id=patient_id)


@router.get(
    "/{patient_id}",
    response_model=PatientRead,
    name="patients:read_patient",
    summary="Get a specific patient by ID",
    description="Retrieve a single patient using their UUID.",
    responses={404: {"model": ErrorResponse, "description": "Patient not found"}},
)
async def read_patient(patient_id: UUID, service: PatientServiceDep) -> PatientRead:
    """
    Retrieve a patient by their ID.

    Raises:
        HTTPException: If patient not found
    """
    logger.info(f"Endpoint read_patient: Fetching patient with ID {patient_id}")
    patient = await service.get_patient(patient_id)
    if patient is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Patient with ID {patient_id} not found",
        )
    return PatientRead.model_validate(patient)


@router.get(
    "",
    response_model=list[PatientRead],
    name="patients:list_patients",
    summary="List all patients",
)
async def list_patients(service: PatientServiceDep) -> list[PatientRead]:
    logger.info("Endpoint list_patients called")
    patients = await service.get_all_patients()
    return [PatientRead.model_validate(patient) for patient in patients]
