"""
Tests for the gRPC patients servicer.

RPC methods are called directly with a mocked servicer context and a real
unit of work over the in-memory database.
"""

import uuid
from functools import partial
from unittest.mock import AsyncMock, MagicMock, patch

import grpc
import pytest

from patient_records.application.services.patient_service import PatientService
from patient_records.infrastructure.persistence.sqlalchemy.unit_of_work.unit_of_work import (
    SQLAlchemyUnitOfWork,
)
from patient_records.presentation.grpc_api.messages import (
    CreatePatientRequest,
    CreatePatientResponse,
    GetAllPatientsRequest,
    GetAllPatientsResponse,
    GetPatientRequest,
    PatientResponse,
)
from patient_records.presentation.grpc_api.patients_service import (
    INTERNAL_ERROR_MESSAGE,
    INVALID_DATE_MESSAGE,
    INVALID_ID_MESSAGE,
    NOT_FOUND_MESSAGE,
    PatientsServicer,
)

CREATE_FIELDS = {
    "first_name": "John",
    "last_name": "Doe",
    "email": "JOHN@EXAMPLE.COM",
    "date_of_birth": "1990-05-15",
}
CREATE_REQUEST = CreatePatientRequest(**CREATE_FIELDS)


@pytest.fixture
def servicer(session_factory, fixed_clock) -> PatientsServicer:
    return PatientsServicer(partial(SQLAlchemyUnitOfWork, session_factory), fixed_clock)


@pytest.fixture
def context() -> MagicMock:
    return MagicMock(spec=grpc.aio.ServicerContext)




class TestCreatePatient:
    @pytest.mark.asyncio
    async def test_create_then_get(self, servicer, context) -> None:
        created = await servicer.CreatePatient(CREATE_REQUEST, context)

        assert created.success is True
        assert created.error_message == ""
        patient_id = created.patient_id
        uuid.UUID(patient_id)

        fetched = await servicer.GetPatient(GetPatientRequest(patient_id=patient_id), context)
        assert fetched == PatientResponse(
            patient_id=patient_id,
            first_name="John",
            last_name="Doe",
            email="john@example.com",
            date_of_birth="1990-05-15",
            created_at="2024-06-24T10:30:00.000Z",
            full_name="John Doe",
        )
        context.set_code.assert_not_called()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("value", ["15/05/1990", "", "1990-13-01"])
    async def test_unparseable_date(self, servicer, context, value) -> None:
        request = CreatePatientRequest(**{**CREATE_FIELDS, "date_of_birth": value})

        result = await servicer.CreatePatient(request, context)

        assert result == CreatePatientResponse(success=False, error_message=INVALID_DATE_MESSAGE)

    @pytest.mark.asyncio
    async def test_validation_failure_is_reported_in_message(self, servicer, context) -> None:
        request = CreatePatientRequest(**{**CREATE_FIELDS, "first_name": "John123"})

        result = await servicer.CreatePatient(request, context)

        assert result.success is False
        assert result.patient_id == ""
        assert result.error_message == (
            "Validation failed: First name can only contain letters, spaces, hyphens, and periods"
        )
        assert await servicer.GetAllPatients(GetAllPatientsRequest(), context) == (
            GetAllPatientsResponse()
        )
        context.set_code.assert_not_called()

    @pytest.mark.asyncio
    async def test_missing_fields_fail_validation(self, servicer, context) -> None:
        request = CreatePatientRequest(date_of_birth="1990-05-15")

        result = await servicer.CreatePatient(request, context)

        assert result.success is False
        assert "First name is required" in result.error_message
        assert "Email is required" in result.error_message

    @pytest.mark.asyncio
    async def test_non_string_name_on_the_wire_fails_validation(self, servicer, context) -> None:
        # field 1 encoded as the varint 123 instead of a string
        payload = b"\x08\x7b" + CreatePatientRequest(
            **{**CREATE_FIELDS, "first_name": ""}
        ).SerializeToString()

        result = await servicer.CreatePatient(CreatePatientRequest.FromString(payload), context)

        assert result.success is False
        assert "First name is required" in result.error_message
        context.set_code.assert_not_called()

    @pytest.mark.asyncio
    async def test_unexpected_failure_is_opaque(self, servicer, context) -> None:
        with patch.object(
            PatientService, "create_patient", AsyncMock(side_effect=RuntimeError("disk full"))
        ):
            result = await servicer.CreatePatient(CREATE_REQUEST, context)

        assert result == CreatePatientResponse(success=False, error_message=INTERNAL_ERROR_MESSAGE)


class TestGetPatient:
    @pytest.mark.asyncio
    async def test_malformed_id(self, servicer, context) -> None:
        result = await servicer.GetPatient(GetPatientRequest(patient_id="not-a-uuid"), context)

        assert result == PatientResponse()
        context.set_code.assert_called_once_with(grpc.StatusCode.INVALID_ARGUMENT)
        context.set_details.assert_called_once_with(INVALID_ID_MESSAGE)

    @pytest.mark.asyncio
    async def test_unknown_id(self, servicer, context) -> None:
        await servicer.GetPatient(GetPatientRequest(patient_id=str(uuid.uuid4())), context)

        context.set_code.assert_called_once_with(grpc.StatusCode.NOT_FOUND)
        context.set_details.assert_called_once_with(NOT_FOUND_MESSAGE)

    @pytest.mark.asyncio
    async def test_store_failure_is_internal(self, servicer, context) -> None:
        with patch.object(
            PatientService, "get_patient", AsyncMock(side_effect=RuntimeError("boom"))
        ):
            await servicer.GetPatient(GetPatientRequest(patient_id=str(uuid.uuid4())), context)

        context.set_code.assert_called_once_with(grpc.StatusCode.INTERNAL)
        context.set_details.assert_called_once_with(INTERNAL_ERROR_MESSAGE)


class TestGetAllPatients:
    @pytest.mark.asyncio
    async def test_lists_created_patients(self, servicer, context) -> None:
        await servicer.CreatePatient(CREATE_REQUEST, context)
        await servicer.CreatePatient(
            CreatePatientRequest(
                **{**CREATE_FIELDS, "first_name": "Jane", "email": "jane@example.com"}
            ),
            context,
        )

        result = await servicer.GetAllPatients(GetAllPatientsRequest(), context)

        assert sorted(p.first_name for p in result.patients) == ["Jane", "John"]

    @pytest.mark.asyncio
    async def test_failure_is_internal(self, servicer, context) -> None:
        with patch.object(
            PatientService, "get_all_patients", AsyncMock(side_effect=RuntimeError("boom"))
        ):
            result = await servicer.GetAllPatients(GetAllPatientsRequest(), context)

        assert result == GetAllPatientsResponse()
        context.set_code.assert_called_once_with(grpc.StatusCode.INTERNAL)
