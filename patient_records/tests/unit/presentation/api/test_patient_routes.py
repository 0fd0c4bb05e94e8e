"""
Tests for the patient REST endpoints.

The patient service is replaced with an AsyncMock so these tests cover
request parsing, status codes and response bodies only.
"""

import uuid
from datetime import date, datetime
from unittest.mock import AsyncMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from patient_records.application.services.patient_service import PatientService
from patient_records.domain.entities.patient import Patient
from patient_records.domain.exceptions import (
    PatientValidationError,
    RepositoryError,
    ValidationViolation,
)
from patient_records.presentation.api.dependencies.services.patient_service import (
    get_patient_service,
)
from patient_records.tests.helpers import FIXED_NOW

VALID_BODY = {
    "firstName": "John",
    "lastName": "Doe",
    "email": "john@example.com",
    "dateOfBirth": "1990-05-15",
}


@pytest.fixture
def mock_service() -> AsyncMock:
    return AsyncMock(spec=PatientService)


@pytest_asyncio.fixture
async def api_client(app, mock_service):
    app.dependency_overrides[get_patient_service] = lambda: mock_service
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()


@pytest.fixture
def patient() -> Patient:
    return Patient(
        id=uuid.uuid4(),
        first_name="John",
        last_name="Doe",
        email="john@example.com",
        date_of_birth=date(1990, 5, 15),
        created_at=FIXED_NOW,
    )


class TestCreatePatientEndpoint:
    @pytest.mark.asyncio
    async def test_create_returns_201_with_location(self, api_client, mock_service) -> None:
        patient_id = uuid.uuid4()
        mock_service.create_patient.return_value = patient_id

        response = await api_client.post("/api/v1/patients", json=VALID_BODY)

        assert response.status_code == 201
        assert response.json() == {"id": str(patient_id), "message": "Patient created successfully"}
        assert response.headers["location"] == f"/api/v1/patients/{patient_id}"

        dto = mock_service.create_patient.await_args.args[0]
        assert dto.first_name == "John"
        assert dto.date_of_birth == date(1990, 5, 15)

    @pytest.mark.asyncio
    async def test_validation_failure_returns_400_with_field_errors(
        self, api_client, mock_service
    ) -> None:
        mock_service.create_patient.side_effect = PatientValidationError(
            [ValidationViolation("first_name", "First name can only contain letters, spaces, hyphens, and periods")]
        )

        response = await api_client.post(
            "/api/v1/patients", json={**VALID_BODY, "firstName": "John123"}
        )

        assert response.status_code == 400
        body = response.json()
        assert body["message"].startswith("Validation failed: ")
        assert body["errors"] == [
            {
                "field": "firstName",
                "message": "First name can only contain letters, spaces, hyphens, and periods",
            }
        ]

    @pytest.mark.asyncio
    async def test_missing_fields_reach_the_service(self, api_client, mock_service) -> None:
        mock_service.create_patient.return_value = uuid.uuid4()

        await api_client.post("/api/v1/patients", json={"firstName": "John"})

        dto = mock_service.create_patient.await_args.args[0]
        assert dto.email is None
        assert dto.date_of_birth is None

    @pytest.mark.asyncio
    async def test_malformed_date_returns_400(self, api_client, mock_service) -> None:
        response = await api_client.post(
            "/api/v1/patients", json={**VALID_BODY, "dateOfBirth": "15/05/1990"}
        )

        assert response.status_code == 400
        assert response.json()["errors"][0]["field"] == "dateOfBirth"
        mock_service.create_patient.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_malformed_json_returns_400(self, api_client, mock_service) -> None:
        response = await api_client.post(
            "/api/v1/patients",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        mock_service.create_patient.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_missing_body_returns_400(self, api_client, mock_service) -> None:
        response = await api_client.post("/api/v1/patients")

        assert response.status_code == 400
        assert "message" in response.json()
        mock_service.create_patient.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_repository_failure_returns_opaque_500(self, api_client, mock_service) -> None:
        mock_service.create_patient.side_effect = RepositoryError("UNIQUE constraint failed")

        response = await api_client.post("/api/v1/patients", json=VALID_BODY)

        assert response.status_code == 500
        assert response.json() == {"message": "An internal server error occurred"}


class TestReadPatientEndpoints:
    @pytest.mark.asyncio
    async def test_get_patient(self, api_client, mock_service, patient) -> None:
        mock_service.get_patient.return_value = patient

        response = await api_client.get(f"/api/v1/patients/{patient.id}")

        assert response.status_code == 200
        body = response.json()
        assert body["id"] == str(patient.id)
        assert body["firstName"] == "John"
        assert body["lastName"] == "Doe"
        assert body["email"] == "john@example.com"
        assert body["dateOfBirth"] == "1990-05-15"
        assert body["fullName"] == "John Doe"
        assert datetime.fromisoformat(body["createdAt"].replace("Z", "+00:00")) == FIXED_NOW
        mock_service.get_patient.assert_awaited_once_with(patient.id)

    @pytest.mark.asyncio
    async def test_unknown_patient_returns_404(self, api_client, mock_service) -> None:
        mock_service.get_patient.return_value = None
        patient_id = uuid.uuid4()

        response = await api_client.get(f"/api/v1/patients/{patient_id}")

        assert response.status_code == 404
        assert response.json() == {"message": f"Patient with ID {patient_id} not found"}

    @pytest.mark.asyncio
    async def test_malformed_id_returns_400(self, api_client, mock_service) -> None:
        response = await api_client.get("/api/v1/patients/not-a-uuid")

        assert response.status_code == 400
        mock_service.get_patient.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_list_patients(self, api_client, mock_service, patient) -> None:
        mock_service.get_all_patients.return_value = [patient]

        response = await api_client.get("/api/v1/patients")

        assert response.status_code == 200
        assert [p["id"] for p in response.json()] == [str(patient.id)]

    @pytest.mark.asyncio
    async def test_list_patients_empty(self, api_client, mock_service) -> None:
        mock_service.get_all_patients.return_value = []

        response = await api_client.get("/api/v1/patients")

        assert response.status_code == 200
        assert response.json() == []


class TestRequestId:
    @pytest.mark.asyncio
    async def test_request_id_is_generated(self, api_client, mock_service) -> None:
        mock_service.get_all_patients.return_value = []
        response = await api_client.get("/api/v1/patients")
        uuid.UUID(response.headers["x-request-id"])

    @pytest.mark.asyncio
    async def test_valid_request_id_is_echoed(self, api_client, mock_service) -> None:
        mock_service.get_all_patients.return_value = []
        request_id = str(uuid.uuid4())

        response = await api_client.get("/api/v1/patients", headers={"X-Request-ID": request_id})

        assert response.headers["x-request-id"] == request_id
