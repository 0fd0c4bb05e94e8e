"""Tests for the gRPC protobuf messages."""

import uuid
from datetime import date, datetime, timezone

from patient_records.domain.entities.patient import Patient
from patient_records.presentation.grpc_api import messages


def test_request_uses_protobuf_wire_format() -> None:
    patient_id = str(uuid.uuid4())
    payload = messages.GetPatientRequest(patient_id=patient_id).SerializeToString()

    # field 1, length-delimited, followed by the 36-byte UUID string
    assert payload == b"\x0a\x24" + patient_id.encode()
    assert messages.GetPatientRequest.FromString(payload).patient_id == patient_id


def test_empty_payload_decodes_to_defaults() -> None:
    request = messages.CreatePatientRequest.FromString(b"")

    assert request.first_name == ""
    assert request.date_of_birth == ""


def test_descriptor_declares_the_service() -> None:
    service = messages.DESCRIPTOR.services_by_name["Patients"]

    assert service.full_name == messages.SERVICE_NAME == "healthvoice.v1.Patients"
    assert {method.name for method in service.methods} == set(messages.RPCS)
    assert service.methods_by_name["CreatePatient"].output_type.name == "CreatePatientResponse"


def test_patients_field_is_repeated_message() -> None:
    response = messages.GetAllPatientsResponse(
        patients=[messages.PatientResponse(first_name="John"), messages.PatientResponse()]
    )

    decoded = messages.GetAllPatientsResponse.FromString(response.SerializeToString())

    assert [p.first_name for p in decoded.patients] == ["John", ""]
    field = messages.GetAllPatientsResponse.DESCRIPTOR.fields_by_name["patients"]
    assert field.message_type.full_name == "healthvoice.v1.PatientResponse"


def test_patient_to_message() -> None:
    patient_id = uuid.uuid4()
    patient = Patient(
        id=patient_id,
        first_name="John",
        last_name="Doe",
        email="john@example.com",
        date_of_birth=date(1990, 5, 15),
        created_at=datetime(2024, 6, 24, 10, 30, tzinfo=timezone.utc),
    )

    assert messages.patient_to_message(patient) == messages.PatientResponse(
        patient_id=str(patient_id),
        first_name="John",
        last_name="Doe",
        email="john@example.com",
        date_of_birth="1990-05-15",
        created_at="2024-06-24T10:30:00.000Z",
        full_name="John Doe",
    )
