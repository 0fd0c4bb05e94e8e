"""
Protobuf messages of the ``healthvoice.v1.Patients`` service.

The file descriptor below is the in-code form of ``protos/patients.proto``.
Message classes are built from it at import time, so the wire format is
standard protobuf and any client generated from the ``.proto`` interoperates
without a protoc step in this package's build.
"""

from google.protobuf import descriptor_pb2, descriptor_pool, message_factory

from patient_records.domain.entities.patient import Patient
from patient_records.domain.utils.datetime_utils import format_date, format_utc_timestamp

PACKAGE = "healthvoice.v1"
SERVICE_NAME = f"{PACKAGE}.Patients"

_Field = descriptor_pb2.FieldDescriptorProto

# message name -> ordered (field name, type, message type name) tuples;
# field numbers follow declaration order starting at 1
_MESSAGES: dict[str, list[tuple[str, int, str | None]]] = {
    "GetPatientRequest": [
        ("patient_id", _Field.TYPE_STRING, None),
    ],
    "PatientResponse": [
        ("patient_id", _Field.TYPE_STRING, None),
        ("first_name", _Field.TYPE_STRING, None),
        ("last_name", _Field.TYPE_STRING, None),
        ("email", _Field.TYPE_STRING, None),
        ("date_of_birth", _Field.TYPE_STRING, None),
        ("created_at", _Field.TYPE_STRING, None),
        ("full_name", _Field.TYPE_STRING, None),
    ],
    "CreatePatientRequest": [
        ("first_name", _Field.TYPE_STRING, None),
        ("last_name", _Field.TYPE_STRING, None),
        ("email", _Field.TYPE_STRING, None),
        ("date_of_birth", _Field.TYPE_STRING, None),
    ],
    "CreatePatientResponse": [
        ("patient_id", _Field.TYPE_STRING, None),
        ("success", _Field.TYPE_BOOL, None),
        ("error_message", _Field.TYPE_STRING, None),
    ],
    "GetAllPatientsRequest": [],
    "GetAllPatientsResponse": [
        ("patients", _Field.TYPE_MESSAGE, "PatientResponse"),
    ],
}

# rpc name -> (request message, response message)
RPCS: dict[str, tuple[str, str]] = {
    "GetPatient": ("GetPatientRequest", "PatientResponse"),
    "CreatePatient": ("CreatePatientRequest", "CreatePatientResponse"),
    "GetAllPatients": ("GetAllPatientsRequest", "GetAllPatientsResponse"),
}


def build_file_descriptor() -> descriptor_pb2.FileDescriptorProto:
    """Describe ``healthvoice/v1/patients.proto`` as a FileDescriptorProto."""
    file_proto = descriptor_pb2.FileDescriptorProto(
        name="healthvoice/v1/patients.proto",
        package=PACKAGE,
        syntax="proto3",
    )
    for message_name, fields in _MESSAGES.items():
        message = file_proto.message_type.add(name=message_name)
        for number, (field_name, field_type, type_name) in enumerate(fields, start=1):
            field = message.field.add(name=field_name, number=number, type=field_type)
            if type_name is None:
                field.label = _Field.LABEL_OPTIONAL
            else:
                # message-typed fields are only used as repeated lists here
                field.label = _Field.LABEL_REPEATED
                field.type_name = f".{PACKAGE}.{type_name}"

    service = file_proto.service.add(name="Patients")
    for rpc_name, (request_name, response_name) in RPCS.items():
        service.method.add(
            name=rpc_name,
            input_type=f".{PACKAGE}.{request_name}",
            output_type=f".{PACKAGE}.{response_name}",
        )
    return file_proto


_pool = descriptor_pool.DescriptorPool()
DESCRIPTOR = _pool.AddSerializedFile(build_file_descriptor().SerializeToString())


def _message_class(name: str) -> type:
    return message_factory.GetMessageClass(DESCRIPTOR.message_types_by_name[name])


GetPatientRequest = _message_class("GetPatientRequest")
PatientResponse = _message_class("PatientResponse")
CreatePatientRequest = _message_class("CreatePatientRequest")
CreatePatientResponse = _message_class("CreatePatientResponse")
GetAllPatientsRequest = _message_class("GetAllPatientsRequest")
GetAllPatientsResponse = _message_class("GetAllPatientsResponse")

MESSAGE_CLASSES: dict[str, type] = {
    "GetPatientRequest": GetPatientRequest,
    "PatientResponse": PatientResponse,
    "CreatePatientRequest": CreatePatientRequest,
    "CreatePatientResponse": CreatePatientResponse,
    "GetAllPatientsRequest": GetAllPatientsRequest,
    "GetAllPatientsResponse": GetAllPatientsResponse,
}


def rpc_types(rpc_name: str) -> tuple[type, type]:
    """Request and response classes of one RPC."""
    request_name, response_name = RPCS[rpc_name]
    return MESSAGE_CLASSES[request_name], MESSAGE_CLASSES[response_name]


def patient_to_message(patient: Patient):
    """Render a patient as a ``PatientResponse`` message."""
    return PatientResponse(
        patient_id=str(patient.id),
        first_name=patient.first_name,
        last_name=patient.last_name,
        email=patient.email,
        date_of_birth=format_date(patient.date_of_birth),
        created_at=format_utc_timestamp(patient.created_at),
        full_name=patient.full_name,
    )
