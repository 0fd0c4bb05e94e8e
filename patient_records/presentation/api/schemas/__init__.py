from patient_records.presentation.api.schemas.patient import (
    ErrorDetail,
    ErrorResponse,
    PatientCreateRequest,
    PatientCreateResponse,
    PatientRead,
)

__all__ = [
    "ErrorDetail",
    "ErrorResponse",
    "PatientCreateRequest",
    "PatientCreateResponse",
    "PatientRead",
]
