from patient_records.application.validators.create_patient_validator import (
    CreatePatientValidator,
)

__all__ = ["CreatePatientValidator"]
