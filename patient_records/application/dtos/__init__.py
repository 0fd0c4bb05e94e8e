from patient_records.application.dtos.patient_dtos import CreatePatientDto

__all__ = ["CreatePatientDto"]
