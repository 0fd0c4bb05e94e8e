from patient_records.application.services.patient_service import PatientService

__all__ = ["PatientService"]
