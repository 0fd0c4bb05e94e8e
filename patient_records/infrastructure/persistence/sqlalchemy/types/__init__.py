from patient_records.infrastructure.persistence.sqlalchemy.types.guid import GUID

__all__ = ["GUID"]
