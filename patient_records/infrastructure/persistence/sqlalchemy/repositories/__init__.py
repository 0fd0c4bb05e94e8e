from patient_records.infrastructure.persistence.sqlalchemy.repositories.base_repository import (
    SQLAlchemyRepository,
)

__all__ = ["SQLAlchemyRepository"]
