from patient_records.infrastructure.persistence.sqlalchemy.unit_of_work.unit_of_work import (
    SQLAlchemyUnitOfWork,
)

__all__ = ["SQLAlchemyUnitOfWork"]
