"""
Pydantic schemas for the patient REST endpoints.

JSON bodies use camelCase keys; Python attributes stay snake_case.
"""

from datetime import date, datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base schema that reads and writes camelCase JSON."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PatientCreateRequest(CamelModel):
    """
    Body of ``POST /patients``.

    Every field is optional at the schema level so that missing values reach
    the business validator and come back as field-level messages.
    """

    first_name: str | None = Field(None, description="Patient's first name")
    last_name: str | None = Field(None, description="Patient's last name")
    email: str | None = Field(None, description="Contact email address")
    date_of_birth: date | None = Field(None, description="Date of birth (YYYY-MM-DD)")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "firstName": "John",
                "lastName": "Doe",
                "email": "john.doe@example.com",
                "dateOfBirth": "1990-05-15",
            }
        }
    )


class PatientCreateResponse(CamelModel):
    id: UUID = Field(..., description="Identifier of the new patient")
    message: str = Field("Patient created successfully")


class PatientRead(CamelModel):
    """Patient representation returned by the read endpoints."""

    id: UUID
    first_name: str
    last_name: str
    email: str
    date_of_birth: date
    created_at: datetime
    full_name: str

    model_config = ConfigDict(from_attributes=True)


class ErrorDetail(BaseModel):
    field: str
    message: str


class ErrorResponse(BaseModel):
    """Error body shared by every non-2xx response."""

    message: str
    errors: list[ErrorDetail] | None = None
