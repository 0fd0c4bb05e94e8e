"""
Version 1 of the REST API.

``api_router`` aggregates every v1 route module; the application mounts it
under ``settings.API_V1_STR``.
"""

from fastapi import APIRouter

from patient_records.presentation.api.v1.routes import patient

api_router = APIRouter()
api_router.include_router(patient.router, prefix="/patients", tags=["Patients"])

__all__ = ["api_router"]
