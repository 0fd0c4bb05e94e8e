"""Liveness and readiness probes."""

import logging

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from patient_records.presentation.api.dependencies.database import UnitOfWorkDep

logger = logging.getLogger(__name__)

router = APIRouter()

HEALTHY = "Healthy"
UNHEALTHY = "Unhealthy"


@router.get("/live", name="health:live", summary="Liveness probe")
async def live() -> dict[str, str]:
    return {"status": HEALTHY}


@router.get("/ready", name="health:ready", summary="Readiness probe")
async def ready(unit_of_work: UnitOfWorkDep) -> JSONResponse:
    """
    Report whether the database answers.

    Returns 200 when it does and 503 otherwise, with a per-dependency entry.
    """
    reachable = await unit_of_work.ping()
    if reachable:
        entry = {"status": HEALTHY, "description": "Database connection is healthy"}
    else:
        logger.warning("Readiness check failed: database unreachable")
        entry = {"status": UNHEALTHY, "description": "Database connection failed"}

    return JSONResponse(
        status_code=status.HTTP_200_OK if reachable else status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"status": entry["status"], "entries": {"database": entry}},
    )
