"""
Exception handlers for the FastAPI application.

This module turns application exceptions into the JSON error bodies clients
see. Internal details never leave the process: infrastructure failures are
logged with their traceback and answered with an opaque message.
"""

import logging
from collections.abc import Awaitable, Callable
from typing import Any, cast

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from pydantic.alias_generators import to_camel
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import JSONResponse, Response
from starlette.status import (
    HTTP_400_BAD_REQUEST,
    HTTP_500_INTERNAL_SERVER_ERROR,
)

from patient_records.domain.exceptions import (
    BaseApplicationError,
    InvalidArgumentError,
    PatientValidationError,
)
from patient_records.presentation.api.schemas.patient import ErrorDetail, ErrorResponse

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "An internal server error occurred"
INVALID_REQUEST_MESSAGE = "The request is invalid"

Handler = Callable[[Request, Exception], Awaitable[Response]]


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register all exception handlers with the FastAPI application.

    Args:
        app: FastAPI application instance
    """
    app.add_exception_handler(StarletteHTTPException, cast(Handler, http_exception_handler))
    app.add_exception_handler(RequestValidationError, cast(Handler, request_validation_handler))
    app.add_exception_handler(PatientValidationError, cast(Handler, patient_validation_handler))
    app.add_exception_handler(InvalidArgumentError, cast(Handler, invalid_argument_handler))
    app.add_exception_handler(BaseApplicationError, cast(Handler, application_error_handler))
    app.add_exception_handler(Exception, unhandled_exception_handler)

    logger.info("Exception handlers registered")


def _error_response(status_code: int, message: str, errors: list[ErrorDetail] | None = None) -> JSONResponse:
    content = ErrorResponse(message=message, errors=errors).model_dump(exclude_none=True)
    return JSONResponse(status_code=status_code, content=content)


def _field_from_location(loc: tuple[Any, ...]) -> str:
    names = [str(part) for part in loc if part not in ("body", "path", "query")]
    return ".".join(names) if names else "body"


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render HTTPException (404 and friends) as ``{message}``."""
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(message=str(exc.detail)).model_dump(exclude_none=True),
        headers=getattr(exc, "headers", None),
    )


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """
    Handle malformed requests: bad JSON, bad dates, bad identifiers, no body.

    These are client errors and are answered with 400, not FastAPI's 422.
    """
    errors = [
        ErrorDetail(field=_field_from_location(tuple(err.get("loc", ()))), message=err.get("msg", ""))
        for err in exc.errors()
    ]
    logger.warning(f"Malformed request to {request.url.path}: {len(errors)} error(s)")
    return _error_response(HTTP_400_BAD_REQUEST, INVALID_REQUEST_MESSAGE, errors)


async def patient_validation_handler(request: Request, exc: PatientValidationError) -> JSONResponse:
    """Business rule violations; field names are rendered as in the JSON body."""
    errors = [ErrorDetail(field=to_camel(v.field), message=v.message) for v in exc.violations]
    return _error_response(HTTP_400_BAD_REQUEST, exc.message, errors)


async def invalid_argument_handler(request: Request, exc: InvalidArgumentError) -> JSONResponse:
    return _error_response(HTTP_400_BAD_REQUEST, exc.message)


async def application_error_handler(request: Request, exc: BaseApplicationError) -> JSONResponse:
    """Any other application error, including repository failures."""
    logger.error(f"Application error on {request.url.path}: {exc}", exc_info=exc)
    return _error_response(HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE)


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        f"Unhandled exception on {request.method} {request.url.path}: {type(exc).__name__}",
        exc_info=exc,
    )
    return _error_response(HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE)
