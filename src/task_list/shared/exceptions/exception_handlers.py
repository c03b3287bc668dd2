"""
FastAPI exception handlers mapping business exceptions to HTTP responses.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .error_dto import ErrorResponse, FieldError, ValidationErrorDetail
from .exceptions import (
    EntityNotFoundError,
    StorageError,
    ValidationError,
)

log = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "An unexpected error occurred."


def _json_error(status_code: int, body: ErrorResponse) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(by_alias=True, exclude_none=True),
    )


async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    log.warning(
        "ValidationError: %s",
        exc.message,
        extra={"path": request.url.path, "method": request.method},
    )
    return _json_error(
        status.HTTP_422_UNPROCESSABLE_ENTITY,
        ErrorResponse.create(exc.message, exc.validation_details),
    )


async def entity_not_found_handler(request: Request, exc: EntityNotFoundError) -> JSONResponse:
    log.warning(
        "EntityNotFoundError: %s",
        exc.message,
        extra={"path": request.url.path, "method": request.method},
    )
    return _json_error(status.HTTP_404_NOT_FOUND, ErrorResponse.create(exc.message))


async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Reshape FastAPI/pydantic request errors into the common error body."""
    field_errors = []
    for error in exc.errors():
        loc = [str(part) for part in error.get("loc", ()) if part not in ("body", "path", "query")]
        field_errors.append(
            FieldError(field=".".join(loc) or "request", message=error.get("msg", "Invalid value"))
        )
    details = ValidationErrorDetail.from_field_errors(field_errors)
    log.warning(
        "Request validation failed: %s",
        details.fields,
        extra={"path": request.url.path, "method": request.method},
    )
    return _json_error(
        status.HTTP_422_UNPROCESSABLE_ENTITY,
        ErrorResponse.create("Invalid request parameters", details.fields),
    )


async def storage_error_handler(request: Request, exc: StorageError) -> JSONResponse:
    log.error(
        "StorageError: %s",
        exc.message,
        extra={"path": request.url.path, "method": request.method},
        exc_info=True,
    )
    return _json_error(
        status.HTTP_500_INTERNAL_SERVER_ERROR, ErrorResponse.create(GENERIC_ERROR_MESSAGE)
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach every business exception handler to the given app."""
    app.add_exception_handler(ValidationError, validation_error_handler)
    app.add_exception_handler(EntityNotFoundError, entity_not_found_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(StorageError, storage_error_handler)
