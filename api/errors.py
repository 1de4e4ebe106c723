"""
Exception handlers mapping errors to JSON responses.

Every error leaves the API as ``{"error": "<message>"}``:
- ValidationError / request validation -> 400
- NotFoundError / unknown route -> 404
- ConflictError -> 409
- StoreError and anything unexpected -> 500
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from application.exceptions import (
    ConflictError,
    ExerciseTrackerError,
    NotFoundError,
    StoreError,
    ValidationError,
)

logger = logging.getLogger(__name__)

# Checked in order; the first matching class wins
STATUS_BY_ERROR = (
    (ValidationError, 400),
    (NotFoundError, 404),
    (ConflictError, 409),
    (StoreError, 500),
)


def error_response(status_code: int, message: str, headers=None) -> JSONResponse:
    """Build the standard error body."""
    return JSONResponse(status_code=status_code, content={"error": message}, headers=headers)


def status_for(exc: ExerciseTrackerError) -> int:
    """HTTP status for an application error."""
    for error_type, status_code in STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return status_code
    return 500


async def handle_application_error(request: Request, exc: ExerciseTrackerError) -> JSONResponse:
    status_code = status_for(exc)
    if status_code >= 500:
        logger.error(
            f"{request.method} {request.url.path} failed: {exc.message}",
            exc_info=exc,
        )
    else:
        logger.warning(f"{request.method} {request.url.path} -> {status_code}: {exc.message}")
    return error_response(status_code, exc.message)


async def handle_request_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    if errors:
        first = errors[0]
        location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = f"Invalid {location}: {first.get('msg')}" if location else first.get("msg")
    else:
        message = "Invalid request"
    return error_response(400, message)


async def handle_http_exception(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return error_response(exc.status_code, str(exc.detail), headers=getattr(exc, "headers", None))


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unhandled error on {request.method} {request.url.path}: {exc}")
    return error_response(500, "Internal server error")


def register_exception_handlers(app: FastAPI) -> None:
    """Install all error handlers on the application."""
    app.add_exception_handler(ExerciseTrackerError, handle_application_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)
    app.add_exception_handler(Exception, handle_unexpected_error)
