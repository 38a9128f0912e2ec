"""JSON error response handlers.

Every error leaves the API in one of two shapes:

    {"error": "Not found"}
    {"error": "Validation failed", "details": {"email": ["can't be blank"]}}
"""

from typing import TYPE_CHECKING, Any, cast

import structlog
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from starlette.exceptions import HTTPException as StarletteHTTPException

from propertyops.core.constants import INTERNAL_ERROR_MESSAGE, VALIDATION_FAILED_MESSAGE
from propertyops.core.errors.exceptions import AppException, ValidationError


if TYPE_CHECKING:
    from starlette.types import ExceptionHandler


logger = structlog.get_logger()

# Pydantic error types mapped onto the record-level validation messages
PYDANTIC_MESSAGES: dict[str, str] = {
    "missing": "can't be blank",
    "int_parsing": "is not a number",
    "int_type": "is not a number",
    "int_from_float": "must be an integer",
    "decimal_parsing": "is not a number",
    "decimal_type": "is not a number",
    "date_from_datetime_parsing": "is not a valid date",
    "date_parsing": "is not a valid date",
    "date_type": "is not a valid date",
    "string_type": "must be a string",
}


class ErrorResponse(BaseModel):
    """Error response schema.

    Attributes:
        error: Short human-readable summary
        details: Per-field messages (validation failures only)
    """

    error: str
    details: dict[str, list[str]] | None = None


def _field_name(loc: tuple[Any, ...]) -> str:
    """Build a field name from a pydantic error location.

    Drops the request source and, for bodies, the wrapping resource key
    so ``("body", "tenant", "email")`` becomes ``email``.
    """
    parts = [str(part) for part in loc]
    if parts and parts[0] in ("body", "query", "path"):
        source, parts = parts[0], parts[1:]
        if source == "body" and len(parts) > 1:
            parts = parts[1:]
    return ".".join(parts) if parts else "base"


def collect_request_errors(exc: RequestValidationError) -> dict[str, list[str]]:
    """Group FastAPI request validation errors by field."""
    details: dict[str, list[str]] = {}
    for error in exc.errors():
        field = _field_name(tuple(error.get("loc", ())))
        error_type = error.get("type", "")
        message = PYDANTIC_MESSAGES.get(error_type, error.get("msg", "is invalid"))
        details.setdefault(field, []).append(message)
    return details


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """Handle application-specific exceptions."""
    logger.warning(
        "app_exception",
        error_code=exc.error_code,
        message=exc.message,
        status_code=exc.status_code,
        path=str(request.url.path),
    )

    details = exc.errors if isinstance(exc, ValidationError) else None
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(error=exc.message, details=details).model_dump(
            exclude_none=True
        ),
    )


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Handle request-shape errors raised before a handler runs."""
    details = collect_request_errors(exc)

    logger.warning(
        "validation_error",
        path=str(request.url.path),
        fields=sorted(details),
    )

    return JSONResponse(
        status_code=ValidationError.status_code,
        content=ErrorResponse(
            error=VALIDATION_FAILED_MESSAGE, details=details
        ).model_dump(exclude_none=True),
    )


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Handle routing errors such as unknown paths or methods."""
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(error=str(exc.detail)).model_dump(exclude_none=True),
        headers=getattr(exc, "headers", None),
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected exceptions.

    The actual error details are logged but not exposed to clients.
    """
    logger.exception(
        "unhandled_exception",
        path=str(request.url.path),
        error_type=type(exc).__name__,
    )

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=ErrorResponse(error=INTERNAL_ERROR_MESSAGE).model_dump(
            exclude_none=True
        ),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with the FastAPI app."""
    app.add_exception_handler(
        AppException, cast("ExceptionHandler", app_exception_handler)
    )
    app.add_exception_handler(
        RequestValidationError, cast("ExceptionHandler", validation_exception_handler)
    )
    app.add_exception_handler(
        StarletteHTTPException, cast("ExceptionHandler", http_exception_handler)
    )
    app.add_exception_handler(Exception, generic_exception_handler)
