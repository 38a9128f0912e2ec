"""Error handling module with JSON error responses."""

from propertyops.core.errors.exceptions import (
    AppException,
    NotFoundError,
    ValidationError,
)
from propertyops.core.errors.handlers import (
    ErrorResponse,
    register_exception_handlers,
)


__all__ = [
    "AppException",
    "ErrorResponse",
    "NotFoundError",
    "ValidationError",
    "register_exception_handlers",
]
