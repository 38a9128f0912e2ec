"""Domain exceptions for the application.

These exceptions represent business-logic errors and are converted to
JSON error responses by the exception handlers.
"""

from typing import Any

from propertyops.core.constants import NOT_FOUND_MESSAGE, VALIDATION_FAILED_MESSAGE


class AppException(Exception):
    """Base exception for all application errors.

    All domain exceptions should inherit from this class.

    Attributes:
        message: Human-readable error message
        error_code: Machine-readable error code for logs
        status_code: HTTP status code for the response
        details: Additional error details
    """

    message: str = "An unexpected error occurred"
    error_code: str = "internal_error"
    status_code: int = 500

    def __init__(
        self,
        message: str | None = None,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message or self.message
        self.error_code = error_code or self.error_code
        self.details = details or {}
        super().__init__(self.message)


class NotFoundError(AppException):
    """Raised when a requested record does not exist.

    Example:
        raise NotFoundError(resource="tenant", resource_id=tenant_id)
    """

    message = NOT_FOUND_MESSAGE
    error_code = "not_found"
    status_code = 404

    def __init__(
        self,
        message: str | None = None,
        resource: str | None = None,
        resource_id: int | str | None = None,
        **kwargs: Any,
    ) -> None:
        self.resource = resource
        self.resource_id = resource_id
        super().__init__(message=message, **kwargs)


class ValidationError(AppException):
    """Raised when submitted data breaks a record's rules.

    Example:
        raise ValidationError(errors={"email": ["has already been taken"]})
    """

    message = VALIDATION_FAILED_MESSAGE
    error_code = "validation_failed"
    status_code = 422

    def __init__(
        self,
        message: str | None = None,
        errors: dict[str, list[str]] | None = None,
        **kwargs: Any,
    ) -> None:
        self.errors = errors or {}
        super().__init__(message=message, **kwargs)
