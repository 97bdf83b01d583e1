"""Domain exceptions for the application.

These exceptions represent business-logic errors and are automatically
converted to ``{message, error, details}`` JSON responses by the
exception handlers.
"""

from typing import Any


class AppException(Exception):
    """Base exception for all application errors.

    All domain exceptions should inherit from this class.

    Attributes:
        message: Human-readable error message
        error_code: Machine-readable error code for clients
        status_code: HTTP status code for the response
        details: Additional error details
    """

    message: str = "An unexpected error occurred"
    error_code: str = "INTERNAL_SERVER_ERROR"
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


class BadRequestError(AppException):
    """Raised for general client errors.

    Example:
        raise BadRequestError("Refresh token is required")
    """

    message = "Bad request"
    error_code = "BAD_REQUEST"
    status_code = 400


class ValidationError(AppException):
    """Raised when request data fails validation.

    Example:
        raise ValidationError(
            "Validation failed",
            errors=[{"field": "maxOccupancy", "message": "Must be >= beds"}]
        )
    """

    message = "Validation failed"
    error_code = "VALIDATION_ERROR"
    status_code = 400

    def __init__(
        self,
        message: str | None = None,
        errors: list[dict[str, Any]] | None = None,
        **kwargs: Any,
    ) -> None:
        details = kwargs.pop("details", {})
        if errors:
            details["errors"] = errors
        super().__init__(message=message, details=details, **kwargs)

    @property
    def errors(self) -> list[dict[str, Any]]:
        """Field-level errors attached to this exception."""
        return list(self.details.get("errors", []))


class UnauthorizedError(AppException):
    """Raised when authentication is required but not provided or invalid.

    Example:
        raise UnauthorizedError("Access denied. No token provided.")
    """

    message = "Authentication required"
    error_code = "UNAUTHORIZED"
    status_code = 401


class InvalidTokenFormatError(UnauthorizedError):
    """Authorization header is present but not ``Bearer <token>``."""

    message = "Invalid authorization header format. Expected: Bearer <token>"
    error_code = "INVALID_TOKEN_FORMAT"


class TokenExpiredError(UnauthorizedError):
    """Token signature is valid but its ``exp`` claim has passed."""

    message = "Token expired. Please refresh your token."
    error_code = "TOKEN_EXPIRED"


class InvalidTokenError(UnauthorizedError):
    """Token could not be decoded or its signature does not verify."""

    message = "Invalid token."
    error_code = "INVALID_TOKEN"


class InvalidRefreshTokenError(UnauthorizedError):
    """Refresh token is of the wrong type or its user no longer exists."""

    message = "Invalid or expired refresh token"
    error_code = "INVALID_REFRESH_TOKEN"


class InvalidCredentialsError(UnauthorizedError):
    """Email/password pair did not match a user."""

    message = "Invalid email or password"
    error_code = "INVALID_CREDENTIALS"


class ForbiddenError(AppException):
    """Raised when user lacks permission to access a resource.

    Example:
        raise ForbiddenError(
            "Access denied. Insufficient permissions.",
            details={"requiredRoles": ["admin"], "userRole": "user"}
        )
    """

    message = "Access forbidden"
    error_code = "FORBIDDEN"
    status_code = 403


class NotFoundError(AppException):
    """Raised when a requested resource is not found.

    Example:
        raise NotFoundError(resource="Trip", resource_id=code)
    """

    message = "Resource not found"
    error_code = "NOT_FOUND"
    status_code = 404

    def __init__(
        self,
        message: str | None = None,
        resource: str | None = None,
        resource_id: str | None = None,
        **kwargs: Any,
    ) -> None:
        details = kwargs.pop("details", {})
        if resource_id:
            details["resourceId"] = resource_id
        if resource and not message:
            message = f"{resource} not found"
        super().__init__(message=message, details=details, **kwargs)


class ConflictError(AppException):
    """Raised when there's a conflict with existing data.

    Example:
        raise ConflictError("code already exists", details={"field": "code"})
    """

    message = "Resource conflict"
    error_code = "CONFLICT"
    status_code = 409
