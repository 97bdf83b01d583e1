"""Error handling module: domain exceptions and their HTTP mapping."""

from travlr.core.errors.exceptions import (
    AppException,
    BadRequestError,
    ConflictError,
    ForbiddenError,
    InvalidCredentialsError,
    InvalidRefreshTokenError,
    InvalidTokenError,
    InvalidTokenFormatError,
    NotFoundError,
    TokenExpiredError,
    UnauthorizedError,
    ValidationError,
)
from travlr.core.errors.handlers import (
    ErrorResponse,
    FieldError,
    register_exception_handlers,
)


__all__ = [
    # Exceptions
    "AppException",
    "BadRequestError",
    "ConflictError",
    # Handlers
    "ErrorResponse",
    "FieldError",
    "ForbiddenError",
    "InvalidCredentialsError",
    "InvalidRefreshTokenError",
    "InvalidTokenError",
    "InvalidTokenFormatError",
    "NotFoundError",
    "TokenExpiredError",
    "UnauthorizedError",
    "ValidationError",
    "register_exception_handlers",
]
