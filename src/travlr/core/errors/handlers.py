"""Exception handlers producing the API's error body.

Every error leaves the API as::

    {"message": "...", "error": "ERROR_CODE", "details": {...}}

``details`` is omitted when empty. Unexpected exceptions degrade to a
500 whose message and stack trace are exposed only outside production.
"""

import traceback
from typing import TYPE_CHECKING, Any, cast

import structlog
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from sqlalchemy.exc import IntegrityError

from travlr.config import settings
from travlr.core.errors.exceptions import AppException


if TYPE_CHECKING:
    from starlette.types import ExceptionHandler


logger = structlog.get_logger()

# SQLSTATE for unique_violation
UNIQUE_VIOLATION_SQLSTATE = "23505"


class FieldError(BaseModel):
    """Represents a single field validation error."""

    field: str
    message: str
    type: str | None = None


class ErrorResponse(BaseModel):
    """Error response schema.

    Attributes:
        message: Human-readable explanation
        error: Machine-readable error code
        details: Extra context (field errors, required roles, ...)
        stack: Stack trace, development only
    """

    message: str
    error: str
    details: dict[str, Any] | None = None
    stack: str | None = None


def _error_content(
    message: str,
    error: str,
    details: dict[str, Any] | None = None,
    stack: str | None = None,
) -> dict[str, Any]:
    return ErrorResponse(
        message=message,
        error=error,
        details=details or None,
        stack=stack,
    ).model_dump(exclude_none=True)


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """Handle application-specific exceptions."""
    logger.warning(
        "app_exception",
        error_code=exc.error_code,
        message=exc.message,
        status_code=exc.status_code,
        path=str(request.url.path),
        details=exc.details,
    )

    return JSONResponse(
        status_code=exc.status_code,
        content=_error_content(exc.message, exc.error_code, exc.details),
    )


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Handle Pydantic request validation errors.

    Converts FastAPI/Pydantic validation errors to a 400 with
    field-level detail.
    """
    errors: list[dict[str, Any]] = []

    for error in exc.errors():
        loc = error.get("loc", ())
        # Skip the "body"/"query"/"path" prefix in field path
        field_parts = [
            str(part) for part in loc if part not in ("body", "query", "path")
        ]
        field = ".".join(field_parts) if field_parts else "unknown"

        errors.append(
            FieldError(
                field=field,
                message=error.get("msg", "Invalid value"),
                type=error.get("type"),
            ).model_dump(exclude_none=True)
        )

    logger.warning(
        "validation_error",
        path=str(request.url.path),
        error_count=len(errors),
    )

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=_error_content(
            "Validation failed", "VALIDATION_ERROR", {"errors": errors}
        ),
    )


def is_unique_violation(exc: IntegrityError) -> bool:
    """Tell duplicate-key failures apart from other constraint failures.

    PostgreSQL drivers expose the SQLSTATE; SQLite only has the message.
    """
    orig = exc.orig
    sqlstate = getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)
    if sqlstate:
        return sqlstate == UNIQUE_VIOLATION_SQLSTATE
    return "UNIQUE constraint failed" in str(orig)


async def integrity_error_handler(request: Request, exc: IntegrityError) -> JSONResponse:
    """Map unique-constraint violations to 409 DUPLICATE_KEY.

    Any other integrity failure (foreign key, not-null, check) is the
    client's input and becomes 400 BAD_REQUEST.
    """
    duplicate = is_unique_violation(exc)
    logger.warning(
        "integrity_error",
        path=str(request.url.path),
        duplicate=duplicate,
        error=str(exc.orig),
    )

    if duplicate:
        return JSONResponse(
            status_code=status.HTTP_409_CONFLICT,
            content=_error_content("Resource already exists", "DUPLICATE_KEY"),
        )

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=_error_content(
            "Request violates a database constraint",
            "BAD_REQUEST",
        ),
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected exceptions.

    The error is always logged; the message and stack trace reach the
    client only when not running in production.
    """
    logger.exception(
        "unhandled_exception",
        path=str(request.url.path),
        error_type=type(exc).__name__,
    )

    if settings.is_production:
        message = "An unexpected error occurred"
        stack = None
    else:
        message = str(exc) or "An unexpected error occurred"
        stack = "".join(traceback.format_exception(exc))

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_error_content(message, "INTERNAL_SERVER_ERROR", stack=stack),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with the FastAPI app.

    Call this function during app initialization:

        app = FastAPI()
        register_exception_handlers(app)
    """
    app.add_exception_handler(
        AppException, cast("ExceptionHandler", app_exception_handler)
    )
    app.add_exception_handler(
        RequestValidationError, cast("ExceptionHandler", validation_exception_handler)
    )
    app.add_exception_handler(
        IntegrityError, cast("ExceptionHandler", integrity_error_handler)
    )
    app.add_exception_handler(Exception, generic_exception_handler)
