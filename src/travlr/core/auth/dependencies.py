"""FastAPI dependencies for authentication.

This module provides FastAPI dependency injection functions for:
- Parsing the ``Authorization: Bearer <token>`` header
- Validating access tokens and exposing their claims
- Role-based access control
"""

from collections.abc import Awaitable, Callable
from typing import Annotated

import structlog
from fastapi import Depends, Header, Request

from travlr.core.auth.backend import decode_access_token
from travlr.core.auth.schemas import TokenClaims
from travlr.core.constants import Role
from travlr.core.errors import (
    AppException,
    ForbiddenError,
    InvalidTokenFormatError,
    UnauthorizedError,
)


NO_TOKEN_MESSAGE = "Access denied. No token provided."


def parse_authorization_header(header: str) -> str:
    """Extract the token from an ``Authorization`` header value.

    The header must be exactly two space-separated parts, the first
    being ``Bearer``.

    Raises:
        InvalidTokenFormatError: If the header is not ``Bearer <token>``
        UnauthorizedError: If the token part is empty
    """
    parts = header.split(" ")
    if len(parts) != 2 or parts[0] != "Bearer":
        raise InvalidTokenFormatError()
    if not parts[1]:
        raise UnauthorizedError(NO_TOKEN_MESSAGE)
    return parts[1]


def _attach_claims(request: Request, claims: TokenClaims) -> None:
    request.state.auth = claims
    structlog.contextvars.bind_contextvars(
        user_id=str(claims.user_id),
        role=str(claims.role),
    )


async def get_token_claims(
    request: Request,
    authorization: Annotated[str | None, Header()] = None,
) -> TokenClaims:
    """Validate the bearer token and attach its claims to the request.

    Args:
        request: The incoming request
        authorization: Raw ``Authorization`` header

    Returns:
        Decoded access token claims

    Raises:
        UnauthorizedError: If no header is present
        InvalidTokenFormatError: If the header is not ``Bearer <token>``
        TokenExpiredError: If the token has expired
        InvalidTokenError: If the token is invalid or not an access token
    """
    if not authorization:
        raise UnauthorizedError(NO_TOKEN_MESSAGE)

    token = parse_authorization_header(authorization)
    claims = decode_access_token(token)
    _attach_claims(request, claims)
    return claims


async def get_optional_claims(
    request: Request,
    authorization: Annotated[str | None, Header()] = None,
) -> TokenClaims | None:
    """Attach claims when a valid token is present, never reject.

    Useful for endpoints that work with or without authentication.
    """
    if not authorization:
        return None

    try:
        token = parse_authorization_header(authorization)
        claims = decode_access_token(token)
    except AppException:
        return None

    _attach_claims(request, claims)
    return claims


CurrentClaims = Annotated[TokenClaims, Depends(get_token_claims)]
OptionalClaims = Annotated[TokenClaims | None, Depends(get_optional_claims)]


def require_roles(*roles: Role) -> Callable[..., Awaitable[TokenClaims]]:
    """Build a dependency that admits only the given roles.

    Usage:
        @router.post("", dependencies=[Depends(require_roles(Role.ADMIN))])

    Raises:
        ForbiddenError: If the caller's role is not in ``roles``
    """
    allowed = [str(role) for role in roles]

    async def check_roles(claims: CurrentClaims) -> TokenClaims:
        user_role = str(claims.role) if claims.role else None
        if user_role not in allowed:
            raise ForbiddenError(
                "Access denied. Insufficient permissions.",
                details={"requiredRoles": allowed, "userRole": user_role},
            )
        return claims

    return check_roles


AdminClaims = Annotated[TokenClaims, Depends(require_roles(Role.ADMIN))]

