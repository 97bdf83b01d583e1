"""Authentication backend for JWT and password handling.

This module provides core authentication utilities including:
- Password hashing with bcrypt
- Access and refresh token issuance
- Token verification with distinct expired/invalid failures
"""

from datetime import UTC, datetime, timedelta
from typing import Any, Protocol
from uuid import UUID

from jose import ExpiredSignatureError, JWTError, jwt
from passlib.context import CryptContext
from pydantic import ValidationError as PydanticValidationError

from travlr.config import settings
from travlr.core.auth.schemas import TokenClaims
from travlr.core.constants import ACCESS_TOKEN_TYPE, BCRYPT_ROUNDS, REFRESH_TOKEN_TYPE
from travlr.core.errors import InvalidTokenError, TokenExpiredError


pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=BCRYPT_ROUNDS,
)


class TokenSubject(Protocol):
    """Anything tokens can be issued for; satisfied by the User model."""

    id: UUID
    email: str
    name: str
    role: str


# ============================================================
# Password Utilities
# ============================================================


def hash_password(password: str) -> str:
    """Hash a password using bcrypt.

    Args:
        password: Plain text password

    Returns:
        Bcrypt hash of the password
    """
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash.

    Args:
        plain_password: Plain text password to verify
        hashed_password: Bcrypt hash to verify against

    Returns:
        True if password matches, False otherwise
    """
    return pwd_context.verify(plain_password, hashed_password)


# ============================================================
# JWT Token Utilities
# ============================================================


def _encode(claims: dict[str, Any], secret: str, expires_delta: timedelta) -> str:
    now = datetime.now(UTC)
    to_encode = {**claims, "iat": now, "exp": now + expires_delta}
    return jwt.encode(to_encode, secret, algorithm=settings.jwt_algorithm)


def issue_access_token(
    user: TokenSubject,
    expires_delta: timedelta | None = None,
) -> str:
    """Create a short-lived access token carrying the user's identity and role.

    Args:
        user: User to issue the token for
        expires_delta: Optional custom expiration time

    Returns:
        Encoded JWT access token
    """
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.access_token_expire_minutes)

    claims = {
        "sub": str(user.id),
        "email": user.email,
        "name": user.name,
        "role": str(user.role),
        "type": ACCESS_TOKEN_TYPE,
    }
    return _encode(claims, settings.jwt_access_secret, expires_delta)


def issue_refresh_token(
    user: TokenSubject,
    expires_delta: timedelta | None = None,
) -> str:
    """Create a long-lived refresh token.

    Refresh tokens carry no role; the role is re-read from the database
    when a new access token is minted.

    Args:
        user: User to issue the token for
        expires_delta: Optional custom expiration time

    Returns:
        Encoded JWT refresh token
    """
    if expires_delta is None:
        expires_delta = timedelta(days=settings.refresh_token_expire_days)

    claims = {
        "sub": str(user.id),
        "email": user.email,
        "type": REFRESH_TOKEN_TYPE,
    }
    return _encode(claims, settings.refresh_secret, expires_delta)


def verify_token(token: str, secret: str) -> TokenClaims:
    """Decode and validate a JWT.

    Args:
        token: The encoded JWT
        secret: Secret the token must be signed with

    Returns:
        The decoded claims

    Raises:
        TokenExpiredError: If the signature is valid but ``exp`` has passed
        InvalidTokenError: If the token is malformed, badly signed or
            missing required claims
    """
    try:
        payload = jwt.decode(token, secret, algorithms=[settings.jwt_algorithm])
    except ExpiredSignatureError as e:
        raise TokenExpiredError() from e
    except JWTError as e:
        raise InvalidTokenError() from e

    try:
        return TokenClaims.model_validate(payload)
    except PydanticValidationError as e:
        raise InvalidTokenError() from e


def decode_access_token(token: str) -> TokenClaims:
    """Verify an access token and check its type.

    Raises:
        TokenExpiredError: If the token has expired
        InvalidTokenError: If the token is invalid or not an access token
    """
    claims = verify_token(token, settings.jwt_access_secret)
    if claims.type != ACCESS_TOKEN_TYPE:
        raise InvalidTokenError()
    return claims
