"""Pydantic schemas for user and authentication operations."""

import re
from datetime import datetime
from uuid import UUID

from pydantic import EmailStr, Field, field_validator

from travlr.core.constants import (
    MAX_NAME_LENGTH,
    MAX_PASSWORD_LENGTH,
    MIN_NAME_LENGTH,
    MIN_PASSWORD_LENGTH,
    Role,
)
from travlr.core.schemas import APIModel


# ============================================================
# Password Validation
# ============================================================

# Password complexity rules: (regex pattern, human-readable name)
PASSWORD_COMPLEXITY_RULES: list[tuple[str, str]] = [
    (r"[A-Z]", "uppercase letter"),
    (r"[a-z]", "lowercase letter"),
    (r"\d", "digit"),
]


def validate_password_complexity(password: str) -> str:
    """Validate password meets complexity requirements.

    Requirements:
    - At least one uppercase letter
    - At least one lowercase letter
    - At least one digit

    Raises:
        ValueError: If password doesn't meet requirements
    """
    missing = [
        name
        for pattern, name in PASSWORD_COMPLEXITY_RULES
        if not re.search(pattern, password)
    ]

    if missing:
        if len(missing) == 1:
            raise ValueError(f"Password must contain at least one {missing[0]}")
        raise ValueError(f"Password must contain at least one: {', '.join(missing)}")

    return password


# ============================================================
# User Schemas
# ============================================================


class UserResponse(APIModel):
    """User profile as returned by the API. Never includes the hash."""

    id: UUID
    email: EmailStr
    name: str
    role: Role
    created_at: datetime
    updated_at: datetime


# ============================================================
# Authentication Schemas
# ============================================================


class RegisterRequest(APIModel):
    """Schema for user registration."""

    name: str = Field(..., min_length=MIN_NAME_LENGTH, max_length=MAX_NAME_LENGTH)
    email: EmailStr
    password: str = Field(
        ..., min_length=MIN_PASSWORD_LENGTH, max_length=MAX_PASSWORD_LENGTH
    )
    role: Role = Role.USER

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        return v.strip()

    @field_validator("password")
    @classmethod
    def password_complexity(cls, v: str) -> str:
        """Validate password complexity."""
        return validate_password_complexity(v)


class RegisterResponse(APIModel):
    """Schema for registration response."""

    message: str = "User registered successfully"
    token: str
    refresh_token: str


class LoginRequest(APIModel):
    """Schema for email/password login."""

    email: EmailStr
    password: str = Field(..., min_length=1)


class LoginResponse(APIModel):
    """Schema for login response."""

    message: str = "Login successful"
    user: UserResponse
    token: str
    refresh_token: str


class RefreshTokenRequest(APIModel):
    """Schema for refreshing an access token."""

    refresh_token: str = Field(..., min_length=1)


class RefreshTokenResponse(APIModel):
    """Schema for a freshly minted access token."""

    message: str = "Token refreshed successfully"
    token: str
