"""Authentication service for registration, login and token refresh."""

from typing import Annotated

import structlog
from fastapi import Depends

from travlr.api.dependencies import DBSession
from travlr.config import settings
from travlr.core.auth.backend import (
    hash_password,
    issue_access_token,
    issue_refresh_token,
    verify_password,
    verify_token,
)
from travlr.core.auth.schemas import TokenClaims
from travlr.core.constants import REFRESH_TOKEN_TYPE, Role
from travlr.core.errors import (
    ConflictError,
    ForbiddenError,
    InvalidCredentialsError,
    InvalidRefreshTokenError,
    InvalidTokenError,
    UnauthorizedError,
)
from travlr.modules.users.models import User
from travlr.modules.users.repos import UserRepository


logger = structlog.get_logger()


class AuthService:
    """Service for authentication operations.

    Handles user registration, login, token refresh and profile lookup.
    """

    def __init__(self, db: DBSession) -> None:
        self.db = db
        self.user_repo = UserRepository(db)

    async def register(
        self,
        name: str,
        email: str,
        password: str,
        role: Role = Role.USER,
        caller: TokenClaims | None = None,
    ) -> tuple[User, str, str]:
        """Register a new user.

        Creating an admin account requires the caller to be an admin.

        Args:
            name: Display name
            email: Email address
            password: Plain text password
            role: Requested role
            caller: Claims of the authenticated caller, if any

        Returns:
            Tuple of (user, access_token, refresh_token)

        Raises:
            ForbiddenError: If a non-admin requests the admin role
            ConflictError: If the email is already registered
        """
        if role == Role.ADMIN and (caller is None or not caller.is_admin):
            raise ForbiddenError(
                "Only administrators can create admin accounts",
                details={
                    "requiredRoles": [str(Role.ADMIN)],
                    "userRole": str(caller.role) if caller and caller.role else None,
                },
            )

        email = email.strip().lower()
        if await self.user_repo.get_by_email(email):
            raise ConflictError(
                "A user with this email already exists",
                details={"field": "email"},
            )

        user = User(
            name=name,
            email=email,
            role=str(role),
            password_hash=hash_password(password),
        )
        user = await self.user_repo.create(user)

        logger.info("user_registered", user_id=str(user.id), role=user.role)

        return user, issue_access_token(user), issue_refresh_token(user)

    async def login(self, email: str, password: str) -> tuple[User, str, str]:
        """Authenticate a user with email and password.

        Returns:
            Tuple of (user, access_token, refresh_token)

        Raises:
            InvalidCredentialsError: If the email is unknown or the password
                does not match; the two cases are indistinguishable
        """
        user = await self.user_repo.get_by_email(email)
        if not user or not verify_password(password, user.password_hash):
            logger.info("login_failed")
            raise InvalidCredentialsError()

        logger.info("user_logged_in", user_id=str(user.id))

        return user, issue_access_token(user), issue_refresh_token(user)

    async def refresh(self, refresh_token: str) -> str:
        """Mint a new access token from a refresh token.

        The user's current role is re-read so promotions take effect on
        the next refresh.

        Args:
            refresh_token: A refresh token issued at login or registration

        Returns:
            A new access token

        Raises:
            TokenExpiredError: If the refresh token has expired
            InvalidRefreshTokenError: If the token is badly signed, not a
                refresh token, or its user no longer exists
        """
        try:
            claims = verify_token(refresh_token, settings.refresh_secret)
        except InvalidTokenError as e:
            raise InvalidRefreshTokenError() from e

        if claims.type != REFRESH_TOKEN_TYPE:
            raise InvalidRefreshTokenError()

        user = await self.user_repo.get_by_id(claims.user_id)
        if not user:
            raise InvalidRefreshTokenError()

        return issue_access_token(user)

    async def profile(self, claims: TokenClaims) -> User:
        """Load the user behind an access token.

        Raises:
            UnauthorizedError: If the user no longer exists
        """
        user = await self.user_repo.get_by_id(claims.user_id)
        if not user:
            raise UnauthorizedError("User not found")
        return user


# Type alias for dependency injection
AuthSvc = Annotated[AuthService, Depends(AuthService)]
