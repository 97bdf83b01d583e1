"""Authentication API routes.

Provides endpoints for:
- User registration
- Login
- Access token refresh
- Current user profile
"""

from fastapi import APIRouter, status

from travlr.core.auth.dependencies import CurrentClaims, OptionalClaims
from travlr.core.auth.service import AuthSvc
from travlr.modules.users.schemas import (
    LoginRequest,
    LoginResponse,
    RefreshTokenRequest,
    RefreshTokenResponse,
    RegisterRequest,
    RegisterResponse,
    UserResponse,
)


router = APIRouter(prefix="/auth", tags=["auth"])


@router.post(
    "/register",
    response_model=RegisterResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register new user",
    description="Creates a user account. Creating an admin requires an admin token.",
)
async def register(
    data: RegisterRequest,
    service: AuthSvc,
    caller: OptionalClaims,
) -> RegisterResponse:
    """Register a new user."""
    _user, token, refresh_token = await service.register(
        name=data.name,
        email=data.email,
        password=data.password,
        role=data.role,
        caller=caller,
    )

    return RegisterResponse(token=token, refresh_token=refresh_token)


@router.post(
    "/login",
    response_model=LoginResponse,
    summary="Login with email and password",
    description="Authenticate with email and password to receive access and refresh tokens.",
)
async def login(
    data: LoginRequest,
    service: AuthSvc,
) -> LoginResponse:
    """Login with email and password."""
    user, token, refresh_token = await service.login(
        email=data.email,
        password=data.password,
    )

    return LoginResponse(
        user=UserResponse.model_validate(user),
        token=token,
        refresh_token=refresh_token,
    )


@router.post(
    "/refresh",
    response_model=RefreshTokenResponse,
    summary="Refresh access token",
    description="Use a refresh token to obtain a new access token.",
)
async def refresh_token(
    data: RefreshTokenRequest,
    service: AuthSvc,
) -> RefreshTokenResponse:
    """Refresh the access token."""
    token = await service.refresh(data.refresh_token)
    return RefreshTokenResponse(token=token)


@router.get(
    "/profile",
    response_model=UserResponse,
    summary="Get current user",
    description="Returns the authenticated user's profile.",
)
async def get_profile(
    claims: CurrentClaims,
    service: AuthSvc,
) -> UserResponse:
    """Get current user profile."""
    user = await service.profile(claims)
    return UserResponse.model_validate(user)
