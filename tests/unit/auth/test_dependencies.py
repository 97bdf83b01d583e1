"""Unit tests for auth dependencies."""

from datetime import UTC, datetime, timedelta
from types import SimpleNamespace
from unittest.mock import MagicMock
from uuid import uuid4

import pytest

from travlr.core.auth.backend import issue_access_token, issue_refresh_token
from travlr.core.auth.dependencies import (
    get_optional_claims,
    get_token_claims,
    parse_authorization_header,
    require_roles,
)
from travlr.core.auth.schemas import TokenClaims
from travlr.core.constants import Role
from travlr.core.errors import (
    ForbiddenError,
    InvalidTokenError,
    InvalidTokenFormatError,
    TokenExpiredError,
    UnauthorizedError,
)


def make_user(role: str = "user") -> SimpleNamespace:
    return SimpleNamespace(
        id=uuid4(), email="traveller@example.com", name="Jane Traveller", role=role
    )


def make_claims(role: Role | None = Role.USER) -> TokenClaims:
    return TokenClaims(
        user_id=uuid4(),
        email="traveller@example.com",
        name="Jane Traveller",
        role=role,
        exp=datetime.now(UTC) + timedelta(hours=1),
    )


def make_request() -> MagicMock:
    request = MagicMock()
    request.state = SimpleNamespace()
    return request


class TestParseAuthorizationHeader:
    """Tests for Bearer header parsing."""

    def test_extracts_token(self):
        assert parse_authorization_header("Bearer abc.def.ghi") == "abc.def.ghi"

    @pytest.mark.parametrize(
        "header",
        ["abc.def.ghi", "Basic abc", "Bearer", "Bearer a b", "bearer abc"],
    )
    def test_rejects_malformed_headers(self, header):
        with pytest.raises(InvalidTokenFormatError) as exc_info:
            parse_authorization_header(header)

        assert exc_info.value.error_code == "INVALID_TOKEN_FORMAT"

    def test_empty_token_means_no_token(self):
        with pytest.raises(UnauthorizedError) as exc_info:
            parse_authorization_header("Bearer ")

        assert exc_info.value.error_code == "UNAUTHORIZED"
        assert exc_info.value.message == "Access denied. No token provided."


class TestGetTokenClaims:
    """Tests for the required-auth dependency."""

    async def test_missing_header_raises_unauthorized(self):
        with pytest.raises(UnauthorizedError) as exc_info:
            await get_token_claims(make_request(), authorization=None)

        assert exc_info.value.error_code == "UNAUTHORIZED"

    async def test_empty_bearer_token_raises_unauthorized(self):
        with pytest.raises(UnauthorizedError) as exc_info:
            await get_token_claims(make_request(), authorization="Bearer ")

        assert exc_info.value.error_code == "UNAUTHORIZED"

    async def test_malformed_header_raises_invalid_format(self):
        with pytest.raises(InvalidTokenFormatError):
            await get_token_claims(make_request(), authorization="Token abc")

    async def test_valid_token_attaches_claims(self):
        user = make_user(role="admin")
        request = make_request()

        claims = await get_token_claims(
            request, authorization=f"Bearer {issue_access_token(user)}"
        )

        assert claims.user_id == user.id
        assert claims.role == Role.ADMIN
        assert request.state.auth is claims

    async def test_expired_token_raises_token_expired(self):
        token = issue_access_token(make_user(), expires_delta=timedelta(seconds=-5))

        with pytest.raises(TokenExpiredError):
            await get_token_claims(make_request(), authorization=f"Bearer {token}")

    async def test_bad_token_raises_invalid_token(self):
        with pytest.raises(InvalidTokenError):
            await get_token_claims(make_request(), authorization="Bearer bad.token.value")

    async def test_refresh_token_is_rejected(self):
        token = issue_refresh_token(make_user())

        with pytest.raises(InvalidTokenError):
            await get_token_claims(make_request(), authorization=f"Bearer {token}")


class TestGetOptionalClaims:
    """Tests for the optional-auth dependency."""

    async def test_no_header_returns_none(self):
        assert await get_optional_claims(make_request(), authorization=None) is None

    @pytest.mark.parametrize("header", ["Token abc", "Bearer bad.token.value"])
    async def test_invalid_header_returns_none(self, header):
        request = make_request()

        assert await get_optional_claims(request, authorization=header) is None
        assert not hasattr(request.state, "auth")

    async def test_valid_token_attaches_claims(self):
        user = make_user()
        request = make_request()

        claims = await get_optional_claims(
            request, authorization=f"Bearer {issue_access_token(user)}"
        )

        assert claims is not None
        assert claims.user_id == user.id
        assert request.state.auth is claims


class TestRequireRoles:
    """Tests for role-based access control."""

    async def test_allowed_role_passes(self):
        check = require_roles(Role.ADMIN)
        claims = make_claims(Role.ADMIN)

        assert await check(claims) is claims

    async def test_any_listed_role_passes(self):
        check = require_roles(Role.USER, Role.ADMIN)

        assert await check(make_claims(Role.USER))

    async def test_other_role_is_forbidden_with_details(self):
        check = require_roles(Role.ADMIN)

        with pytest.raises(ForbiddenError) as exc_info:
            await check(make_claims(Role.USER))

        assert exc_info.value.status_code == 403
        assert exc_info.value.details == {
            "requiredRoles": ["admin"],
            "userRole": "user",
        }

    async def test_missing_role_is_forbidden(self):
        check = require_roles(Role.ADMIN)

        with pytest.raises(ForbiddenError) as exc_info:
            await check(make_claims(role=None))

        assert exc_info.value.details["userRole"] is None
