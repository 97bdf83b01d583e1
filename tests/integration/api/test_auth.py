"""Integration tests for auth endpoints."""

from datetime import timedelta

import pytest
from httpx import AsyncClient

from travlr.core.auth.backend import (
    decode_access_token,
    issue_access_token,
    issue_refresh_token,
)
from travlr.core.constants import Role
from tests.factories.user import TEST_PASSWORD, RegisterRequestFactory


pytestmark = pytest.mark.integration


class TestRegistration:
    """Tests for user registration endpoint."""

    async def test_register_success(self, client: AsyncClient):
        """POST /api/v1/auth/register should create a user and return tokens."""
        response = await client.post(
            "/api/v1/auth/register",
            json={
                "name": "New User",
                "email": "NewUser@Example.com",
                "password": TEST_PASSWORD,
            },
        )

        assert response.status_code == 201
        data = response.json()
        assert data["message"] == "User registered successfully"
        assert data["refreshToken"]
        claims = decode_access_token(data["token"])
        assert claims.email == "newuser@example.com"
        assert claims.role == Role.USER

    async def test_register_duplicate_email(self, client: AsyncClient, regular_user):
        """POST /api/v1/auth/register should reject a duplicate email."""
        response = await client.post(
            "/api/v1/auth/register",
            json={
                "name": "Another User",
                "email": regular_user.email,
                "password": TEST_PASSWORD,
            },
        )

        assert response.status_code == 409
        data = response.json()
        assert data["error"] == "CONFLICT"
        assert data["details"] == {"field": "email"}

    async def test_register_weak_password(self, client: AsyncClient):
        """POST /api/v1/auth/register should reject a weak password."""
        response = await client.post(
            "/api/v1/auth/register",
            json={"name": "New User", "email": "new@example.com", "password": "short"},
        )

        assert response.status_code == 400
        data = response.json()
        assert data["error"] == "VALIDATION_ERROR"
        assert data["details"]["errors"][0]["field"] == "password"

    async def test_register_admin_without_token(self, client: AsyncClient):
        """Anonymous callers cannot create admin accounts."""
        data = RegisterRequestFactory.build(role=Role.ADMIN)

        response = await client.post(
            "/api/v1/auth/register", json=data.model_dump(mode="json")
        )

        assert response.status_code == 403
        assert response.json()["error"] == "FORBIDDEN"

    async def test_register_admin_as_user(self, client: AsyncClient, user_headers):
        data = RegisterRequestFactory.build(role=Role.ADMIN)

        response = await client.post(
            "/api/v1/auth/register",
            json=data.model_dump(mode="json"),
            headers=user_headers,
        )

        assert response.status_code == 403

    async def test_register_admin_as_admin(self, client: AsyncClient, admin_headers):
        data = RegisterRequestFactory.build(role=Role.ADMIN)

        response = await client.post(
            "/api/v1/auth/register",
            json=data.model_dump(mode="json"),
            headers=admin_headers,
        )

        assert response.status_code == 201
        assert decode_access_token(response.json()["token"]).role == Role.ADMIN


class TestLogin:
    """Tests for login endpoint."""

    async def test_login_success(self, client: AsyncClient, admin_user):
        response = await client.post(
            "/api/v1/auth/login",
            json={"email": "ADMIN@example.com", "password": TEST_PASSWORD},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["message"] == "Login successful"
        assert data["user"]["email"] == admin_user.email
        assert data["user"]["role"] == "admin"
        assert "passwordHash" not in data["user"]
        assert data["refreshToken"]
        assert decode_access_token(data["token"]).user_id == admin_user.id

    async def test_login_wrong_password(self, client: AsyncClient, admin_user):
        response = await client.post(
            "/api/v1/auth/login",
            json={"email": admin_user.email, "password": "WrongPass123"},
        )

        assert response.status_code == 401
        assert response.json()["error"] == "INVALID_CREDENTIALS"

    async def test_login_unknown_email(self, client: AsyncClient):
        response = await client.post(
            "/api/v1/auth/login",
            json={"email": "nobody@example.com", "password": TEST_PASSWORD},
        )

        assert response.status_code == 401
        assert response.json()["error"] == "INVALID_CREDENTIALS"


class TestRefresh:
    """Tests for token refresh endpoint."""

    async def test_refresh_success(self, client: AsyncClient, regular_user):
        response = await client.post(
            "/api/v1/auth/refresh",
            json={"refreshToken": issue_refresh_token(regular_user)},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["message"] == "Token refreshed successfully"
        assert decode_access_token(data["token"]).user_id == regular_user.id

    async def test_refresh_with_access_token(self, client: AsyncClient, regular_user):
        response = await client.post(
            "/api/v1/auth/refresh",
            json={"refreshToken": issue_access_token(regular_user)},
        )

        assert response.status_code == 401
        assert response.json()["error"] == "INVALID_REFRESH_TOKEN"

    async def test_refresh_expired(self, client: AsyncClient, regular_user):
        token = issue_refresh_token(regular_user, expires_delta=timedelta(seconds=-5))

        response = await client.post(
            "/api/v1/auth/refresh", json={"refreshToken": token}
        )

        assert response.status_code == 401
        assert response.json()["error"] == "TOKEN_EXPIRED"


class TestProfile:
    """Tests for the profile endpoint and the 401 responses."""

    async def test_profile(self, client: AsyncClient, regular_user, user_headers):
        response = await client.get("/api/v1/auth/profile", headers=user_headers)

        assert response.status_code == 200
        data = response.json()
        assert data["id"] == str(regular_user.id)
        assert data["name"] == "Regular User"
        assert "createdAt" in data

    async def test_no_header(self, client: AsyncClient):
        response = await client.get("/api/v1/auth/profile")

        assert response.status_code == 401
        assert response.json() == {
            "message": "Access denied. No token provided.",
            "error": "UNAUTHORIZED",
        }

    async def test_wrong_scheme(self, client: AsyncClient):
        response = await client.get(
            "/api/v1/auth/profile", headers={"Authorization": "Token abc"}
        )

        assert response.status_code == 401
        assert response.json()["error"] == "INVALID_TOKEN_FORMAT"

    async def test_bad_token(self, client: AsyncClient):
        response = await client.get(
            "/api/v1/auth/profile", headers={"Authorization": "Bearer bad.token.value"}
        )

        assert response.status_code == 401
        assert response.json()["error"] == "INVALID_TOKEN"

    async def test_expired_token(self, client: AsyncClient, regular_user):
        token = issue_access_token(regular_user, expires_delta=timedelta(seconds=-5))

        response = await client.get(
            "/api/v1/auth/profile", headers={"Authorization": f"Bearer {token}"}
        )

        assert response.status_code == 401
        assert response.json()["error"] == "TOKEN_EXPIRED"
