"""Pytest configuration and shared fixtures."""

from collections.abc import AsyncGenerator

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event

from travlr.core.auth.backend import issue_access_token, pwd_context
from travlr.core.constants import Role
from travlr.core.database import Database
from travlr.main import create_app
from travlr.modules.users.models import User
from tests.factories.user import create_user


@pytest.fixture(scope="session", autouse=True)
def fast_password_hashing() -> None:
    """Use the cheapest bcrypt cost so hashing doesn't dominate test time."""
    pwd_context.update(bcrypt__rounds=4)


def _enforce_foreign_keys(dbapi_connection, _record) -> None:
    """SQLite ignores foreign keys unless asked per connection."""
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


@pytest.fixture
async def database(tmp_path) -> AsyncGenerator[Database, None]:
    """Provide a fresh SQLite database with all tables created."""
    database = Database(f"sqlite+aiosqlite:///{tmp_path / 'travlr.db'}")
    event.listen(database.engine.sync_engine, "connect", _enforce_foreign_keys)
    await database.create_all()

    yield database

    await database.drop_all()
    await database.dispose()


@pytest.fixture
async def app(database: Database) -> FastAPI:
    """Create test application instance bound to the test database."""
    return create_app(database=database)


@pytest.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """Provide async HTTP client for API testing."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as client:
        yield client


# ============================================================
# User Fixtures
# ============================================================


@pytest.fixture
async def admin_user(database: Database) -> User:
    """A persisted admin."""
    return await create_user(
        database, email="admin@example.com", name="Admin User", role=Role.ADMIN
    )


@pytest.fixture
async def regular_user(database: Database) -> User:
    """A persisted non-admin user."""
    return await create_user(database, email="user@example.com", name="Regular User")


@pytest.fixture
def admin_headers(admin_user: User) -> dict[str, str]:
    """Authorization headers carrying an admin access token."""
    return {"Authorization": f"Bearer {issue_access_token(admin_user)}"}


@pytest.fixture
def user_headers(regular_user: User) -> dict[str, str]:
    """Authorization headers carrying a user-role access token."""
    return {"Authorization": f"Bearer {issue_access_token(regular_user)}"}
