"""Tests for the travlr management CLI."""

import asyncio

import pytest
from sqlalchemy import func, select
from typer.testing import CliRunner

from travlr import __version__
from travlr.cli import app
from travlr.config import Settings
from travlr.core.database import Database
from travlr.modules.trips.models import Trip
from travlr.modules.users.models import User


runner = CliRunner()


@pytest.fixture
def cli_settings(tmp_path, monkeypatch) -> Settings:
    """Point the CLI at a throwaway SQLite database."""
    settings = Settings(database_url=f"sqlite+aiosqlite:///{tmp_path / 'cli.db'}")
    monkeypatch.setattr("travlr.cli.settings", settings)
    return settings


def scalar(settings: Settings, stmt):
    async def run():
        database = Database.from_settings(settings)
        try:
            async with database.session() as session:
                return (await session.execute(stmt)).scalar_one_or_none()
        finally:
            await database.dispose()

    return asyncio.run(run())


class TestVersion:
    def test_version_flag(self) -> None:
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.stdout


class TestCreateAdmin:
    def test_creates_admin(self, cli_settings) -> None:
        result = runner.invoke(
            app,
            ["create-admin", "--email", "Root@Example.com", "--password", "SecurePass123"],
        )

        assert result.exit_code == 0, result.stdout
        assert "Created admin" in result.stdout
        user = scalar(cli_settings, select(User).where(User.email == "root@example.com"))
        assert user is not None
        assert user.role == "admin"
        assert user.name == "Administrator"

    def test_promotes_existing_user(self, cli_settings) -> None:
        args = ["create-admin", "--email", "root@example.com", "--password", "SecurePass123"]
        runner.invoke(app, args)

        result = runner.invoke(app, args)

        assert result.exit_code == 0, result.stdout
        assert "Promoted admin" in result.stdout
        count = scalar(cli_settings, select(func.count()).select_from(User))
        assert count == 1

    def test_weak_password_is_rejected(self, cli_settings) -> None:
        result = runner.invoke(
            app, ["create-admin", "--email", "root@example.com", "--password", "weak"]
        )

        assert result.exit_code == 1
        assert "password" in result.stdout


class TestSeed:
    def test_requires_an_admin(self, cli_settings) -> None:
        result = runner.invoke(app, ["seed"])

        assert result.exit_code == 1
        assert "No admin user found" in result.stdout

    def test_seeds_catalogue_once(self, cli_settings) -> None:
        runner.invoke(
            app,
            ["create-admin", "--email", "root@example.com", "--password", "SecurePass123"],
        )

        first = runner.invoke(app, ["seed"])
        second = runner.invoke(app, ["seed"])

        assert first.exit_code == 0, first.stdout
        assert second.exit_code == 0, second.stdout
        assert "Seeded records" in first.stdout
        count = scalar(cli_settings, select(func.count()).select_from(Trip))
        assert count == 3
