"""Travlr management CLI."""

import asyncio

import typer
from pydantic import ValidationError as PydanticValidationError
from rich.console import Console
from rich.table import Table
from sqlalchemy import select

from travlr import __version__
from travlr.config import settings
from travlr.core.audit import setup_audit_listeners
from travlr.core.auth.backend import hash_password
from travlr.core.constants import Role
from travlr.core.database import Database
from travlr.modules import discover_modules
from travlr.modules.users.models import User
from travlr.modules.users.repos import UserRepository
from travlr.modules.users.schemas import RegisterRequest


console = Console()

app = typer.Typer(
    name="travlr",
    help="Manage the Travlr API database.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


@app.callback(invoke_without_command=True)
def version_callback(
    version: bool = typer.Option(
        False, "--version", "-v", help="Show version and exit."
    ),
) -> None:
    """Travlr CLI - Manage the Travlr API database."""
    if version:
        console.print(f"[bold cyan]travlr[/bold cyan] version {__version__}")
        raise typer.Exit()


async def _create_admin(email: str, name: str, password: str) -> tuple[User, bool]:
    database = Database.from_settings(settings)
    try:
        await database.create_all()
        async with database.session() as session:
            repo = UserRepository(session)
            user = await repo.get_by_email(email)
            if user is not None:
                user.role = Role.ADMIN.value
                user.password_hash = hash_password(password)
                return await repo.update(user), False

            user = User(
                email=email.strip().lower(),
                name=name,
                role=Role.ADMIN.value,
                password_hash=hash_password(password),
            )
            return await repo.create(user), True
    finally:
        await database.dispose()


@app.command(name="create-admin")
def create_admin(
    email: str = typer.Option(..., "--email", "-e", help="Admin email address"),
    name: str = typer.Option("Administrator", "--name", "-n", help="Display name"),
    password: str = typer.Option(
        ...,
        "--password",
        "-p",
        prompt=True,
        hide_input=True,
        confirmation_prompt=True,
        help="Admin password",
    ),
) -> None:
    """Create an admin user, or promote an existing user to admin."""
    try:
        data = RegisterRequest(name=name, email=email, password=password)
    except PydanticValidationError as e:
        for error in e.errors():
            field = ".".join(str(part) for part in error["loc"])
            console.print(f"[red]Error:[/red] {field}: {error['msg']}")
        raise typer.Exit(code=1) from e

    setup_audit_listeners()
    user, created = asyncio.run(_create_admin(data.email, data.name, data.password))

    action = "Created" if created else "Promoted"
    console.print(f"[green]✓[/green] {action} admin [bold]{user.email}[/bold] ({user.id})")


async def _seed() -> dict[str, int] | None:
    from travlr.seed import seed_catalogue  # noqa: PLC0415

    database = Database.from_settings(settings)
    try:
        await database.create_all()
        async with database.session() as session:
            result = await session.execute(
                select(User)
                .where(User.role == Role.ADMIN.value)
                .order_by(User.created_at)
                .limit(1)
            )
            author = result.scalar_one_or_none()
            if author is None:
                return None
            return await seed_catalogue(session, author)
    finally:
        await database.dispose()


@app.command()
def seed() -> None:
    """Load demo trips, rooms, meals and news articles."""
    setup_audit_listeners()
    counts = asyncio.run(_seed())

    if counts is None:
        console.print(
            "[red]Error:[/red] No admin user found. Run [bold]travlr create-admin[/bold] first."
        )
        raise typer.Exit(code=1)

    table = Table(title="Seeded records", show_header=True)
    table.add_column("Resource", style="cyan", no_wrap=True)
    table.add_column("Inserted", style="green", justify="right")
    for resource, count in counts.items():
        table.add_row(resource, str(count))

    console.print()
    console.print(table)
    console.print()


def main() -> None:
    """Entry point for the CLI."""
    # Register every model on the shared metadata before create_all
    discover_modules()
    app()


if __name__ == "__main__":
    main()
