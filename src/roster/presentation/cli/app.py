"""Roster CLI application using Typer.

Command-line utilities for operating the Roster backend: secret
generation, schema creation, account administration and student
record maintenance.
"""

import asyncio
import secrets

import typer
from rich.console import Console

from roster.infrastructure.persistence.sqlalchemy.repositories import (
    StudentRepositorySQLAlchemy,
)
from roster.presentation.api.dependencies import (
    create_tables,
    get_engine,
    get_session_maker,
)
from roster_identity import Account, AccountNotFoundError, Role
from roster_identity.infrastructure.persistence.sqlalchemy import (
    AccountRepositorySQLAlchemy,
)

app = typer.Typer(
    name="roster",
    help="Roster - student records API CLI",
    no_args_is_help=True,
)
console = Console()


secrets_app = typer.Typer(
    name="secrets",
    help="Secret generation utilities",
    no_args_is_help=True,
)
db_app = typer.Typer(
    name="db",
    help="Database schema utilities",
    no_args_is_help=True,
)
accounts_app = typer.Typer(
    name="accounts",
    help="Account administration",
    no_args_is_help=True,
)
students_app = typer.Typer(
    name="students",
    help="Student record maintenance",
    no_args_is_help=True,
)
app.add_typer(secrets_app)
app.add_typer(db_app)
app.add_typer(accounts_app)
app.add_typer(students_app)


def _run(coro):
    """Run a database coroutine and release the engine afterwards."""

    async def _with_dispose():
        try:
            return await coro
        finally:
            await get_engine().dispose()

    return asyncio.run(_with_dispose())


@secrets_app.command("generate")
def generate_secrets() -> None:
    """Generate secure secrets for Roster configuration.

    Generates two required secrets:
    - JWT_SECRET_KEY: Secret for signing session tokens
    - POSTGRES_PASSWORD: Database password

    Copy the output to your .env file.
    """
    console.print("\n[bold green]Roster Secret Generation[/bold green]")
    console.print("=" * 60)
    console.print(
        "\nGenerated secrets for your [bold].env[/bold] configuration file:\n"
    )

    # 64 bytes of entropy for HS256
    jwt_secret = secrets.token_urlsafe(64)
    console.print(f"[cyan]JWT_SECRET_KEY[/cyan]={jwt_secret}")

    db_password = secrets.token_urlsafe(32)
    console.print(f"[cyan]POSTGRES_PASSWORD[/cyan]={db_password}")

    console.print("\n" + "=" * 60)
    console.print(
        "[yellow]Keep these secrets out of version control. Rotating "
        "JWT_SECRET_KEY signs every user out.[/yellow]"
    )
    console.print(
        "[dim]Copy the above values to config/.env or config/.env.dev.[/dim]\n"
    )


@db_app.command("init")
def db_init() -> None:
    """Create missing database tables. Existing data is never touched."""
    _run(create_tables())
    console.print("[green]Database schema is up to date.[/green]")


async def _change_account(email: str, change) -> Account:
    async with get_session_maker()() as session:
        repository = AccountRepositorySQLAlchemy(session)
        account = await repository.find_by_email(email)
        if account is None:
            raise AccountNotFoundError(email)

        change(account)
        await repository.save(account)
        await session.commit()
        return account


def _apply_account_change(email: str, change, done: str) -> None:
    try:
        account = _run(_change_account(email, change))
    except AccountNotFoundError:
        console.print(f"[red]No account registered for {email}[/red]")
        raise typer.Exit(code=1) from None

    roles = ", ".join(sorted(account.roles)) or "-"
    state = "active" if account.is_active else "inactive"
    console.print(f"[green]{done}[/green] {account.email} ({state}; roles: {roles})")


def _parse_role(role: str) -> Role:
    try:
        return Role(role.lower())
    except ValueError:
        known = ", ".join(r.value for r in Role)
        console.print(f"[red]Unknown role {role!r}. Known roles: {known}[/red]")
        raise typer.Exit(code=2) from None


@accounts_app.command("grant-role")
def grant_role(email: str, role: str) -> None:
    """Add ROLE to the account registered under EMAIL."""
    parsed = _parse_role(role)
    _apply_account_change(email, lambda a: a.grant_role(parsed), "Granted")


@accounts_app.command("revoke-role")
def revoke_role(email: str, role: str) -> None:
    """Remove ROLE from the account registered under EMAIL."""
    parsed = _parse_role(role)
    _apply_account_change(email, lambda a: a.revoke_role(parsed), "Revoked")


@accounts_app.command("activate")
def activate(email: str) -> None:
    """Allow the account to sign in again."""
    _apply_account_change(email, lambda a: a.activate(), "Activated")


@accounts_app.command("deactivate")
def deactivate(email: str) -> None:
    """Reject every token of the account from now on."""
    _apply_account_change(email, lambda a: a.deactivate(), "Deactivated")


async def _purge_students() -> int:
    async with get_session_maker()() as session:
        return await StudentRepositorySQLAlchemy(session).delete_all()


@students_app.command("purge")
def purge_students(
    yes: bool = typer.Option(
        False,
        "--yes",
        "-y",
        help="Skip the confirmation prompt",
    ),
) -> None:
    """Delete every student record and grade."""
    if not yes:
        typer.confirm("This deletes ALL student records. Continue?", abort=True)

    count = _run(_purge_students())
    console.print(f"[green]Deleted {count} student record(s).[/green]")


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
