"""One-shot user management commands for the UserDesk CLI."""

from typing import Annotated

from rich.console import Console
from rich.markup import escape
import typer

from userdesk.infrastructure.cli.async_helpers import run_with_service
from userdesk.infrastructure.cli.ui import (
    command_error_handler,
    display_user,
    display_users,
    unwrap_or_exit,
)

console = Console()

USERS_PANEL = "👤 Users"


def register_user_commands(app: typer.Typer) -> None:
    """Register user CRUD commands with the Typer app."""
    app.command(name="create", help="Create a new user", rich_help_panel=USERS_PANEL)(
        create_user
    )
    app.command(name="get", help="Show a user by ID", rich_help_panel=USERS_PANEL)(
        get_user
    )
    app.command(name="list", help="List all users", rich_help_panel=USERS_PANEL)(
        list_users
    )
    app.command(name="update", help="Update a user", rich_help_panel=USERS_PANEL)(
        update_user
    )
    app.command(name="delete", help="Delete a user", rich_help_panel=USERS_PANEL)(
        delete_user
    )
    app.command(
        name="find", help="Find a user by email", rich_help_panel=USERS_PANEL
    )(find_user)


@command_error_handler
def create_user(
    ctx: typer.Context,
    name: Annotated[str, typer.Argument(help="Full name (max 100 characters)")],
    email: Annotated[str, typer.Argument(help="Unique email address")],
    age: Annotated[
        int | None, typer.Option("--age", "-a", help="Age between 0 and 150")
    ] = None,
) -> None:
    """Create a new user."""
    result = run_with_service(ctx, lambda service: service.create_user(name, email, age))
    user = unwrap_or_exit(result)
    console.print(f"[bold green]✓ User created successfully[/bold green] (ID {user.id})")
    display_user(user)


@command_error_handler
def get_user(
    ctx: typer.Context,
    user_id: Annotated[int, typer.Argument(help="User ID")],
) -> None:
    """Show a user by ID."""
    user = unwrap_or_exit(
        run_with_service(ctx, lambda service: service.get_user_by_id(user_id))
    )
    if user is None:
        console.print(f"[yellow]User not found with ID: {user_id}[/yellow]")
        raise typer.Exit(code=1)
    display_user(user)


@command_error_handler
def list_users(ctx: typer.Context) -> None:
    """List all users."""
    users = unwrap_or_exit(run_with_service(ctx, lambda service: service.get_all_users()))
    display_users(users)


@command_error_handler
def update_user(
    ctx: typer.Context,
    user_id: Annotated[int, typer.Argument(help="User ID")],
    name: Annotated[str | None, typer.Option("--name", "-n", help="New name")] = None,
    email: Annotated[
        str | None, typer.Option("--email", "-e", help="New email address")
    ] = None,
    age: Annotated[int | None, typer.Option("--age", "-a", help="New age")] = None,
) -> None:
    """Update a user; options left out keep their current value."""
    user = unwrap_or_exit(
        run_with_service(
            ctx, lambda service: service.update_user(user_id, name, email, age)
        )
    )
    console.print("[bold green]✓ User updated successfully[/bold green]")
    display_user(user)


@command_error_handler
def delete_user(
    ctx: typer.Context,
    user_id: Annotated[int, typer.Argument(help="User ID")],
) -> None:
    """Delete a user."""
    unwrap_or_exit(run_with_service(ctx, lambda service: service.delete_user(user_id)))
    console.print(f"[bold green]✓ User {user_id} deleted successfully[/bold green]")


@command_error_handler
def find_user(
    ctx: typer.Context,
    email: Annotated[str, typer.Argument(help="Email address")],
) -> None:
    """Find a user by email."""
    user = unwrap_or_exit(
        run_with_service(ctx, lambda service: service.get_user_by_email(email))
    )
    if user is None:
        console.print(f"[yellow]User not found with email: {escape(email)}[/yellow]")
        raise typer.Exit(code=1)
    display_user(user)
