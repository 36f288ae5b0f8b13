"""UI helpers for CLI interaction.

This module provides reusable UI components and helpers for the CLI,
keeping the presentation logic separate from business logic.
"""

from collections.abc import Callable
import functools

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
import typer

from userdesk.config import get_logger
from userdesk.domain.entities import User
from userdesk.domain.results import Failure, Ok, Result

# Initialize console and logger
console = Console()
logger = get_logger(__name__)


def command_error_handler[**P, R](func: Callable[P, R]) -> Callable[P, R]:
    """Decorator to standardize error handling for CLI commands.

    This decorator wraps a command function to:
    1. Provide consistent error handling using Typer's Exit mechanism
    2. Log errors using Loguru with proper context
    3. Display user-friendly error messages with Rich
    """

    @functools.wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
        operation = func.__name__.replace("_", " ")

        with logger.contextualize(operation=operation):
            try:
                logger.debug(f"Executing {operation}")
                return func(*args, **kwargs)

            except typer.Exit:
                raise

            except typer.Abort:
                logger.info(f"Operation {operation} aborted by user")
                raise

            except Exception as e:
                logger.exception(f"Error during {operation}")
                console.print(
                    f"\n[bold red]✗ Error during {operation}:[/bold red] {escape(str(e))}"
                )
                raise typer.Exit(code=1) from e

    return wrapper


def display_failure(failure: Failure) -> None:
    """Print a failed result as a single error line."""
    label = failure.kind.value.replace("_", " ")
    console.print(f"[bold red]✗ {label}:[/bold red] {escape(failure.message)}")


def unwrap_or_exit[T](result: Result[T]) -> T:
    """Return the value of an ``Ok`` result, or print the failure and exit 1."""
    match result:
        case Ok(value=value):
            return value
        case Failure() as failure:
            display_failure(failure)
            raise typer.Exit(code=1)


def display_user(user: User) -> None:
    """Print a single user as a panel."""
    age = "-" if user.age is None else str(user.age)
    console.print(
        Panel.fit(
            f"[bold]ID:[/bold] {user.id}\n"
            f"[bold]Name:[/bold] {escape(user.name)}\n"
            f"[bold]Email:[/bold] {escape(user.email)}\n"
            f"[bold]Age:[/bold] {age}",
            title="[bold blue]User[/bold blue]",
            border_style="blue",
        )
    )


def display_users(users: list[User], title: str = "Users") -> None:
    """Print users as a table, or a notice when there are none."""
    if not users:
        console.print("[yellow]No users found.[/yellow]")
        return

    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("ID", justify="right", style="dim")
    table.add_column("Name")
    table.add_column("Email", style="green")
    table.add_column("Age", justify="right")

    for user in users:
        table.add_row(
            str(user.id),
            escape(user.name),
            escape(user.email),
            "-" if user.age is None else str(user.age),
        )

    console.print(table)
