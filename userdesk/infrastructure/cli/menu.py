"""Interactive numbered menu for the UserDesk CLI.

The loop reads a choice, runs one service operation, prints the outcome and
shows the menu again until the user picks ``0`` or input ends. Errors are
printed and never end the loop.
"""

from collections.abc import Awaitable, Callable

from rich.markup import escape
from rich.panel import Panel
from rich.prompt import Prompt

from userdesk.application.services import UserService
from userdesk.config import get_logger
from userdesk.domain.results import Failure, Ok, Result
from userdesk.infrastructure.cli.ui import (
    console,
    display_failure,
    display_user,
    display_users,
)

logger = get_logger(__name__)

type Ask = Callable[[str], str]

MENU_OPTIONS: dict[str, str] = {
    "1": "Create User",
    "2": "Get User by ID",
    "3": "Get All Users",
    "4": "Update User",
    "5": "Delete User",
    "6": "Find User by Email",
    "0": "Exit",
}


def prompt_ask(text: str) -> str:
    """Read one line from the console; blank input is allowed."""
    return Prompt.ask(text, console=console, default="", show_default=False)


def display_menu() -> None:
    lines = [f"[cyan]{key}[/cyan]. {label}" for key, label in MENU_OPTIONS.items()]
    console.print(
        Panel.fit(
            "\n".join(lines),
            title="[bold blue]User Service[/bold blue]",
            border_style="blue",
        )
    )


def _parse_int(raw: str) -> int:
    return int(raw.strip())


def _show(result: Result, success: Callable[[object], None]) -> None:
    match result:
        case Ok(value=value):
            success(value)
        case Failure() as failure:
            display_failure(failure)


async def _create_user(service: UserService, ask: Ask) -> None:
    console.print("\n[bold]--- Create New User ---[/bold]")
    name = ask("Enter name")
    email = ask("Enter email")
    age_input = ask("Enter age (blank to skip)")
    try:
        age = _parse_int(age_input) if age_input.strip() else None
    except ValueError:
        console.print("[red]Error: Age must be a valid number![/red]")
        return

    def created(user: object) -> None:
        console.print("[green]User created successfully:[/green]")
        display_user(user)

    _show(await service.create_user(name, email, age), created)


async def _get_user_by_id(service: UserService, ask: Ask) -> None:
    console.print("\n[bold]--- Get User by ID ---[/bold]")
    try:
        user_id = _parse_int(ask("Enter user ID"))
    except ValueError:
        console.print("[red]Error: ID must be a valid number![/red]")
        return

    def found(user: object) -> None:
        if user is None:
            console.print(f"User not found with ID: {user_id}")
        else:
            display_user(user)

    _show(await service.get_user_by_id(user_id), found)


async def _get_all_users(service: UserService, ask: Ask) -> None:
    console.print("\n[bold]--- All Users ---[/bold]")
    _show(await service.get_all_users(), display_users)


async def _update_user(service: UserService, ask: Ask) -> None:
    console.print("\n[bold]--- Update User ---[/bold]")
    try:
        user_id = _parse_int(ask("Enter user ID to update"))
    except ValueError:
        console.print("[red]Error: ID must be a valid number![/red]")
        return

    current = await service.get_user_by_id(user_id)
    match current:
        case Failure() as failure:
            display_failure(failure)
            return
        case Ok(value=None):
            console.print(f"User not found with ID: {user_id}")
            return

    user = current.value
    name = ask(f"Enter new name (current: {escape(user.name)})")
    email = ask(f"Enter new email (current: {escape(user.email)})")
    age_input = ask(f"Enter new age (current: {user.age})")
    try:
        age = _parse_int(age_input) if age_input.strip() else None
    except ValueError:
        console.print("[red]Error: Age must be a valid number![/red]")
        return

    def updated(user: object) -> None:
        console.print("[green]User updated successfully:[/green]")
        display_user(user)

    _show(await service.update_user(user_id, name, email, age), updated)


async def _delete_user(service: UserService, ask: Ask) -> None:
    console.print("\n[bold]--- Delete User ---[/bold]")
    try:
        user_id = _parse_int(ask("Enter user ID to delete"))
    except ValueError:
        console.print("[red]Error: ID must be a valid number![/red]")
        return

    _show(
        await service.delete_user(user_id),
        lambda _: console.print("[green]User deleted successfully.[/green]"),
    )


async def _find_user_by_email(service: UserService, ask: Ask) -> None:
    console.print("\n[bold]--- Find User by Email ---[/bold]")
    email = ask("Enter email")

    def found(user: object) -> None:
        if user is None:
            console.print(f"User not found with email: {escape(email)}")
        else:
            display_user(user)

    _show(await service.get_user_by_email(email), found)


MENU_HANDLERS: dict[str, Callable[[UserService, Ask], Awaitable[None]]] = {
    "1": _create_user,
    "2": _get_user_by_id,
    "3": _get_all_users,
    "4": _update_user,
    "5": _delete_user,
    "6": _find_user_by_email,
}


async def run_menu(service: UserService, ask: Ask = prompt_ask) -> None:
    """Run the interactive menu until the user exits or input ends."""
    logger.info("Starting interactive menu")
    display_menu()

    while True:
        try:
            choice = ask("\nEnter your choice").strip()
            if choice == "0":
                break

            handler = MENU_HANDLERS.get(choice)
            if handler is None:
                console.print("[yellow]Invalid choice. Please try again.[/yellow]")
            else:
                await handler(service, ask)
        except EOFError:
            break
        except Exception as e:
            logger.exception("Unexpected error in interactive menu")
            console.print(f"[bold red]An unexpected error occurred:[/bold red] {escape(str(e))}")

        display_menu()

    console.print("Goodbye!")
    logger.info("Interactive menu stopped")
