"""UserDesk CLI - Main application entry point and app structure."""

import asyncio
from importlib.metadata import PackageNotFoundError, version
from typing import Annotated

from rich.console import Console
import typer

from userdesk.config import get_logger, log_startup_info, setup_loguru_logger
from userdesk.infrastructure.cli.async_helpers import database_url_from, run_with_service
from userdesk.infrastructure.cli.menu import run_menu
from userdesk.infrastructure.cli.ui import command_error_handler
from userdesk.infrastructure.cli.user_commands import register_user_commands
from userdesk.infrastructure.persistence import Database

console = Console(width=80)
logger = get_logger(__name__)

app = typer.Typer(
    help="👤 UserDesk - manage users from the command line",
    no_args_is_help=True,
    rich_markup_mode="rich",
    add_completion=False,
    pretty_exceptions_enable=True,
    pretty_exceptions_short=True,
    pretty_exceptions_show_locals=False,
)

register_user_commands(app)


def _package_version() -> str:
    try:
        return version("userdesk")
    except PackageNotFoundError:
        return "0+unknown"


@app.command(name="menu", rich_help_panel="🧭 Interactive")
@command_error_handler
def menu(ctx: typer.Context) -> None:
    """Start the interactive user management menu."""
    run_with_service(ctx, run_menu)


@app.command(name="init-db", rich_help_panel="⚙️ System")
@command_error_handler
def init_db(ctx: typer.Context) -> None:
    """Create the database schema if it doesn't exist."""

    async def _init() -> None:
        async with Database.from_settings(database_url_from(ctx)) as database:
            await database.init_schema()

    asyncio.run(_init())
    console.print("[bold green]✓ Database initialized[/bold green]")


@app.command(name="version", rich_help_panel="⚙️ System")
def version_command() -> None:
    """Show version information."""
    console.print(
        f"[bold bright_blue]👤 UserDesk[/bold bright_blue] [dim]v{_package_version()}[/dim]"
    )


@app.callback()
def init_cli(
    ctx: typer.Context,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable verbose output"),
    ] = False,
    database_url: Annotated[
        str | None,
        typer.Option(
            "--database-url",
            envvar="USERDESK_DATABASE_URL",
            help="SQLAlchemy database URL (defaults to settings)",
        ),
    ] = None,
) -> None:
    """Initialize UserDesk CLI."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["database_url"] = database_url

    setup_loguru_logger(verbose)
    log_startup_info()


def main() -> int:
    """Application entry point."""
    try:
        return app() or 0
    except Exception:
        logger.exception("Unhandled exception")
        return 1
