"""Async helpers for CLI commands.

Each CLI invocation builds its own ``Database`` handle, wires the repository
and service explicitly, and disposes the engine when the command finishes.
"""

import asyncio
from collections.abc import AsyncIterator, Awaitable, Callable
from contextlib import asynccontextmanager

import typer

from userdesk.application.services import UserService
from userdesk.infrastructure.persistence import Database, UserRepository


@asynccontextmanager
async def open_user_service(database_url: str | None = None) -> AsyncIterator[UserService]:
    """Yield a ready-to-use service backed by a freshly initialized database."""
    async with Database.from_settings(database_url) as database:
        await database.init_schema()
        yield UserService(UserRepository(database))


def database_url_from(ctx: typer.Context) -> str | None:
    """Database URL chosen on the command line, if any."""
    obj = ctx.obj if isinstance(ctx.obj, dict) else {}
    return obj.get("database_url")


def run_with_service[T](
    ctx: typer.Context,
    operation: Callable[[UserService], Awaitable[T]],
) -> T:
    """Run ``operation`` against a user service inside a fresh event loop."""

    async def _run() -> T:
        async with open_user_service(database_url_from(ctx)) as service:
            return await operation(service)

    return asyncio.run(_run())
