"""Repository decorator for standardizing DB operations.

This module provides a decorator for repository methods that handles:
- Structured logging with context and timing information
- Classification of database errors by severity
- Translation of every persistence failure into ``StorageError``

Domain errors raised inside a repository method (``NotFoundError``) pass
through unchanged.
"""

import asyncio
from collections.abc import Callable, Coroutine
import functools
import time
from typing import Any, ParamSpec, TypeVar

from sqlalchemy.exc import (
    DatabaseError,
    IntegrityError,
    OperationalError,
    SQLAlchemyError,
    TimeoutError,
)

from userdesk.config import get_logger
from userdesk.domain.errors import StorageError, UserDeskError

# Type variables for generic function signatures
P = ParamSpec("P")
T = TypeVar("T")

logger = get_logger(__name__)


def db_operation(operation_name: str | None = None):
    """Decorate repository methods with consistent logging and error handling.

    Args:
        operation_name: Optional name for the operation (defaults to function name)

    Returns:
        A decorator function that wraps async repository methods

    Example:
        @db_operation("find_user_by_id")
        async def find_by_id(self, user_id: int) -> User | None:
            ...
    """

    def decorator(
        func: Callable[P, Coroutine[Any, Any, T]],
    ) -> Callable[P, Coroutine[Any, Any, T]]:
        func_name = operation_name or func.__name__

        if not asyncio.iscoroutinefunction(func):
            raise TypeError(
                f"db_operation can only be used with async functions, but {func_name} is not async",
            )

        @functools.wraps(func)
        async def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
            start_time = time.perf_counter()
            repo_name = args[0].__class__.__name__ if args else "Repository"
            context = _build_log_context(kwargs)

            def elapsed_ms() -> float:
                return (time.perf_counter() - start_time) * 1000

            logger.trace(
                f"DB operation starting: {repo_name}.{func_name}",
                operation=func_name,
                **context,
            )

            try:
                result = await func(*args, **kwargs)
            except UserDeskError:
                raise
            except IntegrityError as e:
                logger.warning(
                    f"DB integrity error: {repo_name}.{func_name}",
                    operation=func_name,
                    error=str(e),
                    exec_time_ms=elapsed_ms(),
                    **context,
                )
                raise StorageError(f"Integrity error during {func_name}", e) from e
            except TimeoutError as e:
                logger.error(
                    f"DB timeout error: {repo_name}.{func_name}",
                    operation=func_name,
                    error=str(e),
                    exec_time_ms=elapsed_ms(),
                    **context,
                )
                raise StorageError(f"Timed out during {func_name}", e) from e
            except (OperationalError, DatabaseError) as e:
                logger.error(
                    f"DB error: {repo_name}.{func_name}",
                    operation=func_name,
                    error=str(e),
                    exec_time_ms=elapsed_ms(),
                    **context,
                )
                raise StorageError(f"Database error during {func_name}", e) from e
            except SQLAlchemyError as e:
                logger.error(
                    f"SQLAlchemy error: {repo_name}.{func_name}",
                    operation=func_name,
                    error=str(e),
                    exec_time_ms=elapsed_ms(),
                    **context,
                )
                raise StorageError(f"Storage error during {func_name}", e) from e
            except Exception as e:
                logger.exception(
                    f"Unhandled exception in {repo_name}.{func_name}",
                    operation=func_name,
                    error=str(e),
                    exec_time_ms=elapsed_ms(),
                    **context,
                )
                raise StorageError(f"Unexpected error during {func_name}", e) from e

            logger.trace(
                f"DB operation completed: {repo_name}.{func_name}",
                operation=func_name,
                exec_time_ms=elapsed_ms(),
                **context,
            )
            return result

        return wrapper

    return decorator


def _build_log_context(kwargs: dict[str, Any]) -> dict[str, Any]:
    """Build a context dictionary for logging from function kwargs.

    Args:
        kwargs: Function keyword arguments

    Returns:
        A dictionary with loggable values extracted from kwargs
    """
    id_params = {
        k: v
        for k, v in kwargs.items()
        if k.endswith("_id") and isinstance(v, int | str)
    }

    simple_params = {
        k: v
        for k, v in kwargs.items()
        if (
            not k.startswith("_")
            and isinstance(v, int | str | float | bool | None)
            and k not in id_params
        )
    }

    return {**simple_params, **id_params}
