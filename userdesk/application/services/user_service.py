"""User service: validation and business rules on top of the user repository.

Every public operation is a single validate-then-delegate step and returns a
``Result``. Expected failures (validation, conflict, not found, storage) come
back as ``Failure``; they are never raised out of the service.
"""

from collections.abc import Callable, Coroutine
import functools
from typing import Any

from userdesk.config import get_logger
from userdesk.domain.entities import User
from userdesk.domain.errors import (
    ConflictError,
    ErrorKind,
    NotFoundError,
    UserDeskError,
    ValidationError,
)
from userdesk.domain.repositories import UserRepositoryProtocol
from userdesk.domain.results import Failure, Ok, Result
from userdesk.domain.validation import (
    is_blank,
    validate_age,
    validate_email,
    validate_name,
    validate_user_id,
)

logger = get_logger(__name__)


def service_operation[**P, T](
    operation_name: str | None = None,
) -> Callable[
    [Callable[P, Coroutine[Any, Any, T]]],
    Callable[P, Coroutine[Any, Any, Result[T]]],
]:
    """Wrap a service coroutine so it returns ``Ok``/``Failure`` instead of raising.

    Only ``UserDeskError`` subclasses are converted; anything else propagates.

    Example:
        @service_operation("create_user")
        async def create_user(self, name, email, age) -> User:
            ...
    """

    def decorator(
        func: Callable[P, Coroutine[Any, Any, T]],
    ) -> Callable[P, Coroutine[Any, Any, Result[T]]]:
        op_name = operation_name or func.__name__

        @functools.wraps(func)
        async def wrapper(*args: P.args, **kwargs: P.kwargs) -> Result[T]:
            try:
                return Ok(await func(*args, **kwargs))
            except UserDeskError as e:
                failure_logger = logger.bind(operation=op_name, kind=e.kind.value)
                if e.kind is ErrorKind.STORAGE:
                    failure_logger.error(f"{op_name} failed: {e.message}")
                else:
                    failure_logger.warning(f"{op_name} rejected: {e.message}")
                return Failure(e)

        return wrapper

    return decorator


class UserService:
    """Orchestrates user operations against a ``UserRepositoryProtocol``."""

    def __init__(self, repository: UserRepositoryProtocol) -> None:
        self._repository = repository

    @service_operation("create_user")
    async def create_user(
        self, name: str | None, email: str | None, age: int | None = None
    ) -> User:
        """Validate and persist a new user; the returned user carries its id."""
        logger.info(f"Creating new user: {name}, {email}, {age}")

        validate_name(name)
        validate_email(email)
        if age is not None:
            validate_age(age)

        if await self._repository.find_by_email(email) is not None:
            raise ConflictError(f"User with this email already exists: {email}")

        return await self._repository.save(User(name=name, email=email, age=age))

    @service_operation("get_user_by_id")
    async def get_user_by_id(self, user_id: int | None) -> User | None:
        logger.info(f"Getting user by id: {user_id}")
        validate_user_id(user_id)
        return await self._repository.find_by_id(user_id)

    @service_operation("get_all_users")
    async def get_all_users(self) -> list[User]:
        logger.info("Getting all users")
        return await self._repository.find_all()

    @service_operation("update_user")
    async def update_user(
        self,
        user_id: int | None,
        name: str | None = None,
        email: str | None = None,
        age: int | None = None,
    ) -> User:
        """Apply a partial update.

        Blank or None name/email and None age leave the stored value
        unchanged. Supplied values are validated before anything is written.
        """
        logger.info(f"Updating user with id: {user_id}")
        validate_user_id(user_id)

        existing = await self._repository.find_by_id(user_id)
        if existing is None:
            raise NotFoundError(f"User not found with id: {user_id}")

        new_name = None if is_blank(name) else name
        new_email = None if is_blank(email) else email

        if new_name is not None:
            validate_name(new_name)
        if new_email is not None:
            validate_email(new_email)
        if age is not None:
            validate_age(age)

        if new_email is not None and await self._repository.is_email_exists_for_other_user(
            new_email, user_id
        ):
            raise ConflictError(f"Another user with this email already exists: {new_email}")

        updated = existing.with_changes(name=new_name, email=new_email, age=age)
        return await self._repository.update(updated)

    @service_operation("delete_user")
    async def delete_user(self, user_id: int | None) -> None:
        logger.info(f"Deleting user with id: {user_id}")
        validate_user_id(user_id)

        if await self._repository.find_by_id(user_id) is None:
            raise NotFoundError(f"User not found with id: {user_id}")

        await self._repository.delete(user_id)

    @service_operation("get_user_by_email")
    async def get_user_by_email(self, email: str | None) -> User | None:
        logger.info(f"Getting user by email: {email}")
        if is_blank(email):
            raise ValidationError("Email cannot be empty")
        return await self._repository.find_by_email(email)

    @service_operation("is_email_unique")
    async def is_email_unique(self, email: str) -> bool:
        """True when no user currently holds ``email``."""
        return await self._repository.find_by_email(email) is None
