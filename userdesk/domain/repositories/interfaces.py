"""Domain repository interfaces.

These interfaces define the contracts for data access without depending on
infrastructure implementations, following the dependency inversion principle.
"""

from collections.abc import Awaitable
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from userdesk.domain.entities import User


class UserRepositoryProtocol(Protocol):
    """Repository interface for user persistence operations.

    Every method raises ``StorageError`` when the underlying storage fails.
    """

    def find_by_id(self, user_id: int) -> Awaitable["User | None"]:
        """Find a user by id, or None."""
        ...

    def find_all(self) -> Awaitable[list["User"]]:
        """Return every user in storage order."""
        ...

    def save(self, user: "User") -> Awaitable["User"]:
        """Persist a new user and return it with its assigned id."""
        ...

    def update(self, user: "User") -> Awaitable["User"]:
        """Persist changes to an existing user.

        Raises:
            NotFoundError: If no user exists for ``user.id``
        """
        ...

    def delete(self, user_id: int) -> Awaitable[None]:
        """Remove a user.

        Raises:
            NotFoundError: If no user exists for ``user_id``
        """
        ...

    def find_by_email(self, email: str) -> Awaitable["User | None"]:
        """Find a user by exact email, or None."""
        ...

    def is_email_exists_for_other_user(
        self, email: str, exclude_id: int | None
    ) -> Awaitable[bool]:
        """Check whether a user other than ``exclude_id`` holds ``email``."""
        ...
