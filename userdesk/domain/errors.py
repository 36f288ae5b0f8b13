"""Domain error kinds.

Every expected failure in the application is one of four kinds. The service
layer returns them inside a ``Failure`` result; the repository raises them.
"""

from enum import StrEnum
from typing import ClassVar


class ErrorKind(StrEnum):
    """Classification of expected failures."""

    VALIDATION = "validation"
    CONFLICT = "conflict"
    NOT_FOUND = "not_found"
    STORAGE = "storage"


class UserDeskError(Exception):
    """Base class for predictable application errors."""

    kind: ClassVar[ErrorKind]

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(UserDeskError):
    """Raised when input fails a business rule (empty name, bad email, ...)."""

    kind = ErrorKind.VALIDATION


class ConflictError(UserDeskError):
    """Raised when an email address is already taken."""

    kind = ErrorKind.CONFLICT


class NotFoundError(UserDeskError):
    """Raised when no user exists for the requested id."""

    kind = ErrorKind.NOT_FOUND


class StorageError(UserDeskError):
    """Wraps any failure of the persistence layer."""

    kind = ErrorKind.STORAGE

    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause
