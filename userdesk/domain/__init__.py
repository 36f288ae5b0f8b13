"""Domain layer: entities, validation rules, error kinds and results.

Nothing in this package depends on the ORM, the CLI or the configuration.
"""

from .entities import User
from .errors import (
    ConflictError,
    ErrorKind,
    NotFoundError,
    StorageError,
    UserDeskError,
    ValidationError,
)
from .repositories import UserRepositoryProtocol
from .results import Failure, Ok, Result

__all__ = [
    "ConflictError",
    "ErrorKind",
    "Failure",
    "NotFoundError",
    "Ok",
    "Result",
    "StorageError",
    "User",
    "UserDeskError",
    "UserRepositoryProtocol",
    "ValidationError",
]
