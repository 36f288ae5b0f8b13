"""Repository layer for database operations with SQLAlchemy 2.0."""

from userdesk.infrastructure.persistence.repositories.base_repo import (
    BaseModelMapper,
    BaseRepository,
    ModelMapper,
)
from userdesk.infrastructure.persistence.repositories.repo_decorator import db_operation
from userdesk.infrastructure.persistence.repositories.user import (
    UserMapper,
    UserRepository,
)

__all__ = [
    "BaseModelMapper",
    "BaseRepository",
    "ModelMapper",
    "UserMapper",
    "UserRepository",
    "db_operation",
]
