"""Database models and connection management."""

from .db_connection import Database, create_db_engine, create_session_factory
from .db_models import DBUser, UserDeskDBBase

__all__ = [
    "DBUser",
    "Database",
    "UserDeskDBBase",
    "create_db_engine",
    "create_session_factory",
]
