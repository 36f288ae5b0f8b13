"""Persistence layer backed by SQLAlchemy 2.0 (asyncio)."""

from .database.db_connection import Database
from .repositories import UserRepository

__all__ = ["Database", "UserRepository"]
