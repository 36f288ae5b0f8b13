"""Shared fixtures: in-memory database, repository and service."""

import pytest

from userdesk.application.services import UserService
from userdesk.domain.entities import User
from userdesk.infrastructure.persistence import Database, UserRepository

IN_MEMORY_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
async def database():
    """Provide an initialized in-memory database, disposed after the test."""
    async with Database(IN_MEMORY_URL) as db:
        await db.init_schema()
        yield db


@pytest.fixture
def user_repo(database):
    """Provide a user repository over the in-memory database."""
    return UserRepository(database)


@pytest.fixture
def user_service(user_repo):
    """Provide a user service wired to the real repository."""
    return UserService(user_repo)


@pytest.fixture
def sample_user():
    """Stored user as the repository would return it."""
    return User(id=1, name="Ann Lee", email="ann@example.com", age=30)
