"""Tests for the db_operation repository decorator."""

import pytest
from sqlalchemy.exc import IntegrityError, OperationalError

from userdesk.domain.errors import NotFoundError, StorageError
from userdesk.infrastructure.persistence.repositories.repo_decorator import (
    _build_log_context,
    db_operation,
)


class FakeRepository:
    def __init__(self, error: Exception | None = None) -> None:
        self.error = error

    @db_operation("fake_operation")
    async def run(self, user_id: int = 1) -> str:
        if self.error is not None:
            raise self.error
        return f"ran {user_id}"


async def test_returns_result():
    assert await FakeRepository().run(user_id=3) == "ran 3"


async def test_domain_errors_pass_through():
    error = NotFoundError("User not found with id: 1")

    with pytest.raises(NotFoundError) as exc_info:
        await FakeRepository(error).run()

    assert exc_info.value is error


@pytest.mark.parametrize(
    ("error", "message"),
    [
        (IntegrityError("INSERT", {}, Exception("UNIQUE")), "Integrity error"),
        (OperationalError("SELECT", {}, Exception("locked")), "Database error"),
        (RuntimeError("boom"), "Unexpected error"),
    ],
)
async def test_other_errors_become_storage_errors(error, message):
    with pytest.raises(StorageError, match=message) as exc_info:
        await FakeRepository(error).run()

    assert exc_info.value.cause is error
    assert exc_info.value.__cause__ is error


def test_rejects_sync_functions():
    with pytest.raises(TypeError, match="async"):

        @db_operation()
        def not_async(self):
            return None


def test_build_log_context_keeps_simple_values():
    context = _build_log_context(
        {"user_id": 4, "email": "a@b.c", "_private": 1, "user": object()}
    )

    assert context == {"user_id": 4, "email": "a@b.c"}
