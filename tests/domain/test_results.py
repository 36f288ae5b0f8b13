"""Tests for Ok/Failure results and error kinds."""

import pytest

from userdesk.domain.errors import (
    ConflictError,
    ErrorKind,
    NotFoundError,
    StorageError,
    ValidationError,
)
from userdesk.domain.results import Failure, Ok


class TestOk:
    def test_unwrap_returns_value(self):
        assert Ok(5).unwrap() == 5
        assert Ok(5).is_ok is True

    def test_matches_structurally(self):
        match Ok("value"):
            case Ok(value=value):
                assert value == "value"
            case _:
                pytest.fail("Ok did not match")


class TestFailure:
    @pytest.mark.parametrize(
        ("error", "kind"),
        [
            (ValidationError("bad"), ErrorKind.VALIDATION),
            (ConflictError("taken"), ErrorKind.CONFLICT),
            (NotFoundError("missing"), ErrorKind.NOT_FOUND),
            (StorageError("down"), ErrorKind.STORAGE),
        ],
    )
    def test_kind_follows_error_class(self, error, kind):
        failure = Failure(error)

        assert failure.kind is kind
        assert failure.message == str(error)
        assert failure.is_ok is False

    def test_unwrap_reraises_error(self):
        error = ConflictError("taken")

        with pytest.raises(ConflictError) as exc_info:
            Failure(error).unwrap()

        assert exc_info.value is error

    def test_matches_on_error_type(self):
        match Failure(NotFoundError("missing")):
            case Failure(error=ConflictError()):
                pytest.fail("matched the wrong error kind")
            case Failure(error=NotFoundError() as error):
                assert error.message == "missing"


class TestStorageError:
    def test_keeps_cause(self):
        cause = RuntimeError("disk full")
        error = StorageError("Error saving user", cause)

        assert error.cause is cause
        assert error.__cause__ is cause
        assert error.kind is ErrorKind.STORAGE
