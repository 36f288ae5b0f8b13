"""Explicit operation results.

Service operations return ``Ok(value)`` on success and ``Failure(error)`` for
every expected error kind, so callers branch on the result instead of
catching exceptions:

```python
match await service.create_user("Ann", "ann@example.com", 30):
    case Ok(value=user):
        print(user.id)
    case Failure(error=ConflictError()):
        print("email taken")
    case Failure() as failure:
        print(failure.message)
```
"""

from typing import Literal, NoReturn

from attrs import define

from .errors import ErrorKind, UserDeskError


@define(frozen=True, slots=True)
class Ok[T]:
    """Successful outcome carrying the operation's value."""

    value: T

    @property
    def is_ok(self) -> Literal[True]:
        return True

    def unwrap(self) -> T:
        """Return the carried value."""
        return self.value


@define(frozen=True, slots=True)
class Failure:
    """Failed outcome carrying the domain error."""

    error: UserDeskError

    @property
    def is_ok(self) -> Literal[False]:
        return False

    @property
    def kind(self) -> ErrorKind:
        return self.error.kind

    @property
    def message(self) -> str:
        return self.error.message

    def unwrap(self) -> NoReturn:
        """Re-raise the carried error."""
        raise self.error


type Result[T] = Ok[T] | Failure
