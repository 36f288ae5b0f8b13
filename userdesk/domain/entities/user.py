"""User domain entity.

Pure user representation with zero infrastructure dependencies.
"""

import attrs
from attrs import define, field


@define(frozen=True, slots=True)
class User:
    """Immutable user record.

    The id is assigned by storage on creation and never changes afterwards.
    Changes to name, email or age produce a new instance.
    """

    name: str
    email: str
    age: int | None = field(default=None)
    id: int | None = field(default=None)

    def with_id(self, db_id: int) -> "User":
        """Set the database ID for this user."""
        if not isinstance(db_id, int) or isinstance(db_id, bool) or db_id <= 0:
            raise ValueError(
                f"Invalid database ID: {db_id}. Must be a positive integer.",
            )
        return attrs.evolve(self, id=db_id)

    def with_changes(
        self,
        name: str | None = None,
        email: str | None = None,
        age: int | None = None,
    ) -> "User":
        """Create a copy with the given fields replaced; None keeps the current value."""
        return attrs.evolve(
            self,
            name=self.name if name is None else name,
            email=self.email if email is None else email,
            age=self.age if age is None else age,
        )

    def __str__(self) -> str:
        return f"User(id={self.id}, name={self.name!r}, email={self.email!r}, age={self.age})"
