"""Input validation rules for user data.

Each validator raises ``ValidationError`` with a human-readable message and
returns nothing on success.
"""

from typing import Any

from .errors import ValidationError

MAX_NAME_LENGTH = 100
MAX_EMAIL_LENGTH = 150
MIN_AGE = 0
MAX_AGE = 150


def is_blank(value: str | None) -> bool:
    """True for None, empty or whitespace-only strings."""
    return value is None or (isinstance(value, str) and not value.strip())


def validate_name(name: str | None) -> None:
    """Validate a user's name.

    Raises:
        ValidationError: If the name is blank or longer than 100 characters
    """
    if not isinstance(name, str | None):
        raise ValidationError("Name must be a string")
    if is_blank(name):
        raise ValidationError("Name cannot be empty")
    if len(name) > MAX_NAME_LENGTH:
        raise ValidationError(f"Name cannot exceed {MAX_NAME_LENGTH} characters")


def validate_email(email: str | None) -> None:
    """Validate an email address.

    Only presence, length and the ``@`` separator are checked.

    Raises:
        ValidationError: If the email is blank, too long, or has no @
    """
    if not isinstance(email, str | None):
        raise ValidationError("Email must be a string")
    if is_blank(email):
        raise ValidationError("Email cannot be empty")
    if len(email) > MAX_EMAIL_LENGTH:
        raise ValidationError(f"Email cannot exceed {MAX_EMAIL_LENGTH} characters")
    if "@" not in email:
        raise ValidationError("Email must contain @ symbol")


def validate_age(age: Any) -> None:
    """Validate a present age value (0-150 inclusive).

    Raises:
        ValidationError: If the age is not an integer or out of range
    """
    # bool is an int subclass but never a meaningful age
    if isinstance(age, bool) or not isinstance(age, int):
        raise ValidationError("Age must be an integer")
    if age < MIN_AGE:
        raise ValidationError("Age cannot be negative")
    if age > MAX_AGE:
        raise ValidationError(f"Age cannot exceed {MAX_AGE}")


def validate_user_id(user_id: Any) -> None:
    """Validate a user id.

    Raises:
        ValidationError: If the id is missing, not an integer, or not positive
    """
    if user_id is None or isinstance(user_id, bool) or not isinstance(user_id, int):
        raise ValidationError("User ID must be positive")
    if user_id <= 0:
        raise ValidationError("User ID must be positive")
