"""User persistence: repository and mapper."""

from .core import UserRepository
from .mapper import UserMapper

__all__ = ["UserMapper", "UserRepository"]
