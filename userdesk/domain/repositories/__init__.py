"""Domain repository interfaces."""

from .interfaces import UserRepositoryProtocol

__all__ = ["UserRepositoryProtocol"]
