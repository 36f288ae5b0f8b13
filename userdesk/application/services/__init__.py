"""Application services."""

from .user_service import UserService, service_operation

__all__ = ["UserService", "service_operation"]
