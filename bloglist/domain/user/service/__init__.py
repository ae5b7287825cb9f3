"""User domain services."""

from .user import UserService

__all__ = ["UserService"]
