"""User domain models."""

from .user import User
from .value import UserId

__all__ = ["User", "UserId"]
