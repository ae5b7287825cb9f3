from .password_hasher import PasswordHasher
from .repository import UserRepository

__all__ = ["PasswordHasher", "UserRepository"]
