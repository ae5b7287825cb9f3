from abc import abstractmethod
from typing import Protocol

from bloglist.domain.shared.port import Port


class PasswordHasher(Port, Protocol):
    """One-way password hashing primitive."""

    @abstractmethod
    def hash(self, password: str) -> str: ...

    @abstractmethod
    def verify(self, password: str, hashed: str) -> bool: ...
