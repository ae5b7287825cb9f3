"""Repository ports for the user domain."""

from abc import abstractmethod
from typing import List, Protocol

from bloglist.domain.shared.port import Port
from bloglist.domain.user.model.user import User
from bloglist.domain.user.model.value import UserId


class UserRepository(Port, Protocol):
    """Repository for User aggregate persistence."""

    @abstractmethod
    async def get(self, user_id: UserId) -> User | None:
        """Get a user by ID."""
        ...

    @abstractmethod
    async def get_by_username(self, username: str) -> User | None:
        """Get a user by username."""
        ...

    @abstractmethod
    async def save(self, user: User) -> None:
        """Save a user (create or update)."""
        ...

    @abstractmethod
    async def list(self) -> List[User]:
        """List users in registration order."""
        ...
