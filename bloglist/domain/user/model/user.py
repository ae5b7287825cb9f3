"""User aggregate for the user domain."""

from datetime import UTC, datetime

from bloglist.domain.shared.model.aggregate import Aggregate
from bloglist.domain.user.model.value import UserId


class User(Aggregate):
    """A registered user.

    Invariants:
    - `id` and `username` are immutable after creation
    - `password_hash` holds a hash, never the plain password
    """

    id: UserId
    username: str
    name: str | None = None
    password_hash: str
    created_at: datetime

    @classmethod
    def create(cls, username: str, password_hash: str, name: str | None = None) -> "User":
        """Create a new user."""
        return cls(
            id=UserId.generate(),
            username=username,
            name=name,
            password_hash=password_hash,
            created_at=datetime.now(UTC),
        )
