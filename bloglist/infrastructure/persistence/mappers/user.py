from typing import Any

from bloglist.domain.user.model.user import User
from bloglist.domain.user.model.value import UserId


def row_to_user(row: dict[str, Any]) -> User:
    """Convert a database row to a User model."""
    return User(
        id=UserId.parse(row["id"]),
        username=row["username"],
        name=row["name"],
        password_hash=row["password_hash"],
        created_at=row["created_at"],
    )


def user_to_dict(user: User) -> dict[str, Any]:
    """Convert a User model to a database row dict."""
    return {
        "id": str(user.id),
        "username": user.username,
        "name": user.name,
        "password_hash": user.password_hash,
        "created_at": user.created_at,
    }
