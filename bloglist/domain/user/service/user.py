"""UserService - registration and lookup of users."""

import logging

from bloglist.domain.shared.error import ValidationError
from bloglist.domain.shared.service import Service
from bloglist.domain.user.model.user import User
from bloglist.domain.user.port.password_hasher import PasswordHasher
from bloglist.domain.user.port.repository import UserRepository

logger = logging.getLogger(__name__)

# bcrypt only looks at the first 72 bytes of a password
MAX_PASSWORD_BYTES = 72


class UserService(Service):
    """Registers users and hashes their passwords before storage."""

    user_repo: UserRepository
    password_hasher: PasswordHasher
    min_username_length: int = 3
    min_password_length: int = 3

    async def register(
        self,
        username: str | None,
        password: str | None,
        name: str | None = None,
    ) -> User:
        """Validate and persist a new user.

        Checks run in a fixed order so the first failure is reported:
        username presence, username length, password presence, password
        length, then username uniqueness.

        Raises:
            ValidationError: If any check fails.
        """
        if not username:
            raise ValidationError("`username` is required", field="username")
        if len(username) < self.min_username_length:
            raise ValidationError(
                f"Path `username` (`{username}`) is shorter than the minimum "
                f"allowed length ({self.min_username_length}).",
                field="username",
            )
        if not password:
            raise ValidationError("password missing", field="password")
        if len(password) < self.min_password_length:
            raise ValidationError(
                f"password is too short (minimum is {self.min_password_length} characters)",
                field="password",
            )
        if len(password.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise ValidationError(
                f"password is too long (maximum is {MAX_PASSWORD_BYTES} bytes)",
                field="password",
            )
        if await self.user_repo.get_by_username(username) is not None:
            raise ValidationError(
                "User validation failed: username: Error, expected `username` to be unique.",
                field="username",
            )

        user = User.create(
            username=username,
            password_hash=self.password_hasher.hash(password),
            name=name,
        )
        await self.user_repo.save(user)
        logger.info("User registered: %s (%s)", user.username, user.id)
        return user

    async def list_users(self) -> list[User]:
        return await self.user_repo.list()
