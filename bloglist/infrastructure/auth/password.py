"""bcrypt-backed password hashing."""

import bcrypt

from bloglist.domain.user.port.password_hasher import PasswordHasher


class BcryptPasswordHasher(PasswordHasher):
    """Hashes passwords with bcrypt at a configurable cost factor."""

    def __init__(self, rounds: int = 10) -> None:
        self._rounds = rounds

    def hash(self, password: str) -> str:
        salt = bcrypt.gensalt(rounds=self._rounds)
        return bcrypt.hashpw(password.encode("utf-8"), salt).decode("ascii")

    def verify(self, password: str, hashed: str) -> bool:
        return bcrypt.checkpw(password.encode("utf-8"), hashed.encode("ascii"))
