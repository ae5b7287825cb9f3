"""SQLAlchemy repository implementation for the user domain."""

from typing import List

from sqlalchemy import insert, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from bloglist.domain.shared.error import ConflictError
from bloglist.domain.user.model.user import User
from bloglist.domain.user.model.value import UserId
from bloglist.domain.user.port.repository import UserRepository
from bloglist.infrastructure.persistence.mappers.user import row_to_user, user_to_dict
from bloglist.infrastructure.persistence.tables import users_table


class SqlUserRepository(UserRepository):
    """SQLAlchemy implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get(self, user_id: UserId) -> User | None:
        stmt = select(users_table).where(users_table.c.id == str(user_id))
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def get_by_username(self, username: str) -> User | None:
        stmt = select(users_table).where(users_table.c.username == username)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def save(self, user: User) -> None:
        user_dict = user_to_dict(user)
        existing = await self.get(user.id)

        if existing:
            stmt = update(users_table).where(users_table.c.id == str(user.id)).values(**user_dict)
        else:
            stmt = insert(users_table).values(**user_dict)

        try:
            await self.session.execute(stmt)
            await self.session.flush()
        except IntegrityError as e:
            # Lost a race with a concurrent registration of the same username
            raise ConflictError(f"Username already taken: {user.username}") from e

    async def list(self) -> List[User]:
        stmt = select(users_table).order_by(users_table.c.seq)
        result = await self.session.execute(stmt)
        return [row_to_user(dict(r)) for r in result.mappings().all()]
