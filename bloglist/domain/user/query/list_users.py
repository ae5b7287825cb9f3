from datetime import datetime

from bloglist.domain.shared.query import Query, QueryHandler, Result
from bloglist.domain.user.model.user import User
from bloglist.domain.user.service.user import UserService


class ListUsers(Query):
    pass


class UserDetail(Result):
    """Public view of a user. The password hash is never exposed."""

    id: str
    username: str
    name: str | None
    created_at: datetime

    @classmethod
    def from_user(cls, user: User) -> "UserDetail":
        return cls(
            id=str(user.id),
            username=user.username,
            name=user.name,
            created_at=user.created_at,
        )


class UserList(Result):
    items: list[UserDetail]
    total: int


class ListUsersHandler(QueryHandler[ListUsers, UserList]):
    user_service: UserService

    async def run(self, cmd: ListUsers) -> UserList:
        users = await self.user_service.list_users()
        return UserList(items=[UserDetail.from_user(u) for u in users], total=len(users))
