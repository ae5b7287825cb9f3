import logfire

from bloglist.domain.shared.command import Command, CommandHandler
from bloglist.domain.user.query.list_users import UserDetail
from bloglist.domain.user.service.user import UserService


class RegisterUser(Command):
    username: str | None = None
    name: str | None = None
    password: str | None = None


class RegisterUserHandler(CommandHandler[RegisterUser, UserDetail]):
    user_service: UserService

    async def run(self, cmd: RegisterUser) -> UserDetail:
        user = await self.user_service.register(
            username=cmd.username,
            password=cmd.password,
            name=cmd.name,
        )
        logfire.info("User registered", user_id=str(user.id))
        return UserDetail.from_user(user)
