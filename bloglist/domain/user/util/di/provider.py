from dishka import provide

from bloglist.config import Config
from bloglist.domain.user.command.register import RegisterUserHandler
from bloglist.domain.user.port.password_hasher import PasswordHasher
from bloglist.domain.user.port.repository import UserRepository
from bloglist.domain.user.query.list_users import ListUsersHandler
from bloglist.domain.user.service.user import UserService
from bloglist.util.di.base import Provider
from bloglist.util.di.scope import Scope


class UserProvider(Provider):
    @provide(scope=Scope.UOW)
    def get_user_service(
        self,
        user_repo: UserRepository,
        password_hasher: PasswordHasher,
        config: Config,
    ) -> UserService:
        return UserService(
            user_repo=user_repo,
            password_hasher=password_hasher,
            min_username_length=config.users.min_username_length,
            min_password_length=config.users.min_password_length,
        )

    register_handler = provide(RegisterUserHandler, scope=Scope.UOW)
    list_users_handler = provide(ListUsersHandler, scope=Scope.UOW)
