from dishka import provide

from bloglist.config import Config
from bloglist.domain.user.port.password_hasher import PasswordHasher
from bloglist.infrastructure.auth.password import BcryptPasswordHasher
from bloglist.util.di.base import Provider
from bloglist.util.di.scope import Scope


class AuthInfraProvider(Provider):
    @provide(scope=Scope.APP)
    def get_password_hasher(self, config: Config) -> PasswordHasher:
        return BcryptPasswordHasher(rounds=config.users.bcrypt_rounds)
