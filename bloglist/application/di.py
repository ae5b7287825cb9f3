from dishka import AsyncContainer, from_context, make_async_container

from bloglist.config import Config
from bloglist.domain.blog.util.di import BlogProvider
from bloglist.domain.user.util.di import UserProvider
from bloglist.infrastructure.auth import AuthInfraProvider
from bloglist.infrastructure.persistence import PersistenceProvider
from bloglist.util.di.base import Provider
from bloglist.util.di.scope import Scope


class ConfigProvider(Provider):
    config = from_context(provides=Config, scope=Scope.APP)


def create_container(config: Config | None = None) -> AsyncContainer:
    # Pydantic Settings populates from env vars at runtime
    config = config or Config()  # type: ignore[call-arg]

    return make_async_container(
        ConfigProvider(),
        PersistenceProvider(),
        AuthInfraProvider(),
        BlogProvider(),
        UserProvider(),
        context={Config: config},
        scopes=Scope,  # type: ignore[arg-type]  # Custom scope class
    )
