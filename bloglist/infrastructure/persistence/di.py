from typing import AsyncIterable

from dishka import provide
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from bloglist.config import Config
from bloglist.domain.blog.port.repository import BlogRepository
from bloglist.domain.user.port.repository import UserRepository
from bloglist.infrastructure.persistence.database import (
    create_db_engine,
    create_session_factory,
)
from bloglist.infrastructure.persistence.repository.blog import SqlBlogRepository
from bloglist.infrastructure.persistence.repository.user import SqlUserRepository
from bloglist.util.di.base import Provider
from bloglist.util.di.scope import Scope


class PersistenceProvider(Provider):
    # APP-scoped factories
    @provide(scope=Scope.APP)
    async def get_engine(self, config: Config) -> AsyncIterable[AsyncEngine]:
        engine = create_db_engine(config.database)
        yield engine
        await engine.dispose()

    @provide(scope=Scope.APP)
    def get_session_factory(self, engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
        return create_session_factory(engine)

    # UOW-scoped session (one per unit of work)
    @provide(scope=Scope.UOW)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterable[AsyncSession]:
        async with session_factory() as session:
            yield session
            await session.commit()

    # UOW-scoped repositories
    blog_repo = provide(SqlBlogRepository, scope=Scope.UOW, provides=BlogRepository)
    user_repo = provide(SqlUserRepository, scope=Scope.UOW, provides=UserRepository)
