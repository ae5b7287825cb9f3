"""Fixtures for repository tests against an in-memory SQLite database."""

import pytest_asyncio

from bloglist.config import DatabaseConfig
from bloglist.infrastructure.persistence.database import (
    create_db_engine,
    create_session_factory,
    create_tables,
)


@pytest_asyncio.fixture
async def engine():
    engine = create_db_engine(DatabaseConfig(url="sqlite+aiosqlite:///:memory:"))
    await create_tables(engine)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def session(engine):
    factory = create_session_factory(engine)
    async with factory() as session:
        yield session
        await session.rollback()
