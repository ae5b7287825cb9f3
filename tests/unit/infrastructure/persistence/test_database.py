"""Tests for engine creation."""

import pytest

from bloglist.config import DatabaseConfig
from bloglist.domain.shared.error import ConfigurationError
from bloglist.infrastructure.persistence.database import create_db_engine


class TestCreateDbEngine:
    @pytest.mark.asyncio
    async def test_sqlite_memory(self):
        engine = create_db_engine(DatabaseConfig(url="sqlite+aiosqlite:///:memory:"))
        assert engine.dialect.name == "sqlite"
        await engine.dispose()

    @pytest.mark.parametrize(
        "url",
        ["mysql+aiomysql://u:p@localhost/bloglist", "mongodb://localhost/bloglist", ""],
    )
    def test_unsupported_url_rejected(self, url: str):
        with pytest.raises(ConfigurationError, match="Unsupported database URL"):
            create_db_engine(DatabaseConfig(url=url))
