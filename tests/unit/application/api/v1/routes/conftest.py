"""Fixtures for REST route tests.

Each test gets its own app, container and in-memory database.
"""

import pytest
from fastapi.testclient import TestClient

from bloglist.application.api.rest.app import create_app
from bloglist.config import Config, DatabaseConfig, UsersConfig

INITIAL_BLOGS = [
    {"title": "Blogi", "author": "Teemu", "url": "joku", "likes": 0},
    {"title": "Toinen", "author": "Manninen", "url": "jokumuu", "likes": 1},
]


@pytest.fixture
def client():
    config = Config(
        database=DatabaseConfig(url="sqlite+aiosqlite:///:memory:"),
        users=UsersConfig(bcrypt_rounds=4),
    )
    with TestClient(create_app(config)) as test_client:
        yield test_client


@pytest.fixture
def initial_blogs() -> list[dict]:
    return [dict(blog) for blog in INITIAL_BLOGS]


@pytest.fixture
def seeded_client(client):
    for blog in INITIAL_BLOGS:
        response = client.post("/api/blogs", json=blog)
        assert response.status_code == 201
    return client
