"""REST tests for /api/users."""

import pytest


@pytest.fixture
def client_with_root(client):
    response = client.post("/api/users", json={"username": "root", "password": "sekret"})
    assert response.status_code == 201
    return client


def _usernames(client) -> list[str]:
    return [u["username"] for u in client.get("/api/users").json()]


class TestRegisterUser:
    def test_creation_succeeds_with_fresh_username(self, client_with_root):
        response = client_with_root.post(
            "/api/users",
            json={"username": "mluukkai", "name": "Matti Luukkainen", "password": "salainen"},
        )

        assert response.status_code == 201
        body = response.json()
        assert body["username"] == "mluukkai"
        assert body["name"] == "Matti Luukkainen"
        assert "password" not in body
        assert "password_hash" not in body
        assert _usernames(client_with_root) == ["root", "mluukkai"]

    def test_creation_fails_if_username_already_taken(self, client_with_root):
        response = client_with_root.post(
            "/api/users",
            json={"username": "root", "name": "Superuser", "password": "salainen"},
        )

        assert response.status_code == 400
        assert response.headers["content-type"].startswith("application/json")
        assert "expected `username` to be unique" in response.json()["error"]
        assert _usernames(client_with_root) == ["root"]

    def test_creation_fails_if_username_missing(self, client_with_root):
        response = client_with_root.post(
            "/api/users", json={"name": "Teemu", "password": "aaaaaa"}
        )

        assert response.status_code == 400
        assert "`username` is required" in response.json()["error"]
        assert _usernames(client_with_root) == ["root"]

    def test_creation_fails_if_username_too_short(self, client_with_root):
        response = client_with_root.post(
            "/api/users", json={"username": "a", "name": "Teemu", "password": "sala"}
        )

        assert response.status_code == 400
        assert "shorter than the minimum" in response.json()["error"]

    def test_creation_fails_if_password_too_short(self, client_with_root):
        response = client_with_root.post(
            "/api/users", json={"username": "aaaaaa", "name": "Teemu", "password": "s"}
        )

        assert response.status_code == 400
        assert "password is too short" in response.json()["error"]
        assert response.json()["field"] == "password"

    def test_creation_fails_if_password_missing(self, client_with_root):
        response = client_with_root.post(
            "/api/users", json={"username": "aaaaaa", "name": "Teemu"}
        )

        assert response.status_code == 400
        assert "password missing" in response.json()["error"]
        assert _usernames(client_with_root) == ["root"]


class TestListUsers:
    def test_lists_registered_users_without_hashes(self, client_with_root):
        users = client_with_root.get("/api/users").json()

        assert len(users) == 1
        assert set(users[0]) == {"id", "username", "name", "created_at"}
