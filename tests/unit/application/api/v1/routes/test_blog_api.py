"""REST tests for /api/blogs."""

from uuid import uuid4

import pytest

from bloglist.application.api.v1.routes.blogs import parse_blog_id
from bloglist.domain.shared.error import ValidationError


def _blogs(client) -> list[dict]:
    return client.get("/api/blogs").json()


class TestListBlogs:
    def test_blogs_are_returned_as_json(self, seeded_client):
        response = seeded_client.get("/api/blogs")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("application/json")

    def test_all_blogs_are_returned(self, seeded_client, initial_blogs):
        assert len(_blogs(seeded_client)) == len(initial_blogs)

    def test_blogs_expose_id_field(self, seeded_client):
        blog = _blogs(seeded_client)[0]

        assert "id" in blog
        assert "_id" not in blog
        assert "seq" not in blog

    def test_empty_collection(self, client):
        assert _blogs(client) == []


class TestCreateBlog:
    def test_a_blog_can_be_added(self, seeded_client, initial_blogs):
        response = seeded_client.post(
            "/api/blogs",
            json={"title": "new", "author": "blog", "url": "added", "likes": 1},
        )

        assert response.status_code == 201
        assert response.json()["title"] == "new"
        titles = [b["title"] for b in _blogs(seeded_client)]
        assert len(titles) == len(initial_blogs) + 1
        assert titles[-1] == "new"

    def test_missing_likes_defaults_to_zero(self, seeded_client):
        response = seeded_client.post(
            "/api/blogs", json={"title": "blog", "author": "without", "url": "likes"}
        )

        assert response.status_code == 201
        assert _blogs(seeded_client)[-1]["likes"] == 0

    def test_blog_without_title_and_url_is_not_added(self, seeded_client, initial_blogs):
        response = seeded_client.post(
            "/api/blogs", json={"author": "not a valid blog", "likes": 10}
        )

        assert response.status_code == 400
        body = response.json()
        assert body["code"] == "VALIDATION_ERROR"
        assert body["field"] == "title"
        assert len(_blogs(seeded_client)) == len(initial_blogs)

    def test_negative_likes_rejected(self, client):
        response = client.post("/api/blogs", json={"title": "t", "url": "u", "likes": -1})

        assert response.status_code == 400
        assert _blogs(client) == []

    def test_non_integer_likes_rejected(self, client):
        response = client.post(
            "/api/blogs", json={"title": "t", "url": "u", "likes": "many"}
        )

        assert response.status_code == 400
        assert response.json()["code"] == "VALIDATION_ERROR"


class TestGetBlog:
    def test_get_by_id(self, seeded_client):
        blog = _blogs(seeded_client)[1]

        response = seeded_client.get(f"/api/blogs/{blog['id']}")

        assert response.status_code == 200
        assert response.json() == blog

    def test_unknown_id_is_404(self, seeded_client):
        response = seeded_client.get(f"/api/blogs/{uuid4()}")

        assert response.status_code == 404
        assert response.json()["code"] == "NOT_FOUND"

    def test_malformatted_id_is_400(self, seeded_client):
        response = seeded_client.get("/api/blogs/not-an-id")

        assert response.status_code == 400
        assert response.json()["error"] == "malformatted id"


class TestDeleteBlog:
    def test_a_blog_can_be_deleted(self, seeded_client):
        blogs_at_start = _blogs(seeded_client)

        response = seeded_client.delete(f"/api/blogs/{blogs_at_start[0]['id']}")

        assert response.status_code == 204
        assert response.content == b""
        blogs_at_end = _blogs(seeded_client)
        assert len(blogs_at_end) == len(blogs_at_start) - 1
        assert blogs_at_start[0]["id"] not in {b["id"] for b in blogs_at_end}

    def test_delete_unknown_is_404(self, seeded_client, initial_blogs):
        response = seeded_client.delete(f"/api/blogs/{uuid4()}")

        assert response.status_code == 404
        assert len(_blogs(seeded_client)) == len(initial_blogs)


class TestUpdateBlog:
    def test_likes_can_be_updated(self, seeded_client):
        blog = _blogs(seeded_client)[0]

        response = seeded_client.put(
            f"/api/blogs/{blog['id']}", json={"likes": blog["likes"] + 1}
        )

        assert response.status_code == 200
        assert response.json()["likes"] == blog["likes"] + 1
        assert response.json()["title"] == blog["title"]
        assert _blogs(seeded_client)[0]["likes"] == blog["likes"] + 1

    def test_update_unknown_is_404(self, seeded_client):
        response = seeded_client.put(f"/api/blogs/{uuid4()}", json={"likes": 3})
        assert response.status_code == 404

    def test_update_with_blank_title_is_rejected(self, seeded_client):
        blog = _blogs(seeded_client)[0]

        response = seeded_client.put(f"/api/blogs/{blog['id']}", json={"title": ""})

        assert response.status_code == 400
        assert _blogs(seeded_client)[0]["title"] == blog["title"]


class TestParseBlogId:
    def test_malformatted_id_does_not_chain_value_error(self):
        with pytest.raises(ValidationError) as exc_info:
            parse_blog_id("not-an-id")

        assert exc_info.value.field == "id"
        assert exc_info.value.__cause__ is None
        assert exc_info.value.__suppress_context__ is True
