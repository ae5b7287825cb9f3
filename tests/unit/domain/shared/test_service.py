"""Tests for the Service base class."""

import dataclasses
from unittest.mock import AsyncMock

from bloglist.domain.blog.service.blog import BlogService
from bloglist.domain.shared.service import Service


class TestService:
    def test_subclasses_are_dataclasses(self):
        assert dataclasses.is_dataclass(BlogService)
        assert [f.name for f in dataclasses.fields(BlogService)] == ["blog_repo"]

    def test_base_is_not_a_dataclass(self):
        assert not dataclasses.is_dataclass(Service)

    def test_fields_become_keyword_arguments(self):
        repo = AsyncMock()
        assert BlogService(blog_repo=repo).blog_repo is repo
