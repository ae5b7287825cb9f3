"""BlogService - create, read, update and delete blog entries."""

import logging

from bloglist.domain.blog.model.aggregate import Blog
from bloglist.domain.blog.model.value import BlogId
from bloglist.domain.blog.port.repository import BlogRepository
from bloglist.domain.shared.error import NotFoundError, ValidationError
from bloglist.domain.shared.service import Service

logger = logging.getLogger(__name__)


class BlogService(Service):
    blog_repo: BlogRepository

    async def create(
        self,
        title: str | None,
        url: str | None,
        author: str | None = None,
        likes: int | None = None,
    ) -> Blog:
        """Validate and persist a new blog. Absent likes default to 0."""
        blog = Blog.create(
            title=_require_text(title, "title"),
            url=_require_text(url, "url"),
            author=author or "",
            likes=_check_likes(likes) if likes is not None else 0,
        )
        await self.blog_repo.save(blog)
        logger.debug("Blog created: %s", blog.id)
        return blog

    async def get(self, blog_id: BlogId) -> Blog:
        blog = await self.blog_repo.get(blog_id)
        if blog is None:
            raise NotFoundError(f"Blog not found: {blog_id}")
        return blog

    async def list_blogs(self) -> list[Blog]:
        return await self.blog_repo.list()

    async def update(
        self,
        blog_id: BlogId,
        *,
        title: str | None = None,
        author: str | None = None,
        url: str | None = None,
        likes: int | None = None,
    ) -> Blog:
        """Apply a partial update. Fields left as None are unchanged."""
        blog = await self.get(blog_id)
        if title is not None:
            blog.title = _require_text(title, "title")
        if url is not None:
            blog.url = _require_text(url, "url")
        if author is not None:
            blog.author = author
        if likes is not None:
            blog.likes = _check_likes(likes)
        await self.blog_repo.save(blog)
        logger.debug("Blog updated: %s", blog_id)
        return blog

    async def delete(self, blog_id: BlogId) -> None:
        if not await self.blog_repo.delete(blog_id):
            raise NotFoundError(f"Blog not found: {blog_id}")
        logger.debug("Blog deleted: %s", blog_id)


def _require_text(value: str | None, field: str) -> str:
    if value is None or not value.strip():
        raise ValidationError(f"`{field}` is required", field=field)
    return value


def _check_likes(likes: int) -> int:
    if likes < 0:
        raise ValidationError("`likes` must not be negative", field="likes")
    return likes
