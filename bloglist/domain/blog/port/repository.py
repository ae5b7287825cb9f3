from __future__ import annotations

from abc import abstractmethod
from typing import List, Protocol

from bloglist.domain.blog.model.aggregate import Blog
from bloglist.domain.blog.model.value import BlogId
from bloglist.domain.shared.port import Port


class BlogRepository(Port, Protocol):
    @abstractmethod
    async def get(self, blog_id: BlogId) -> Blog | None: ...

    @abstractmethod
    async def save(self, blog: Blog) -> None: ...

    @abstractmethod
    async def delete(self, blog_id: BlogId) -> bool:
        """Delete a blog. Returns False if no such blog existed."""
        ...

    @abstractmethod
    async def list(self) -> List[Blog]:
        """List blogs in insertion order."""
        ...

    @abstractmethod
    async def count(self) -> int: ...
