"""Blog aggregate."""

from pydantic import NonNegativeInt

from bloglist.domain.blog.model.value import BlogId
from bloglist.domain.shared.model.aggregate import Aggregate


class Blog(Aggregate):
    """A blog post's metadata.

    Invariants:
    - `id` is immutable after creation
    - `likes` is never negative (checked on construction and assignment)
    """

    id: BlogId
    title: str
    author: str = ""
    url: str
    likes: NonNegativeInt = 0

    @classmethod
    def create(cls, title: str, url: str, author: str = "", likes: int = 0) -> "Blog":
        """Create a new blog with a fresh identifier."""
        return cls(id=BlogId.generate(), title=title, author=author, url=url, likes=likes)
