from typing import Any

from bloglist.domain.blog.model.aggregate import Blog
from bloglist.domain.blog.model.value import BlogId


def row_to_blog(row: dict[str, Any]) -> Blog:
    """Convert database row to Blog aggregate."""
    return Blog(
        id=BlogId.parse(row["id"]),
        title=row["title"],
        author=row.get("author") or "",
        url=row["url"],
        likes=row.get("likes") or 0,
    )


def blog_to_dict(blog: Blog) -> dict[str, Any]:
    """Convert Blog aggregate to database dict."""
    return {
        "id": str(blog.id),
        "title": blog.title,
        "author": blog.author,
        "url": blog.url,
        "likes": blog.likes,
    }
