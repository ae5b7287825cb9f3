"""GetBlog query handler and the shared blog read model."""

from bloglist.domain.blog.model.aggregate import Blog
from bloglist.domain.blog.model.value import BlogId
from bloglist.domain.blog.service.blog import BlogService
from bloglist.domain.shared.query import Query, QueryHandler, Result


class GetBlog(Query):
    id: BlogId


class BlogDetail(Result):
    id: str
    title: str
    author: str
    url: str
    likes: int

    @classmethod
    def from_blog(cls, blog: Blog) -> "BlogDetail":
        return cls(
            id=str(blog.id),
            title=blog.title,
            author=blog.author,
            url=blog.url,
            likes=blog.likes,
        )


class GetBlogHandler(QueryHandler[GetBlog, BlogDetail]):
    blog_service: BlogService

    async def run(self, cmd: GetBlog) -> BlogDetail:
        blog = await self.blog_service.get(cmd.id)
        return BlogDetail.from_blog(blog)
