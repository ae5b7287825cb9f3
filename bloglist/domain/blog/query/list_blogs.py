from bloglist.domain.blog.query.get_blog import BlogDetail
from bloglist.domain.blog.service.blog import BlogService
from bloglist.domain.shared.query import Query, QueryHandler, Result


class ListBlogs(Query):
    pass


class BlogList(Result):
    items: list[BlogDetail]
    total: int


class ListBlogsHandler(QueryHandler[ListBlogs, BlogList]):
    blog_service: BlogService

    async def run(self, cmd: ListBlogs) -> BlogList:
        blogs = await self.blog_service.list_blogs()
        return BlogList(
            items=[BlogDetail.from_blog(b) for b in blogs],
            total=len(blogs),
        )
