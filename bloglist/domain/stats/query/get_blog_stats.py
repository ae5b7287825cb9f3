"""GetBlogStats query handler - summary over the current blog collection."""

from bloglist.domain.blog.query.get_blog import BlogDetail
from bloglist.domain.blog.service.blog import BlogService
from bloglist.domain.shared.query import Query, QueryHandler, Result
from bloglist.domain.stats.aggregator import (
    AuthorBlogCount,
    AuthorLikes,
    favourite_blog,
    most_blogs,
    most_likes,
    total_likes,
)


class GetBlogStats(Query):
    pass


class BlogStats(Result):
    total_blogs: int
    total_likes: int
    favourite_blog: BlogDetail | None
    most_blogs: AuthorBlogCount
    most_likes: AuthorLikes


class GetBlogStatsHandler(QueryHandler[GetBlogStats, BlogStats]):
    blog_service: BlogService

    async def run(self, cmd: GetBlogStats) -> BlogStats:
        blogs = await self.blog_service.list_blogs()
        favourite = favourite_blog(blogs)
        return BlogStats(
            total_blogs=len(blogs),
            total_likes=total_likes(blogs),
            favourite_blog=BlogDetail.from_blog(favourite) if favourite else None,
            most_blogs=most_blogs(blogs),
            most_likes=most_likes(blogs),
        )
