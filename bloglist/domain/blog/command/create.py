import logfire

from bloglist.domain.blog.query.get_blog import BlogDetail
from bloglist.domain.blog.service.blog import BlogService
from bloglist.domain.shared.command import Command, CommandHandler


class CreateBlog(Command):
    title: str | None = None
    author: str | None = None
    url: str | None = None
    likes: int | None = None


class CreateBlogHandler(CommandHandler[CreateBlog, BlogDetail]):
    blog_service: BlogService

    async def run(self, cmd: CreateBlog) -> BlogDetail:
        blog = await self.blog_service.create(
            title=cmd.title,
            url=cmd.url,
            author=cmd.author,
            likes=cmd.likes,
        )
        logfire.info("Blog created", blog_id=str(blog.id))
        return BlogDetail.from_blog(blog)
