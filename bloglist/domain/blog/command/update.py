from bloglist.domain.blog.model.value import BlogId
from bloglist.domain.blog.query.get_blog import BlogDetail
from bloglist.domain.blog.service.blog import BlogService
from bloglist.domain.shared.command import Command, CommandHandler


class UpdateBlog(Command):
    id: BlogId
    title: str | None = None
    author: str | None = None
    url: str | None = None
    likes: int | None = None


class UpdateBlogHandler(CommandHandler[UpdateBlog, BlogDetail]):
    blog_service: BlogService

    async def run(self, cmd: UpdateBlog) -> BlogDetail:
        blog = await self.blog_service.update(
            cmd.id,
            title=cmd.title,
            author=cmd.author,
            url=cmd.url,
            likes=cmd.likes,
        )
        return BlogDetail.from_blog(blog)
