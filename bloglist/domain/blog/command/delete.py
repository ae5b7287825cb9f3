from bloglist.domain.blog.model.value import BlogId
from bloglist.domain.blog.service.blog import BlogService
from bloglist.domain.shared.command import Command, CommandHandler, Result


class DeleteBlog(Command):
    id: BlogId


class BlogDeleted(Result):
    id: str


class DeleteBlogHandler(CommandHandler[DeleteBlog, BlogDeleted]):
    blog_service: BlogService

    async def run(self, cmd: DeleteBlog) -> BlogDeleted:
        await self.blog_service.delete(cmd.id)
        return BlogDeleted(id=str(cmd.id))
