from dishka import provide

from bloglist.domain.blog.command.create import CreateBlogHandler
from bloglist.domain.blog.command.delete import DeleteBlogHandler
from bloglist.domain.blog.command.update import UpdateBlogHandler
from bloglist.domain.blog.query.get_blog import GetBlogHandler
from bloglist.domain.blog.query.list_blogs import ListBlogsHandler
from bloglist.domain.blog.service.blog import BlogService
from bloglist.domain.stats.query.get_blog_stats import GetBlogStatsHandler
from bloglist.util.di.base import Provider
from bloglist.util.di.scope import Scope


class BlogProvider(Provider):
    blog_service = provide(BlogService, scope=Scope.UOW)

    # Command Handlers
    create_handler = provide(CreateBlogHandler, scope=Scope.UOW)
    update_handler = provide(UpdateBlogHandler, scope=Scope.UOW)
    delete_handler = provide(DeleteBlogHandler, scope=Scope.UOW)

    # Query Handlers
    get_blog_handler = provide(GetBlogHandler, scope=Scope.UOW)
    list_blogs_handler = provide(ListBlogsHandler, scope=Scope.UOW)
    get_blog_stats_handler = provide(GetBlogStatsHandler, scope=Scope.UOW)
