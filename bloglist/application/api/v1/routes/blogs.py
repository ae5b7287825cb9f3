"""Blog REST routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Response
from pydantic import BaseModel

from bloglist.domain.blog.command.create import CreateBlog, CreateBlogHandler
from bloglist.domain.blog.command.delete import DeleteBlog, DeleteBlogHandler
from bloglist.domain.blog.command.update import UpdateBlog, UpdateBlogHandler
from bloglist.domain.blog.model.value import BlogId
from bloglist.domain.blog.query.get_blog import BlogDetail, GetBlog, GetBlogHandler
from bloglist.domain.blog.query.list_blogs import ListBlogs, ListBlogsHandler
from bloglist.domain.shared.error import ValidationError

router = APIRouter(prefix="/blogs", tags=["Blogs"], route_class=DishkaRoute)


class BlogChanges(BaseModel):
    """Body of a PUT request. Omitted fields are left unchanged."""

    title: str | None = None
    author: str | None = None
    url: str | None = None
    likes: int | None = None


@router.get("", response_model=list[BlogDetail])
async def list_blogs(
    handler: FromDishka[ListBlogsHandler],
) -> list[BlogDetail]:
    result = await handler.run(ListBlogs())
    return result.items


@router.post("", response_model=BlogDetail, status_code=201)
async def create_blog(
    body: CreateBlog,
    handler: FromDishka[CreateBlogHandler],
) -> BlogDetail:
    return await handler.run(body)


@router.get("/{blog_id}", response_model=BlogDetail)
async def get_blog(
    blog_id: str,
    handler: FromDishka[GetBlogHandler],
) -> BlogDetail:
    return await handler.run(GetBlog(id=parse_blog_id(blog_id)))


@router.put("/{blog_id}", response_model=BlogDetail)
async def update_blog(
    blog_id: str,
    body: BlogChanges,
    handler: FromDishka[UpdateBlogHandler],
) -> BlogDetail:
    return await handler.run(UpdateBlog(id=parse_blog_id(blog_id), **body.model_dump()))


@router.delete("/{blog_id}", status_code=204, response_class=Response)
async def delete_blog(
    blog_id: str,
    handler: FromDishka[DeleteBlogHandler],
) -> Response:
    await handler.run(DeleteBlog(id=parse_blog_id(blog_id)))
    return Response(status_code=204)


def parse_blog_id(raw: str) -> BlogId:
    """Parse a path id, rejecting anything that is not a UUID."""
    try:
        return BlogId.parse(raw)
    except ValueError:
        raise ValidationError("malformatted id", field="id") from None
