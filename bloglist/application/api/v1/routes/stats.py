"""Blog summary statistics route."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from bloglist.domain.stats.query.get_blog_stats import (
    BlogStats,
    GetBlogStats,
    GetBlogStatsHandler,
)

router = APIRouter(prefix="/stats", tags=["Stats"], route_class=DishkaRoute)


@router.get("", response_model=BlogStats)
async def get_stats(
    handler: FromDishka[GetBlogStatsHandler],
) -> BlogStats:
    """Total likes, favourite blog and top authors over all blogs."""
    return await handler.run(GetBlogStats())
