from __future__ import annotations

from typing import List

from sqlalchemy import delete, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from bloglist.domain.blog.model.aggregate import Blog
from bloglist.domain.blog.model.value import BlogId
from bloglist.domain.blog.port.repository import BlogRepository
from bloglist.infrastructure.persistence.mappers.blog import blog_to_dict, row_to_blog
from bloglist.infrastructure.persistence.tables import blogs_table


class SqlBlogRepository(BlogRepository):
    """SQLAlchemy implementation of BlogRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get(self, blog_id: BlogId) -> Blog | None:
        stmt = select(blogs_table).where(blogs_table.c.id == str(blog_id))
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_blog(dict(row)) if row else None

    async def save(self, blog: Blog) -> None:
        blog_dict = blog_to_dict(blog)

        stmt = select(blogs_table.c.seq).where(blogs_table.c.id == str(blog.id))
        existing = (await self.session.execute(stmt)).first()

        if existing:
            stmt = (
                update(blogs_table)
                .where(blogs_table.c.id == str(blog.id))
                .values(**blog_dict)
            )
        else:
            stmt = insert(blogs_table).values(**blog_dict)

        await self.session.execute(stmt)
        await self.session.flush()

    async def delete(self, blog_id: BlogId) -> bool:
        stmt = delete(blogs_table).where(blogs_table.c.id == str(blog_id))
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0

    async def list(self) -> List[Blog]:
        stmt = select(blogs_table).order_by(blogs_table.c.seq)
        result = await self.session.execute(stmt)
        return [row_to_blog(dict(r)) for r in result.mappings().all()]

    async def count(self) -> int:
        stmt = select(func.count()).select_from(blogs_table)
        result = await self.session.execute(stmt)
        return result.scalar_one()
