"""PostgreSQL implementation of Post repository."""

from typing import List, Optional

import logfire
from sqlalchemy import delete, desc, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from devconnect.domain.model import Post
from devconnect.domain.repository import PostRepository
from devconnect.domain.value import PostId, UserId
from devconnect.persistence.mappers import post_to_dict, row_to_post
from devconnect.persistence.tables import posts_table


class PostgresPostRepository(PostRepository):
    """PostgreSQL implementation of PostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        with logfire.span("post_repository.find_by_id", post_id=str(post_id)):
            stmt = select(posts_table).where(posts_table.c.id == post_id)
            result = await self.session.execute(stmt)
            row = result.mappings().first()
            return row_to_post(dict(row)) if row else None

    async def find_all(self) -> List[Post]:
        with logfire.span("post_repository.find_all"):
            stmt = select(posts_table).order_by(desc(posts_table.c.created_at))
            result = await self.session.execute(stmt)
            return [row_to_post(dict(row)) for row in result.mappings().all()]

    async def save(self, post: Post) -> Post:
        with logfire.span("post_repository.save", post_id=str(post.id)):
            post_dict = post_to_dict(post)

            exists = await self.session.scalar(
                select(posts_table.c.id).where(posts_table.c.id == post.id)
            )
            if exists:
                # Likes and comments are rewritten whole (last write wins)
                stmt = (
                    update(posts_table)
                    .where(posts_table.c.id == post.id)
                    .values(**post_dict)
                )
            else:
                stmt = insert(posts_table).values(**post_dict)

            await self.session.execute(stmt)
            await self.session.flush()
            return post

    async def delete(self, post_id: PostId) -> bool:
        with logfire.span("post_repository.delete", post_id=str(post_id)):
            stmt = delete(posts_table).where(posts_table.c.id == post_id)
            result = await self.session.execute(stmt)
            return result.rowcount > 0

    async def delete_by_author(self, user_id: UserId) -> int:
        with logfire.span("post_repository.delete_by_author", user_id=str(user_id)):
            stmt = delete(posts_table).where(posts_table.c.user_id == user_id)
            result = await self.session.execute(stmt)
            return result.rowcount
