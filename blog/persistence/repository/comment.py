"""PostgreSQL implementation of Comment repository."""

from typing import List, Optional

import logfire
from sqlalchemy import Select, desc, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from blog.domain.model import Comment
from blog.domain.repository import CommentRepository
from blog.domain.value import CommentId, PostId
from blog.persistence.mappers import comment_to_dict, row_to_comment
from blog.persistence.tables import comments_table, users_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    @staticmethod
    def _select_comments() -> Select:
        return select(
            comments_table, users_table.c.username.label("author_username")
        ).select_from(
            comments_table.outerjoin(
                users_table, comments_table.c.author_id == users_table.c.id
            )
        )

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        stmt = self._select_comments().where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_comment(dict(row)) if row else None

    async def find_by_post(
        self,
        post_id: PostId,
        limit: int = 10,
        offset: int = 0,
    ) -> List[Comment]:
        """Find comments on a post, newest first."""
        with logfire.span(
            "comment_repository.find_by_post",
            post_id=str(post_id),
            limit=limit,
            offset=offset,
        ):
            stmt = (
                self._select_comments()
                .where(comments_table.c.post_id == post_id)
                .order_by(desc(comments_table.c.created_at), desc(comments_table.c.id))
                .limit(limit)
                .offset(offset)
            )
            result = await self.session.execute(stmt)
            return [row_to_comment(dict(row)) for row in result.mappings().all()]

    async def count_by_post(self, post_id: PostId) -> int:
        stmt = (
            select(func.count())
            .select_from(comments_table)
            .where(comments_table.c.post_id == post_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update)."""
        with logfire.span("comment_repository.save", comment_id=str(comment.id)):
            existing = await self.session.execute(
                select(comments_table.c.id).where(comments_table.c.id == comment.id)
            )
            comment_dict = comment_to_dict(comment)

            if existing.first():
                stmt = (
                    comments_table.update()
                    .where(comments_table.c.id == comment.id)
                    .values(**comment_dict)
                )
            else:
                stmt = comments_table.insert().values(**comment_dict)

            await self.session.execute(stmt)
            await self.session.flush()

            saved = await self.find_by_id(comment.id)
            return saved if saved else comment

    async def delete(self, comment_id: CommentId) -> None:
        """Delete a comment (hard delete)."""
        stmt = comments_table.delete().where(comments_table.c.id == comment_id)
        await self.session.execute(stmt)
        await self.session.flush()
