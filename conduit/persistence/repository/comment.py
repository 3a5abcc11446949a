"""SQL implementation of Comment repository."""

from typing import Optional
from uuid import uuid4

import logfire
from sqlalchemy import delete, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from conduit.domain.model import Comment
from conduit.domain.repository import CommentRepository
from conduit.domain.value import CommentId
from conduit.persistence.mappers import comment_to_dict, row_to_comment
from conduit.persistence.tables import comments_table


class SqlCommentRepository(CommentRepository):
    """SQLAlchemy Core implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def create(self, comment: Comment) -> Comment:
        """Insert a new comment, assigning its ID."""
        with logfire.span(
            "comment_repository.create", article_id=str(comment.article_id)
        ):
            stored = comment.with_id(CommentId(uuid4()))
            await self.session.execute(
                insert(comments_table).values(**comment_to_dict(stored))
            )
            await self.session.flush()
            return stored

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def delete_by_id(self, comment_id: CommentId) -> None:
        with logfire.span("comment_repository.delete", comment_id=str(comment_id)):
            await self.session.execute(
                delete(comments_table).where(comments_table.c.id == comment_id)
            )
            await self.session.flush()
