"""SQL implementation of comment queries."""

from typing import Any, List, Mapping, Optional

import logfire
from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from conduit.application.query import CommentQueries, CommentView
from conduit.domain.error import NotFoundError
from conduit.domain.value import CommentId, UserId
from conduit.persistence.query.common import (
    author_columns,
    following_flag,
    row_to_author,
)
from conduit.persistence.tables import articles_table, comments_table, users_table


class SqlCommentQueries(CommentQueries):
    """Comment projections assembled with SQLAlchemy Core."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _select(self, viewer_id: Optional[UserId]) -> Select:
        return select(
            comments_table.c.id,
            comments_table.c.body,
            comments_table.c.created_at,
            comments_table.c.updated_at,
            *author_columns(),
            following_flag(viewer_id, comments_table.c.author_id),
        ).select_from(
            comments_table.join(
                users_table, comments_table.c.author_id == users_table.c.id
            )
        )

    async def get_comments_by_slug(
        self, slug: str, viewer_id: Optional[UserId] = None
    ) -> List[CommentView]:
        with logfire.span("comment_queries.get_comments_by_slug", slug=slug):
            article_id = (
                select(articles_table.c.id)
                .where(articles_table.c.slug == slug)
                .scalar_subquery()
            )
            stmt = (
                self._select(viewer_id)
                .where(comments_table.c.article_id == article_id)
                .order_by(comments_table.c.created_at.asc())
            )
            result = await self.session.execute(stmt)
            return [_row_to_view(row) for row in result.mappings().all()]

    async def get_comment_by_id(
        self, comment_id: CommentId, viewer_id: Optional[UserId] = None
    ) -> CommentView:
        stmt = self._select(viewer_id).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        if not row:
            raise NotFoundError("Comment", str(comment_id))
        return _row_to_view(row)


def _row_to_view(row: Mapping[str, Any]) -> CommentView:
    return CommentView(
        id=str(row["id"]),
        body=row["body"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
        author=row_to_author(row),
    )
