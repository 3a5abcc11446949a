"""SQL implementation of article queries."""

from collections import defaultdict
from typing import Any, List, Mapping, Optional
from uuid import UUID

import logfire
from sqlalchemy import Select, exists, func, literal, select
from sqlalchemy.ext.asyncio import AsyncSession

from conduit.application.query import (
    ArticleFilter,
    ArticleQueries,
    ArticleView,
)
from conduit.domain.error import NotFoundError
from conduit.domain.value import UserId
from conduit.persistence.query.common import (
    author_columns,
    following_flag,
    row_to_author,
)
from conduit.persistence.tables import (
    article_tags_table,
    articles_table,
    favorites_table,
    followers_table,
    tags_table,
    users_table,
)


class SqlArticleQueries(ArticleQueries):
    """Article projections assembled with SQLAlchemy Core."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize queries with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    def _select(self, viewer_id: Optional[UserId], following=None) -> Select:
        """Article columns, author profile, favorites count and viewer flags."""
        favorites_count = (
            select(func.count())
            .select_from(favorites_table)
            .where(favorites_table.c.article_id == articles_table.c.id)
            .scalar_subquery()
            .label("favorites_count")
        )
        if viewer_id is None:
            favorited = literal(False).label("favorited")
        else:
            favorited = (
                exists()
                .where(
                    favorites_table.c.article_id == articles_table.c.id,
                    favorites_table.c.user_id == viewer_id,
                )
                .label("favorited")
            )
        if following is None:
            following = following_flag(viewer_id, articles_table.c.author_id)

        return select(
            articles_table.c.id,
            articles_table.c.slug,
            articles_table.c.title,
            articles_table.c.description,
            articles_table.c.body,
            articles_table.c.created_at,
            articles_table.c.updated_at,
            *author_columns(),
            favorites_count,
            favorited,
            following,
        ).select_from(
            articles_table.join(
                users_table, articles_table.c.author_id == users_table.c.id
            )
        )

    async def _fetch_tags(self, article_ids: list[UUID]) -> dict[UUID, list[str]]:
        """Fetch sorted tag names for a page of articles in one query."""
        if not article_ids:
            return {}

        stmt = (
            select(article_tags_table.c.article_id, tags_table.c.name)
            .select_from(article_tags_table)
            .join(tags_table, article_tags_table.c.tag_id == tags_table.c.id)
            .where(article_tags_table.c.article_id.in_(article_ids))
            .order_by(tags_table.c.name)
        )
        result = await self.session.execute(stmt)

        article_tag_map: dict[UUID, list[str]] = defaultdict(list)
        for row in result.fetchall():
            article_tag_map[row.article_id].append(row.name)
        return article_tag_map

    async def _fetch_page(self, stmt: Select) -> List[ArticleView]:
        result = await self.session.execute(stmt)
        rows = result.mappings().all()
        tag_map = await self._fetch_tags([row["id"] for row in rows])
        return [_row_to_view(row, tag_map.get(row["id"], [])) for row in rows]

    async def get_article_by_slug(
        self, slug: str, viewer_id: Optional[UserId] = None
    ) -> ArticleView:
        with logfire.span("article_queries.get_article_by_slug", slug=slug):
            stmt = self._select(viewer_id).where(articles_table.c.slug == slug)
            views = await self._fetch_page(stmt)
            if not views:
                raise NotFoundError("Article", slug)
            return views[0]

    async def get_articles(
        self, filters: ArticleFilter, viewer_id: Optional[UserId] = None
    ) -> List[ArticleView]:
        with logfire.span(
            "article_queries.get_articles",
            tag=filters.tag,
            author=filters.author,
            favorited_by=filters.favorited_by,
            limit=filters.limit,
            offset=filters.offset,
        ):
            stmt = self._select(viewer_id)

            if filters.tag:
                tagged = (
                    select(article_tags_table.c.article_id)
                    .join(tags_table, article_tags_table.c.tag_id == tags_table.c.id)
                    .where(tags_table.c.name == filters.tag)
                )
                stmt = stmt.where(articles_table.c.id.in_(tagged))

            if filters.author:
                stmt = stmt.where(users_table.c.username == filters.author)

            if filters.favorited_by:
                fans = users_table.alias("fans")
                favorited = (
                    select(favorites_table.c.article_id)
                    .join(fans, favorites_table.c.user_id == fans.c.id)
                    .where(fans.c.username == filters.favorited_by)
                )
                stmt = stmt.where(articles_table.c.id.in_(favorited))

            stmt = (
                stmt.order_by(articles_table.c.created_at.desc())
                .limit(filters.limit)
                .offset(filters.offset)
            )
            views = await self._fetch_page(stmt)
            logfire.info("Found articles", count=len(views))
            return views

    async def get_articles_feed(
        self, viewer_id: UserId, limit: int = 20, offset: int = 0
    ) -> List[ArticleView]:
        with logfire.span(
            "article_queries.get_articles_feed",
            viewer_id=str(viewer_id),
            limit=limit,
            offset=offset,
        ):
            followees = select(followers_table.c.followee_id).where(
                followers_table.c.follower_id == viewer_id
            )
            # Every author in the feed is followed by construction
            stmt = (
                self._select(viewer_id, following=literal(True).label("following"))
                .where(articles_table.c.author_id.in_(followees))
                .order_by(articles_table.c.created_at.desc())
                .limit(limit)
                .offset(offset)
            )
            return await self._fetch_page(stmt)


def _row_to_view(row: Mapping[str, Any], tag_names: list[str]) -> ArticleView:
    return ArticleView(
        slug=row["slug"],
        title=row["title"],
        description=row["description"],
        body=row["body"],
        tag_list=tag_names,
        created_at=row["created_at"],
        updated_at=row["updated_at"],
        favorited=bool(row["favorited"]),
        favorites_count=row["favorites_count"] or 0,
        author=row_to_author(row),
    )
