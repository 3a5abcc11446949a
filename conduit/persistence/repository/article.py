"""SQL implementation of Article repository."""

from typing import Iterable, List, Optional
from uuid import UUID, uuid4

import logfire
from sqlalchemy import delete, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from conduit.domain.model import Article
from conduit.domain.repository import ArticleRepository
from conduit.domain.value import ArticleId, Slug, UserId
from conduit.persistence.mappers import article_to_dict, row_to_article
from conduit.persistence.statements import insert_ignore, unique_violation_as_taken
from conduit.persistence.tables import (
    article_tags_table,
    articles_table,
    comments_table,
    favorites_table,
    tags_table,
)


class SqlArticleRepository(ArticleRepository):
    """SQLAlchemy Core implementation of ArticleRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _fetch_tags(self, article_id: UUID) -> list[str]:
        stmt = (
            select(tags_table.c.name)
            .select_from(article_tags_table)
            .join(tags_table, article_tags_table.c.tag_id == tags_table.c.id)
            .where(article_tags_table.c.article_id == article_id)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def _ensure_tags(self, names: Iterable[str]) -> dict[str, UUID]:
        """Insert missing tags and return name -> tag ID for all given names."""
        names = sorted(set(names))
        if not names:
            return {}

        await insert_ignore(
            self.session,
            tags_table,
            [{"id": uuid4(), "name": name} for name in names],
        )
        stmt = select(tags_table.c.id, tags_table.c.name).where(
            tags_table.c.name.in_(names)
        )
        result = await self.session.execute(stmt)
        return {row.name: row.id for row in result.fetchall()}

    async def _link_tags(self, article_id: UUID, names: Iterable[str]) -> None:
        tag_ids = await self._ensure_tags(names)
        await insert_ignore(
            self.session,
            article_tags_table,
            [
                {"article_id": article_id, "tag_id": tag_id}
                for tag_id in tag_ids.values()
            ],
        )

    async def create(self, article: Article) -> Article:
        """Insert article row, then its tags."""
        with logfire.span("article_repository.create", slug=str(article.slug)):
            stored = article.with_id(ArticleId(uuid4()))
            with unique_violation_as_taken("slug"):
                await self.session.execute(
                    insert(articles_table).values(**article_to_dict(stored))
                )
            await self._link_tags(stored.id, stored.tags)
            await self.session.flush()

            logfire.info(
                "Article created", article_id=str(stored.id), tags=len(stored.tags)
            )
            return stored

    async def update(self, article: Article) -> Article:
        """Update the article row and reconcile its tag associations."""
        with logfire.span("article_repository.update", article_id=str(article.id)):
            values = article_to_dict(article)
            values.pop("id")
            values.pop("created_at")
            with unique_violation_as_taken("slug"):
                await self.session.execute(
                    update(articles_table)
                    .where(articles_table.c.id == article.id)
                    .values(**values)
                )

            stale = select(tags_table.c.id).where(
                tags_table.c.name.not_in(sorted(article.tags))
            )
            await self.session.execute(
                delete(article_tags_table).where(
                    article_tags_table.c.article_id == article.id,
                    article_tags_table.c.tag_id.in_(stale),
                )
            )
            await self._link_tags(article.id, article.tags)
            await self.session.flush()
            return article

    async def find_by_id(self, article_id: ArticleId) -> Optional[Article]:
        """Find an article by ID."""
        stmt = select(articles_table).where(articles_table.c.id == article_id)
        return await self._find_one(stmt)

    async def find_by_slug(self, slug: Slug) -> Optional[Article]:
        """Find an article by slug."""
        with logfire.span("article_repository.find_by_slug", slug=str(slug)):
            stmt = select(articles_table).where(articles_table.c.slug == str(slug))
            article = await self._find_one(stmt)
            if article is None:
                logfire.debug("Article not found by slug", slug=str(slug))
            return article

    async def exists_by_slug(
        self, slug: Slug, exclude_id: Optional[ArticleId] = None
    ) -> bool:
        """Check if a slug is used by any article other than ``exclude_id``."""
        stmt = (
            select(func.count())
            .select_from(articles_table)
            .where(articles_table.c.slug == str(slug))
        )
        if exclude_id is not None:
            stmt = stmt.where(articles_table.c.id != exclude_id)
        result = await self.session.execute(stmt)
        return (result.scalar() or 0) > 0

    async def delete_by_id(self, article_id: ArticleId) -> None:
        """Delete tag links, favorites and comments, then the article."""
        with logfire.span("article_repository.delete", article_id=str(article_id)):
            for table in (article_tags_table, favorites_table, comments_table):
                await self.session.execute(
                    delete(table).where(table.c.article_id == article_id)
                )
            await self.session.execute(
                delete(articles_table).where(articles_table.c.id == article_id)
            )
            await self.session.flush()
            logfire.info("Article deleted", article_id=str(article_id))

    async def favorite(self, article_id: ArticleId, user_id: UserId) -> None:
        await insert_ignore(
            self.session,
            favorites_table,
            {"article_id": article_id, "user_id": user_id},
        )
        await self.session.flush()

    async def unfavorite(self, article_id: ArticleId, user_id: UserId) -> None:
        await self.session.execute(
            delete(favorites_table).where(
                favorites_table.c.article_id == article_id,
                favorites_table.c.user_id == user_id,
            )
        )
        await self.session.flush()

    async def is_favorited(self, article_id: ArticleId, user_id: UserId) -> bool:
        stmt = (
            select(func.count())
            .select_from(favorites_table)
            .where(
                favorites_table.c.article_id == article_id,
                favorites_table.c.user_id == user_id,
            )
        )
        result = await self.session.execute(stmt)
        return (result.scalar() or 0) > 0

    async def get_all_tags(self) -> List[str]:
        """Return all tag names, sorted."""
        stmt = select(tags_table.c.name).order_by(tags_table.c.name)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def _find_one(self, stmt) -> Optional[Article]:
        result = await self.session.execute(stmt)
        row = result.fetchone()
        if not row:
            return None
        tag_names = await self._fetch_tags(row.id)
        return row_to_article(row._asdict(), tag_names=tag_names)
