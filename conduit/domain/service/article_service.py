"""Article domain service."""

from collections.abc import Iterable
from typing import Optional
from uuid import uuid4

import logfire
from pydantic import ValidationError as PydanticValidationError

from conduit.domain.error import ForbiddenError, NotFoundError, ValidationError
from conduit.domain.model import Article, ArticleChanges
from conduit.domain.repository import ArticleRepository
from conduit.domain.value import ArticleId, Slug, UserId

from .base import Service
from .slug import generate_unique_slug


class ArticleService(Service):
    """Domain service for article commands.

    Every mutation checks authorship against the caller's user ID, which is
    passed in explicitly by the application layer.
    """

    def __init__(self, article_repository: ArticleRepository) -> None:
        """Initialize article service.

        Args:
            article_repository: Article repository
        """
        self.article_repository = article_repository

    async def create_article(
        self,
        user_id: UserId,
        title: str,
        description: str,
        body: str,
        tags: Iterable[str] = (),
    ) -> Article:
        """Create an article with a unique slug derived from its title.

        Args:
            user_id: Author's user ID
            title: Article title
            description: Short description
            body: Article body
            tags: Tag names (duplicates and blanks are dropped)

        Returns:
            Created article with its ID and slug

        Raises:
            ValidationError: If title, description, body or a tag is invalid
        """
        with logfire.span(
            "article_service.create_article", user_id=str(user_id), title=title
        ):
            # Validate content before spending queries on the slug
            draft = self._build(
                slug=Slug("draft"),
                title=title,
                description=description,
                body=body,
                author_id=user_id,
                tags=list(tags),
            )
            slug = await self._unique_slug(title)
            article = await self.article_repository.create(draft.evolve(slug=slug))

            logfire.info(
                "Article created",
                article_id=str(article.id),
                slug=article.slug.root,
                tags=sorted(article.tags),
            )
            return article

    async def update_article(
        self, user_id: UserId, slug: Slug, changes: ArticleChanges
    ) -> Article:
        """Partially update an article.

        Fields left unset or blank keep their current value. A changed title
        gets a new unique slug; the article's own current slug does not count
        as a collision.

        Args:
            user_id: Caller's user ID
            slug: Slug of the article to update
            changes: Fields to change

        Returns:
            Updated article

        Raises:
            NotFoundError: If no article has this slug
            ForbiddenError: If the caller is not the author
            ValidationError: If the new content is invalid
        """
        with logfire.span(
            "article_service.update_article", user_id=str(user_id), slug=slug.root
        ):
            article = await self._get_by_slug(slug)
            if not article.can_be_modified_by(user_id):
                logfire.warn(
                    "Article update forbidden",
                    article_id=str(article.id),
                    user_id=str(user_id),
                )
                raise ForbiddenError("You can only update your own articles")

            new_slug = article.slug
            if article.title_changes(changes):
                new_slug = await self._unique_slug(changes.title, exclude_id=article.id)

            try:
                updated = article.apply(changes, new_slug)
            except PydanticValidationError as e:
                raise ValidationError.from_pydantic(e)

            saved = await self.article_repository.update(updated)
            logfire.info(
                "Article updated",
                article_id=str(saved.id),
                slug=saved.slug.root,
                slug_changed=saved.slug != slug,
            )
            return saved

    async def delete_article(self, user_id: UserId, slug: Slug) -> None:
        """Delete an article with its tags, favorites and comments.

        Args:
            user_id: Caller's user ID
            slug: Slug of the article to delete

        Raises:
            NotFoundError: If no article has this slug
            ForbiddenError: If the caller is not the author
        """
        with logfire.span(
            "article_service.delete_article", user_id=str(user_id), slug=slug.root
        ):
            article = await self._get_by_slug(slug)
            if not article.can_be_modified_by(user_id):
                logfire.warn(
                    "Article deletion forbidden",
                    article_id=str(article.id),
                    user_id=str(user_id),
                )
                raise ForbiddenError("You can only delete your own articles")

            await self.article_repository.delete_by_id(article.id)
            logfire.info("Article deleted", article_id=str(article.id))

    async def favorite_article(self, user_id: UserId, slug: Slug) -> Article:
        """Favorite an article; favoriting twice has no further effect.

        Raises:
            NotFoundError: If no article has this slug
        """
        with logfire.span(
            "article_service.favorite_article", user_id=str(user_id), slug=slug.root
        ):
            article = await self._get_by_slug(slug)
            await self.article_repository.favorite(article.id, user_id)
            logfire.info(
                "Article favorited", article_id=str(article.id), user_id=str(user_id)
            )
            return article

    async def unfavorite_article(self, user_id: UserId, slug: Slug) -> Article:
        """Remove a favorite; a no-op if the article was not favorited.

        Raises:
            NotFoundError: If no article has this slug
        """
        with logfire.span(
            "article_service.unfavorite_article", user_id=str(user_id), slug=slug.root
        ):
            article = await self._get_by_slug(slug)
            await self.article_repository.unfavorite(article.id, user_id)
            logfire.info(
                "Article unfavorited", article_id=str(article.id), user_id=str(user_id)
            )
            return article

    async def get_all_tags(self) -> list[str]:
        """Return the full tag vocabulary, sorted."""
        with logfire.span("article_service.get_all_tags"):
            tags = await self.article_repository.get_all_tags()
            logfire.info("Tags listed", count=len(tags))
            return tags

    async def _get_by_slug(self, slug: Slug) -> Article:
        article = await self.article_repository.find_by_slug(slug)
        if not article:
            logfire.warn("Article not found", slug=slug.root)
            raise NotFoundError("Article", slug.root)
        return article

    async def _unique_slug(
        self, title: str, exclude_id: Optional[ArticleId] = None
    ) -> Slug:
        async def exists(candidate: Slug) -> bool:
            return await self.article_repository.exists_by_slug(
                candidate, exclude_id=exclude_id
            )

        return await generate_unique_slug(
            title, exists, fallback=f"article-{uuid4().hex[:8]}"
        )

    @staticmethod
    def _build(**fields) -> Article:
        try:
            return Article(**fields)
        except PydanticValidationError as e:
            raise ValidationError.from_pydantic(e)
