"""Article repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from conduit.domain.model.article import Article
from conduit.domain.value import ArticleId, Slug, UserId


class ArticleRepository(ABC):
    """Repository for the Article aggregate.

    Covers the article row, its tag associations and the favorite relation.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def create(self, article: Article) -> Article:
        """Persist a new article together with its tags.

        Each tag name is inserted if absent, then associated with the article.

        Args:
            article: Article without an identity

        Returns:
            The stored article, carrying its new ID
        """
        pass

    @abstractmethod
    async def update(self, article: Article) -> Article:
        """Persist changes to an existing article.

        Tag associations no longer present in ``article.tags`` are removed
        before the new ones are upserted.

        Args:
            article: Article with an identity

        Returns:
            The updated article
        """
        pass

    @abstractmethod
    async def find_by_id(self, article_id: ArticleId) -> Optional[Article]:
        """Find an article by ID.

        Args:
            article_id: The article's unique identifier

        Returns:
            The article if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_slug(self, slug: Slug) -> Optional[Article]:
        """Find an article by slug.

        Args:
            slug: The article's slug

        Returns:
            The article if found, None otherwise
        """
        pass

    @abstractmethod
    async def exists_by_slug(
        self, slug: Slug, exclude_id: Optional[ArticleId] = None
    ) -> bool:
        """Check whether a slug is taken.

        Args:
            slug: Slug to check
            exclude_id: Article to ignore (the one being updated)

        Returns:
            True if another article already uses the slug
        """
        pass

    @abstractmethod
    async def delete_by_id(self, article_id: ArticleId) -> None:
        """Delete an article and everything hanging off it.

        Removes tag associations, favorites and comments before the article
        row itself, so integrity never depends on database cascades.

        Args:
            article_id: The article ID to delete
        """
        pass

    @abstractmethod
    async def favorite(self, article_id: ArticleId, user_id: UserId) -> None:
        """Record that a user favorited an article (idempotent)."""
        pass

    @abstractmethod
    async def unfavorite(self, article_id: ArticleId, user_id: UserId) -> None:
        """Remove a user's favorite (no-op if absent)."""
        pass

    @abstractmethod
    async def is_favorited(self, article_id: ArticleId, user_id: UserId) -> bool:
        """Check whether a user has favorited an article."""
        pass

    @abstractmethod
    async def get_all_tags(self) -> List[str]:
        """Return every known tag name, sorted by name."""
        pass
