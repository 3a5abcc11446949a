"""Article query port."""

from abc import ABC, abstractmethod
from typing import List, Optional

from conduit.application.query.views import ArticleFilter, ArticleView
from conduit.domain.value import UserId


class ArticleQueries(ABC):
    """Read-side access to articles.

    Implementations may join and denormalize freely but must never write.
    """

    @abstractmethod
    async def get_article_by_slug(
        self, slug: str, viewer_id: Optional[UserId] = None
    ) -> ArticleView:
        """Get one article.

        Args:
            slug: Article slug
            viewer_id: Viewing user; flags are False when None

        Returns:
            Article projection

        Raises:
            NotFoundError: If no article has this slug
        """
        pass

    @abstractmethod
    async def get_articles(
        self, filters: ArticleFilter, viewer_id: Optional[UserId] = None
    ) -> List[ArticleView]:
        """List articles, newest first.

        Args:
            filters: Tag/author/favorited-by filters and pagination
            viewer_id: Viewing user; flags are False when None

        Returns:
            One page of article projections
        """
        pass

    @abstractmethod
    async def get_articles_feed(
        self, viewer_id: UserId, limit: int = 20, offset: int = 0
    ) -> List[ArticleView]:
        """List articles by authors the viewer follows, newest first.

        Args:
            viewer_id: Viewing user
            limit: Page size
            offset: Number of articles to skip

        Returns:
            One page of article projections
        """
        pass
