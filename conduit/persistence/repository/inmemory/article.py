"""In-memory article repository for testing."""

from typing import List, Optional
from uuid import uuid4

from conduit.domain.error import ValidationError
from conduit.domain.model.article import Article
from conduit.domain.repository.article import ArticleRepository
from conduit.domain.value import ArticleId, Slug, UserId

from .store import InMemoryStore


class InMemoryArticleRepository(ArticleRepository):
    """In-memory implementation of ArticleRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store if store is not None else InMemoryStore()

    def _check_slug(self, article: Article) -> None:
        if any(
            other.slug == article.slug and other.id != article.id
            for other in self._store.articles.values()
        ):
            raise ValidationError.single("slug", "is already taken")

    async def create(self, article: Article) -> Article:
        stored = article.with_id(ArticleId(uuid4()))
        self._check_slug(stored)
        self._store.articles[stored.id] = stored
        self._store.tags.update(stored.tags)
        return stored

    async def update(self, article: Article) -> Article:
        self._check_slug(article)
        self._store.articles[article.id] = article
        self._store.tags.update(article.tags)
        return article

    async def find_by_id(self, article_id: ArticleId) -> Optional[Article]:
        """Find an article by ID."""
        return self._store.articles.get(article_id)

    async def find_by_slug(self, slug: Slug) -> Optional[Article]:
        """Find an article by slug."""
        for article in self._store.articles.values():
            if article.slug == slug:
                return article
        return None

    async def exists_by_slug(
        self, slug: Slug, exclude_id: Optional[ArticleId] = None
    ) -> bool:
        return any(
            article.slug == slug and article.id != exclude_id
            for article in self._store.articles.values()
        )

    async def delete_by_id(self, article_id: ArticleId) -> None:
        """Delete the article along with its favorites and comments."""
        self._store.favorites = {
            (user_id, fav_article_id)
            for user_id, fav_article_id in self._store.favorites
            if fav_article_id != article_id
        }
        self._store.comments = {
            comment_id: comment
            for comment_id, comment in self._store.comments.items()
            if comment.article_id != article_id
        }
        self._store.articles.pop(article_id, None)

    async def favorite(self, article_id: ArticleId, user_id: UserId) -> None:
        self._store.favorites.add((user_id, article_id))

    async def unfavorite(self, article_id: ArticleId, user_id: UserId) -> None:
        self._store.favorites.discard((user_id, article_id))

    async def is_favorited(self, article_id: ArticleId, user_id: UserId) -> bool:
        return (user_id, article_id) in self._store.favorites

    async def get_all_tags(self) -> List[str]:
        return sorted(self._store.tags)
