"""In-memory article queries for testing."""

from typing import List, Optional

from conduit.application.query import ArticleFilter, ArticleQueries, ArticleView
from conduit.domain.error import NotFoundError
from conduit.domain.model import Article
from conduit.domain.value import UserId
from conduit.persistence.repository.inmemory import InMemoryStore

from .common import article_view


class InMemoryArticleQueries(ArticleQueries):
    """Article projections computed from an InMemoryStore."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    def _newest_first(self) -> list[Article]:
        return sorted(
            self._store.articles.values(), key=lambda a: a.created_at, reverse=True
        )

    async def get_article_by_slug(
        self, slug: str, viewer_id: Optional[UserId] = None
    ) -> ArticleView:
        for article in self._store.articles.values():
            if str(article.slug) == slug:
                return article_view(self._store, article, viewer_id)
        raise NotFoundError("Article", slug)

    async def get_articles(
        self, filters: ArticleFilter, viewer_id: Optional[UserId] = None
    ) -> List[ArticleView]:
        users = self._store.users
        articles = self._newest_first()

        if filters.tag:
            articles = [a for a in articles if filters.tag in a.tags]
        if filters.author:
            articles = [
                a
                for a in articles
                if users[a.author_id].username.root == filters.author
            ]
        if filters.favorited_by:
            favorited = {
                article_id
                for user_id, article_id in self._store.favorites
                if users[user_id].username.root == filters.favorited_by
            }
            articles = [a for a in articles if a.id in favorited]

        page = articles[filters.offset : filters.offset + filters.limit]
        return [article_view(self._store, a, viewer_id) for a in page]

    async def get_articles_feed(
        self, viewer_id: UserId, limit: int = 20, offset: int = 0
    ) -> List[ArticleView]:
        followees = {
            followee
            for follower, followee in self._store.follows
            if follower == viewer_id
        }
        articles = [a for a in self._newest_first() if a.author_id in followees]
        return [
            article_view(self._store, a, viewer_id)
            for a in articles[offset : offset + limit]
        ]
