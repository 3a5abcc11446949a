"""Article use cases."""

from .common import ArticleResponse, ArticleSlugRequest, ArticlesResponse
from .create_article import CreateArticleRequest, CreateArticleUseCase
from .favorite_article import FavoriteArticleUseCase, UnfavoriteArticleUseCase
from .get_article import GetArticleUseCase
from .list_articles import (
    FeedArticlesRequest,
    FeedArticlesUseCase,
    ListArticlesRequest,
    ListArticlesUseCase,
)
from .update_article import (
    DeleteArticleUseCase,
    UpdateArticleRequest,
    UpdateArticleUseCase,
)

__all__ = [
    "ArticleResponse",
    "ArticleSlugRequest",
    "ArticlesResponse",
    "CreateArticleRequest",
    "CreateArticleUseCase",
    "DeleteArticleUseCase",
    "FavoriteArticleUseCase",
    "FeedArticlesRequest",
    "FeedArticlesUseCase",
    "GetArticleUseCase",
    "ListArticlesRequest",
    "ListArticlesUseCase",
    "UnfavoriteArticleUseCase",
    "UpdateArticleRequest",
    "UpdateArticleUseCase",
]
