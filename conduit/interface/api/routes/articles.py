"""Article routes."""

from typing import Optional

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query, status
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from conduit.application.query import MAX_PAGE_VALUE
from conduit.application.security import SecurityContext
from conduit.application.usecase.article import (
    ArticleResponse,
    ArticleSlugRequest,
    ArticlesResponse,
    CreateArticleRequest,
    CreateArticleUseCase,
    DeleteArticleUseCase,
    FavoriteArticleUseCase,
    FeedArticlesRequest,
    FeedArticlesUseCase,
    GetArticleUseCase,
    ListArticlesRequest,
    ListArticlesUseCase,
    UnfavoriteArticleUseCase,
    UpdateArticleRequest,
    UpdateArticleUseCase,
)
from conduit.domain.model import ArticleChanges

router = APIRouter(prefix="/articles", tags=["articles"], route_class=DishkaRoute)


class NewArticle(BaseModel):
    """Article fields accepted on creation."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    title: str
    description: str
    body: str
    tag_list: list[str] = []


class CreateArticleAPIRequest(BaseModel):
    """API request for creating an article."""

    article: NewArticle


class UpdateArticleAPIRequest(BaseModel):
    """API request for updating an article."""

    article: ArticleChanges


@router.get("", response_model=ArticlesResponse)
async def list_articles(
    security: FromDishka[SecurityContext],
    use_case: FromDishka[ListArticlesUseCase],
    tag: Optional[str] = None,
    author: Optional[str] = None,
    favorited: Optional[str] = None,
    limit: Optional[int] = Query(default=None, ge=1, le=MAX_PAGE_VALUE),
    offset: int = Query(default=0, ge=0, le=MAX_PAGE_VALUE),
) -> ArticlesResponse:
    """List articles, newest first, optionally filtered."""
    return await use_case.execute(
        ListArticlesRequest(
            security=security,
            tag=tag,
            author=author,
            favorited=favorited,
            limit=limit,
            offset=offset,
        )
    )


@router.get("/feed", response_model=ArticlesResponse)
async def feed_articles(
    security: FromDishka[SecurityContext],
    use_case: FromDishka[FeedArticlesUseCase],
    limit: Optional[int] = Query(default=None, ge=1, le=MAX_PAGE_VALUE),
    offset: int = Query(default=0, ge=0, le=MAX_PAGE_VALUE),
) -> ArticlesResponse:
    """List articles by authors the caller follows, newest first."""
    return await use_case.execute(
        FeedArticlesRequest(security=security, limit=limit, offset=offset)
    )


@router.get("/{slug}", response_model=ArticleResponse)
async def get_article(
    slug: str,
    security: FromDishka[SecurityContext],
    use_case: FromDishka[GetArticleUseCase],
) -> ArticleResponse:
    """Get one article."""
    return await use_case.execute(ArticleSlugRequest(security=security, slug=slug))


@router.post(
    "", response_model=ArticleResponse, status_code=status.HTTP_201_CREATED
)
async def create_article(
    request: CreateArticleAPIRequest,
    security: FromDishka[SecurityContext],
    use_case: FromDishka[CreateArticleUseCase],
) -> ArticleResponse:
    """Publish an article. Requires authentication."""
    with logfire.span("api.create_article"):
        article = request.article
        return await use_case.execute(
            CreateArticleRequest(
                security=security,
                title=article.title,
                description=article.description,
                body=article.body,
                tag_list=article.tag_list,
            )
        )


@router.put("/{slug}", response_model=ArticleResponse)
async def update_article(
    slug: str,
    request: UpdateArticleAPIRequest,
    security: FromDishka[SecurityContext],
    use_case: FromDishka[UpdateArticleUseCase],
) -> ArticleResponse:
    """Update an article. Only its author may do this."""
    with logfire.span("api.update_article", slug=slug):
        return await use_case.execute(
            UpdateArticleRequest(security=security, slug=slug, changes=request.article)
        )


@router.delete("/{slug}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_article(
    slug: str,
    security: FromDishka[SecurityContext],
    use_case: FromDishka[DeleteArticleUseCase],
) -> None:
    """Delete an article with its comments and favorites. Author only."""
    with logfire.span("api.delete_article", slug=slug):
        await use_case.execute(ArticleSlugRequest(security=security, slug=slug))


@router.post("/{slug}/favorite", response_model=ArticleResponse)
async def favorite_article(
    slug: str,
    security: FromDishka[SecurityContext],
    use_case: FromDishka[FavoriteArticleUseCase],
) -> ArticleResponse:
    """Favorite an article."""
    return await use_case.execute(ArticleSlugRequest(security=security, slug=slug))


@router.delete("/{slug}/favorite", response_model=ArticleResponse)
async def unfavorite_article(
    slug: str,
    security: FromDishka[SecurityContext],
    use_case: FromDishka[UnfavoriteArticleUseCase],
) -> ArticleResponse:
    """Remove a favorite."""
    return await use_case.execute(ArticleSlugRequest(security=security, slug=slug))
