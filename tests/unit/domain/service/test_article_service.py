"""Unit tests for ArticleService."""

from uuid import uuid4

import pytest

from conduit.domain.error import ForbiddenError, NotFoundError, ValidationError
from conduit.domain.model import ArticleChanges, Comment
from conduit.domain.service import ArticleService
from conduit.domain.value import Slug, UserId
from conduit.persistence.repository.inmemory import (
    InMemoryArticleRepository,
    InMemoryCommentRepository,
    InMemoryStore,
)

AUTHOR = UserId(uuid4())
OTHER = UserId(uuid4())


@pytest.fixture
def store():
    return InMemoryStore()


@pytest.fixture
def article_repo(store):
    return InMemoryArticleRepository(store)


@pytest.fixture
def service(article_repo):
    return ArticleService(article_repo)


async def create_dragon(service: ArticleService, user_id: UserId = AUTHOR):
    return await service.create_article(
        user_id,
        "How to train your dragon",
        "Ever wonder how?",
        "You have to believe",
        ["dragons", "training"],
    )


class TestCreateArticle:
    """Tests for ArticleService.create_article()."""

    @pytest.mark.asyncio
    async def test_create_derives_slug_from_title(self, service):
        # Act
        article = await create_dragon(service)

        # Assert
        assert article.id is not None
        assert article.slug == Slug("how-to-train-your-dragon")
        assert article.author_id == AUTHOR
        assert article.tags == frozenset({"dragons", "training"})

    @pytest.mark.asyncio
    async def test_same_title_gets_numbered_slug(self, service):
        await create_dragon(service)

        second = await create_dragon(service, OTHER)

        assert second.slug == Slug("how-to-train-your-dragon-2")

    @pytest.mark.asyncio
    async def test_untransliterable_title_gets_fallback_slug(self, service):
        article = await service.create_article(AUTHOR, "!!!", "desc", "body")

        assert article.slug.root.startswith("article-")
        assert len(article.slug.root) == len("article-") + 8

    @pytest.mark.asyncio
    async def test_blank_fields_are_rejected(self, service, article_repo):
        with pytest.raises(ValidationError) as exc_info:
            await service.create_article(AUTHOR, "Title", "", "  ")

        assert exc_info.value.errors == {
            "description": ["Description must not be blank"],
            "body": ["Body must not be blank"],
        }
        assert await article_repo.get_all_tags() == []

    @pytest.mark.asyncio
    async def test_tags_join_vocabulary(self, service):
        await create_dragon(service)

        assert await service.get_all_tags() == ["dragons", "training"]


class TestUpdateArticle:
    """Tests for ArticleService.update_article()."""

    @pytest.mark.asyncio
    async def test_body_change_keeps_slug(self, service):
        article = await create_dragon(service)

        updated = await service.update_article(
            AUTHOR, article.slug, ArticleChanges(body="With two hands")
        )

        assert updated.slug == article.slug
        assert updated.body == "With two hands"
        assert updated.title == article.title

    @pytest.mark.asyncio
    async def test_title_change_regenerates_slug(self, service, article_repo):
        article = await create_dragon(service)

        updated = await service.update_article(
            AUTHOR, article.slug, ArticleChanges(title="Did you train your dragon?")
        )

        assert updated.slug == Slug("did-you-train-your-dragon")
        assert await article_repo.find_by_slug(article.slug) is None

    @pytest.mark.asyncio
    async def test_new_slug_avoids_other_articles(self, service):
        await service.create_article(OTHER, "Dragons", "d", "b")
        article = await create_dragon(service)

        updated = await service.update_article(
            AUTHOR, article.slug, ArticleChanges(title="Dragons")
        )

        assert updated.slug == Slug("dragons-2")

    @pytest.mark.asyncio
    async def test_same_slug_title_does_not_collide_with_itself(self, service):
        article = await create_dragon(service)

        updated = await service.update_article(
            AUTHOR, article.slug, ArticleChanges(title="How to Train Your Dragon!")
        )

        assert updated.slug == article.slug
        assert updated.title == "How to Train Your Dragon!"

    @pytest.mark.asyncio
    async def test_blank_fields_keep_values(self, service):
        article = await create_dragon(service)

        updated = await service.update_article(
            AUTHOR, article.slug, ArticleChanges(title="", description="  ")
        )

        assert updated.title == article.title
        assert updated.description == article.description

    @pytest.mark.asyncio
    async def test_non_author_is_forbidden(self, service):
        article = await create_dragon(service)

        with pytest.raises(ForbiddenError, match="update your own articles"):
            await service.update_article(
                OTHER, article.slug, ArticleChanges(body="hijacked")
            )

    @pytest.mark.asyncio
    async def test_unknown_slug_is_not_found(self, service):
        with pytest.raises(NotFoundError):
            await service.update_article(
                AUTHOR, Slug("missing"), ArticleChanges(body="x")
            )


class TestDeleteArticle:
    """Tests for ArticleService.delete_article()."""

    @pytest.mark.asyncio
    async def test_delete_removes_article_favorites_and_comments(
        self, service, store
    ):
        # Arrange
        article = await create_dragon(service)
        await service.favorite_article(OTHER, article.slug)
        comment_repo = InMemoryCommentRepository(store)
        await comment_repo.create(
            Comment(article_id=article.id, author_id=OTHER, body="Great")
        )

        # Act
        await service.delete_article(AUTHOR, article.slug)

        # Assert
        assert store.articles == {}
        assert store.favorites == set()
        assert store.comments == {}

    @pytest.mark.asyncio
    async def test_non_author_is_forbidden(self, service, article_repo):
        article = await create_dragon(service)

        with pytest.raises(ForbiddenError, match="delete your own articles"):
            await service.delete_article(OTHER, article.slug)

        assert await article_repo.find_by_slug(article.slug) is not None

    @pytest.mark.asyncio
    async def test_unknown_slug_is_not_found(self, service):
        with pytest.raises(NotFoundError):
            await service.delete_article(AUTHOR, Slug("missing"))


class TestFavorites:
    """Tests for favorite/unfavorite."""

    @pytest.mark.asyncio
    async def test_favorite_is_idempotent(self, service, article_repo, store):
        article = await create_dragon(service)

        await service.favorite_article(OTHER, article.slug)
        await service.favorite_article(OTHER, article.slug)

        assert await article_repo.is_favorited(article.id, OTHER)
        assert len(store.favorites) == 1

    @pytest.mark.asyncio
    async def test_unfavorite_without_favorite_is_noop(self, service, article_repo):
        article = await create_dragon(service)

        await service.unfavorite_article(OTHER, article.slug)

        assert not await article_repo.is_favorited(article.id, OTHER)

    @pytest.mark.asyncio
    async def test_favorite_unknown_slug_is_not_found(self, service):
        with pytest.raises(NotFoundError):
            await service.favorite_article(OTHER, Slug("missing"))
