"""Unit tests for article use cases."""

from dishka import AsyncContainer
import pytest

from conduit.application.security import SecurityContext
from conduit.application.usecase.article import (
    ArticleSlugRequest,
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
from conduit.application.usecase.tag import ListTagsUseCase
from conduit.domain.error import ForbiddenError, NotFoundError, UnauthorizedError
from conduit.domain.model import ArticleChanges
from conduit.domain.service import ProfileService, UserService
from conduit.persistence.repository.inmemory import InMemoryStore
from tests.conftest import as_user, backdate_articles, register
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()

ANONYMOUS = SecurityContext.anonymous()


def dragon(security: SecurityContext, **overrides) -> CreateArticleRequest:
    fields = {
        "title": "How to train your dragon",
        "description": "Ever wonder how?",
        "body": "You have to believe",
        "tag_list": ["training", "dragons"],
    }
    fields.update(overrides)
    return CreateArticleRequest(security=security, **fields)


async def publish(env: AsyncContainer, security: SecurityContext, title: str):
    use_case = await env.get(CreateArticleUseCase)
    response = await use_case.execute(dragon(security, title=title, tag_list=[]))
    return response.article


class TestCreateArticleUseCase:
    """Tests for CreateArticleUseCase."""

    @pytest.mark.asyncio
    async def test_create_returns_projection(self, unit_env: AsyncContainer):
        # Arrange
        jake = await register(await unit_env.get(UserService), "jake")
        use_case = await unit_env.get(CreateArticleUseCase)

        # Act
        response = await use_case.execute(dragon(as_user(jake)))

        # Assert
        article = response.article
        assert article.slug == "how-to-train-your-dragon"
        assert article.tag_list == ["dragons", "training"]
        assert article.favorited is False
        assert article.favorites_count == 0
        assert article.author.username == "jake"
        assert article.author.following is False

    @pytest.mark.asyncio
    async def test_second_article_with_same_title(self, unit_env: AsyncContainer):
        jake = await register(await unit_env.get(UserService), "jake")
        use_case = await unit_env.get(CreateArticleUseCase)

        await use_case.execute(dragon(as_user(jake)))
        response = await use_case.execute(dragon(as_user(jake)))

        assert response.article.slug == "how-to-train-your-dragon-2"

    @pytest.mark.asyncio
    async def test_anonymous_cannot_create(self, unit_env: AsyncContainer):
        use_case = await unit_env.get(CreateArticleUseCase)

        with pytest.raises(UnauthorizedError):
            await use_case.execute(dragon(ANONYMOUS))

    @pytest.mark.asyncio
    async def test_tags_are_listed(self, unit_env: AsyncContainer):
        jake = await register(await unit_env.get(UserService), "jake")
        await (await unit_env.get(CreateArticleUseCase)).execute(dragon(as_user(jake)))

        response = await (await unit_env.get(ListTagsUseCase)).execute()

        assert response.tags == ["dragons", "training"]


class TestGetArticleUseCase:
    """Tests for GetArticleUseCase."""

    @pytest.mark.asyncio
    async def test_anonymous_view_has_false_flags(self, unit_env: AsyncContainer):
        # Arrange
        user_service = await unit_env.get(UserService)
        jake = await register(user_service, "jake")
        jane = await register(user_service, "jane")
        created = await publish(unit_env, as_user(jake), "Dragons")
        await (await unit_env.get(FavoriteArticleUseCase)).execute(
            ArticleSlugRequest(security=as_user(jane), slug=created.slug)
        )
        await (await unit_env.get(ProfileService)).follow_user(jane.id, "jake")
        use_case = await unit_env.get(GetArticleUseCase)

        # Act
        anonymous = await use_case.execute(
            ArticleSlugRequest(security=ANONYMOUS, slug=created.slug)
        )
        as_jane = await use_case.execute(
            ArticleSlugRequest(security=as_user(jane), slug=created.slug)
        )

        # Assert
        assert anonymous.article.favorited is False
        assert anonymous.article.author.following is False
        assert anonymous.article.favorites_count == 1
        assert as_jane.article.favorited is True
        assert as_jane.article.author.following is True

    @pytest.mark.asyncio
    async def test_unknown_slug(self, unit_env: AsyncContainer):
        use_case = await unit_env.get(GetArticleUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(ArticleSlugRequest(security=ANONYMOUS, slug="nope"))


class TestUpdateAndDeleteArticleUseCases:
    """Tests for UpdateArticleUseCase and DeleteArticleUseCase."""

    @pytest.mark.asyncio
    async def test_title_change_moves_slug(self, unit_env: AsyncContainer):
        # Arrange
        jake = await register(await unit_env.get(UserService), "jake")
        created = await publish(unit_env, as_user(jake), "Dragons")
        use_case = await unit_env.get(UpdateArticleUseCase)

        # Act
        response = await use_case.execute(
            UpdateArticleRequest(
                security=as_user(jake),
                slug=created.slug,
                changes=ArticleChanges(title="Did you train your dragon?"),
            )
        )

        # Assert
        assert response.article.slug == "did-you-train-your-dragon"
        assert response.article.title == "Did you train your dragon?"
        assert response.article.body == "You have to believe"

    @pytest.mark.asyncio
    async def test_only_author_can_update(self, unit_env: AsyncContainer):
        user_service = await unit_env.get(UserService)
        jake = await register(user_service, "jake")
        jane = await register(user_service, "jane")
        created = await publish(unit_env, as_user(jake), "Dragons")
        use_case = await unit_env.get(UpdateArticleUseCase)

        with pytest.raises(ForbiddenError):
            await use_case.execute(
                UpdateArticleRequest(
                    security=as_user(jane),
                    slug=created.slug,
                    changes=ArticleChanges(body="hijacked"),
                )
            )

    @pytest.mark.asyncio
    async def test_malformed_slug_is_not_found(self, unit_env: AsyncContainer):
        jake = await register(await unit_env.get(UserService), "jake")
        use_case = await unit_env.get(DeleteArticleUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                ArticleSlugRequest(security=as_user(jake), slug="Not A Slug")
            )

    @pytest.mark.asyncio
    async def test_delete_then_get_is_not_found(self, unit_env: AsyncContainer):
        jake = await register(await unit_env.get(UserService), "jake")
        created = await publish(unit_env, as_user(jake), "Dragons")
        request = ArticleSlugRequest(security=as_user(jake), slug=created.slug)

        await (await unit_env.get(DeleteArticleUseCase)).execute(request)

        with pytest.raises(NotFoundError):
            await (await unit_env.get(GetArticleUseCase)).execute(request)


class TestFavoriteUseCases:
    """Tests for favoriting."""

    @pytest.mark.asyncio
    async def test_favorite_twice_counts_once(self, unit_env: AsyncContainer):
        user_service = await unit_env.get(UserService)
        jake = await register(user_service, "jake")
        jane = await register(user_service, "jane")
        created = await publish(unit_env, as_user(jake), "Dragons")
        use_case = await unit_env.get(FavoriteArticleUseCase)
        request = ArticleSlugRequest(security=as_user(jane), slug=created.slug)

        await use_case.execute(request)
        response = await use_case.execute(request)

        assert response.article.favorited is True
        assert response.article.favorites_count == 1

    @pytest.mark.asyncio
    async def test_unfavorite(self, unit_env: AsyncContainer):
        user_service = await unit_env.get(UserService)
        jake = await register(user_service, "jake")
        jane = await register(user_service, "jane")
        created = await publish(unit_env, as_user(jake), "Dragons")
        request = ArticleSlugRequest(security=as_user(jane), slug=created.slug)
        await (await unit_env.get(FavoriteArticleUseCase)).execute(request)

        response = await (await unit_env.get(UnfavoriteArticleUseCase)).execute(
            request
        )

        assert response.article.favorited is False
        assert response.article.favorites_count == 0


class TestListArticlesUseCase:
    """Tests for ListArticlesUseCase and FeedArticlesUseCase."""

    @pytest.mark.asyncio
    async def test_list_is_newest_first_and_filterable(
        self, unit_env: AsyncContainer
    ):
        # Arrange
        user_service = await unit_env.get(UserService)
        jake = await register(user_service, "jake")
        jane = await register(user_service, "jane")
        create = await unit_env.get(CreateArticleUseCase)
        await create.execute(dragon(as_user(jake), title="First", tag_list=["a"]))
        await create.execute(dragon(as_user(jane), title="Second", tag_list=["b"]))
        await create.execute(dragon(as_user(jake), title="Third", tag_list=["a"]))
        backdate_articles(await unit_env.get(InMemoryStore), "first", "second", "third")
        await (await unit_env.get(FavoriteArticleUseCase)).execute(
            ArticleSlugRequest(security=as_user(jane), slug="first")
        )
        use_case = await unit_env.get(ListArticlesUseCase)

        # Act
        everything = await use_case.execute(ListArticlesRequest(security=ANONYMOUS))
        by_tag = await use_case.execute(
            ListArticlesRequest(security=ANONYMOUS, tag="a")
        )
        by_author = await use_case.execute(
            ListArticlesRequest(security=ANONYMOUS, author="jane")
        )
        favorited = await use_case.execute(
            ListArticlesRequest(security=ANONYMOUS, favorited="jane")
        )
        combined = await use_case.execute(
            ListArticlesRequest(security=ANONYMOUS, tag="a", author="jane")
        )

        # Assert
        assert [a.slug for a in everything.articles] == ["third", "second", "first"]
        assert everything.articles_count == 3
        assert [a.slug for a in by_tag.articles] == ["third", "first"]
        assert [a.slug for a in by_author.articles] == ["second"]
        assert [a.slug for a in favorited.articles] == ["first"]
        assert combined.articles == []
        assert combined.articles_count == 0

    @pytest.mark.asyncio
    async def test_pagination(self, unit_env: AsyncContainer):
        jake = await register(await unit_env.get(UserService), "jake")
        for title in ("one", "two", "three"):
            await publish(unit_env, as_user(jake), title)
        backdate_articles(await unit_env.get(InMemoryStore), "one", "two", "three")
        use_case = await unit_env.get(ListArticlesUseCase)

        page = await use_case.execute(
            ListArticlesRequest(security=ANONYMOUS, limit=1, offset=1)
        )

        assert [a.slug for a in page.articles] == ["two"]
        assert page.articles_count == 1

    @pytest.mark.asyncio
    async def test_feed_only_has_followed_authors(self, unit_env: AsyncContainer):
        # Arrange
        user_service = await unit_env.get(UserService)
        jake = await register(user_service, "jake")
        jane = await register(user_service, "jane")
        bob = await register(user_service, "bob")
        await publish(unit_env, as_user(jake), "Jake one")
        await publish(unit_env, as_user(bob), "Bob one")
        await publish(unit_env, as_user(jake), "Jake two")
        backdate_articles(
            await unit_env.get(InMemoryStore), "jake-one", "bob-one", "jake-two"
        )
        await (await unit_env.get(ProfileService)).follow_user(jane.id, "jake")
        use_case = await unit_env.get(FeedArticlesUseCase)

        # Act
        feed = await use_case.execute(FeedArticlesRequest(security=as_user(jane)))

        # Assert
        assert [a.slug for a in feed.articles] == ["jake-two", "jake-one"]
        assert all(a.author.following for a in feed.articles)

    @pytest.mark.asyncio
    async def test_feed_requires_authentication(self, unit_env: AsyncContainer):
        use_case = await unit_env.get(FeedArticlesUseCase)

        with pytest.raises(UnauthorizedError):
            await use_case.execute(FeedArticlesRequest(security=ANONYMOUS))

    @pytest.mark.asyncio
    async def test_empty_feed(self, unit_env: AsyncContainer):
        jane = await register(await unit_env.get(UserService), "jane")
        use_case = await unit_env.get(FeedArticlesUseCase)

        feed = await use_case.execute(FeedArticlesRequest(security=as_user(jane)))

        assert feed.articles == []
        assert feed.articles_count == 0
