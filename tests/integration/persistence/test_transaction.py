"""Integration tests for the request transaction boundary.

Requests are served by the production persistence provider over a SQLite
file, so each request scope gets its own session and commits (or not) for
real.
"""

import pytest
import pytest_asyncio
from dishka import make_async_container
from sqlalchemy.ext.asyncio import create_async_engine

from conduit.application.transaction import Transaction
from conduit.domain.repository import ArticleRepository, UserRepository
from conduit.domain.service import ArticleService, UserService
from conduit.domain.value import Slug, Username
from conduit.persistence.tables import metadata
from conduit.util.di import (
    ProdApplicationProvider,
    ProdConfigProvider,
    ProdDomainProvider,
)
from conduit.util.di.infrastructure import ProdPersistenceProvider
from tests.di import MockPasswordProvider


@pytest_asyncio.fixture
async def container(tmp_path, monkeypatch):
    url = f"sqlite+aiosqlite:///{tmp_path / 'conduit.db'}"
    engine = create_async_engine(url)
    async with engine.begin() as conn:
        await conn.run_sync(metadata.create_all)
    await engine.dispose()
    monkeypatch.setenv("DATABASE__URL", url)

    container = make_async_container(
        ProdConfigProvider(),
        ProdDomainProvider(),
        ProdApplicationProvider(),
        ProdPersistenceProvider(),
        MockPasswordProvider(),
    )
    yield container
    await container.close()


async def register_jake(request) -> None:
    user_service = await request.get(UserService)
    await user_service.register("jake@example.com", "jake", "jakejake")


async def find_jake(container):
    async with container() as request:
        repo = await request.get(UserRepository)
        return await repo.find_by_username(Username("jake"))


class TestRequestTransaction:
    """Writes of a request commit together or not at all."""

    @pytest.mark.asyncio
    async def test_successful_request_commits(self, container):
        async with container() as request:
            await register_jake(request)

        assert await find_jake(container) is not None

    @pytest.mark.asyncio
    async def test_failed_request_leaves_no_writes(self, container):
        # Arrange
        async with container() as request:
            await register_jake(request)

        # Act
        with pytest.raises(RuntimeError):
            async with container() as request:
                users = await request.get(UserRepository)
                jake = await users.find_by_username(Username("jake"))
                user_service = await request.get(UserService)
                article_service = await request.get(ArticleService)
                await article_service.create_article(jake.id, "Dragons", "d", "b")
                await user_service.register("jane@example.com", "jane", "janejane")
                raise RuntimeError("request failed after writing")

        # Assert
        async with container() as request:
            articles = await request.get(ArticleRepository)
            users = await request.get(UserRepository)
            assert await articles.find_by_slug(Slug("dragons")) is None
            assert await users.find_by_username(Username("jane")) is None

    @pytest.mark.asyncio
    async def test_rolled_back_request_does_not_commit(self, container):
        async with container() as request:
            await register_jake(request)
            transaction = await request.get(Transaction)
            await transaction.rollback()

        assert await find_jake(container) is None
