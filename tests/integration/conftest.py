"""Fixtures for SQL repository and query tests.

SQLite in-memory via aiosqlite runs the real SQLAlchemy statements without a
PostgreSQL server. StaticPool keeps every session on the same connection, so
they all see the same in-memory database. Tables are created fresh for each
test.
"""

from datetime import datetime, timedelta

import pytest_asyncio
from sqlalchemy import update
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from conduit.adapter.password import BcryptPasswordHasher
from conduit.domain.model import User
from conduit.domain.service import ArticleService, UserService
from conduit.persistence.database import create_session_factory
from conduit.persistence.repository import SqlArticleRepository, SqlUserRepository
from conduit.persistence.tables import articles_table, metadata
from tests.di.password import TEST_BCRYPT_ROUNDS

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def session(engine):
    session_factory: async_sessionmaker[AsyncSession] = create_session_factory(engine)
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def user_service(session):
    return UserService(
        SqlUserRepository(session), BcryptPasswordHasher(TEST_BCRYPT_ROUNDS)
    )


@pytest_asyncio.fixture
async def article_service(session):
    return ArticleService(SqlArticleRepository(session))


async def create_user(user_service: UserService, username: str) -> User:
    return await user_service.register(
        f"{username}@example.com", username, f"{username}-password"
    )


async def backdate(session: AsyncSession, *slugs: str) -> None:
    """Give articles strictly increasing creation times, in argument order."""
    start = datetime(2024, 1, 1, 12, 0, 0)
    for index, slug in enumerate(slugs):
        await session.execute(
            update(articles_table)
            .where(articles_table.c.slug == slug)
            .values(created_at=start + timedelta(minutes=index))
        )
    await session.flush()
