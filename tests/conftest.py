"""Test configuration and fixtures."""

from datetime import datetime, timedelta

from conduit.application.security import SecurityContext
from conduit.domain.model import User
from conduit.domain.service import UserService
from conduit.persistence.repository.inmemory import InMemoryStore

PASSWORD = "jakejake"


async def register(
    user_service: UserService, username: str, password: str = PASSWORD
) -> User:
    """Register a user with an email derived from the username."""
    return await user_service.register(f"{username}@example.com", username, password)


def as_user(user: User) -> SecurityContext:
    """Security context of a signed-in user."""
    return SecurityContext.for_user(user.id)


def backdate_articles(store: InMemoryStore, *slugs: str) -> None:
    """Give articles strictly increasing creation times, in argument order.

    Articles created in quick succession can share a timestamp; listing
    tests need a deterministic newest-first order.
    """
    start = datetime(2024, 1, 1, 12, 0, 0)
    by_slug = {article.slug.root: article for article in store.articles.values()}
    for index, slug in enumerate(slugs):
        article = by_slug[slug]
        stamp = start + timedelta(minutes=index)
        store.articles[article.id] = article.evolve(created_at=stamp, updated_at=stamp)
