"""In-memory user repository for testing."""

from typing import Optional
from uuid import uuid4

from conduit.domain.error import ValidationError
from conduit.domain.model.user import User
from conduit.domain.repository.user import UserRepository
from conduit.domain.value import Email, UserId, Username

from .store import InMemoryStore


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store if store is not None else InMemoryStore()

    def _check_unique(self, user: User) -> None:
        taken: dict[str, list[str]] = {}
        for other in self._store.users.values():
            if other.id == user.id:
                continue
            if other.email == user.email:
                taken["email"] = ["is already taken"]
            if other.username == user.username:
                taken["username"] = ["is already taken"]
        if taken:
            raise ValidationError(taken)

    async def create(self, user: User) -> User:
        stored = user.with_id(UserId(uuid4()))
        self._check_unique(stored)
        self._store.users[stored.id] = stored
        return stored

    async def update(self, user: User) -> User:
        self._check_unique(user)
        self._store.users[user.id] = user
        return user

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._store.users.get(user_id)

    async def find_by_email(self, email: Email) -> Optional[User]:
        """Find a user by their email."""
        for user in self._store.users.values():
            if user.email == email:
                return user
        return None

    async def find_by_username(self, username: Username) -> Optional[User]:
        """Find a user by their username."""
        for user in self._store.users.values():
            if user.username == username:
                return user
        return None

    async def exists_by_email(self, email: Email) -> bool:
        return await self.find_by_email(email) is not None

    async def exists_by_username(self, username: Username) -> bool:
        return await self.find_by_username(username) is not None
