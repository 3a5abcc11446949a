"""SQL implementation of User repository."""

from typing import Optional
from uuid import uuid4

import logfire
from sqlalchemy import func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from conduit.domain.model import User
from conduit.domain.repository import UserRepository
from conduit.domain.value import Email, UserId, Username
from conduit.persistence.mappers import row_to_user, user_to_dict
from conduit.persistence.statements import unique_violation_as_taken
from conduit.persistence.tables import users_table


class SqlUserRepository(UserRepository):
    """SQLAlchemy Core implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def create(self, user: User) -> User:
        """Insert a new user, assigning its ID."""
        with logfire.span("user_repository.create", username=user.username.root):
            stored = user.with_id(UserId(uuid4()))
            with unique_violation_as_taken("email", "username"):
                await self.session.execute(
                    insert(users_table).values(**user_to_dict(stored))
                )
            await self.session.flush()
            logfire.info("User created", user_id=str(stored.id))
            return stored

    async def update(self, user: User) -> User:
        """Overwrite the stored row of an existing user."""
        with logfire.span("user_repository.update", user_id=str(user.id)):
            values = user_to_dict(user)
            values.pop("id")
            values.pop("created_at")
            stmt = (
                update(users_table).where(users_table.c.id == user.id).values(**values)
            )
            with unique_violation_as_taken("email", "username"):
                await self.session.execute(stmt)
            await self.session.flush()
            return user

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        stmt = select(users_table).where(users_table.c.id == user_id)
        return await self._find_one(stmt)

    async def find_by_email(self, email: Email) -> Optional[User]:
        """Find a user by (normalized) email."""
        stmt = select(users_table).where(users_table.c.email == email.root)
        return await self._find_one(stmt)

    async def find_by_username(self, username: Username) -> Optional[User]:
        """Find a user by username."""
        stmt = select(users_table).where(users_table.c.username == username.root)
        return await self._find_one(stmt)

    async def exists_by_email(self, email: Email) -> bool:
        stmt = (
            select(func.count())
            .select_from(users_table)
            .where(users_table.c.email == email.root)
        )
        return ((await self.session.execute(stmt)).scalar() or 0) > 0

    async def exists_by_username(self, username: Username) -> bool:
        stmt = (
            select(func.count())
            .select_from(users_table)
            .where(users_table.c.username == username.root)
        )
        return ((await self.session.execute(stmt)).scalar() or 0) > 0

    async def _find_one(self, stmt) -> Optional[User]:
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None
