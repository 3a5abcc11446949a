"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from conduit.domain.model.user import User
from conduit.domain.value import Email, UserId, Username


class UserRepository(ABC):
    """Repository for User aggregate.

    Defines the contract for user persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def create(self, user: User) -> User:
        """Persist a new user.

        Args:
            user: User without an identity

        Returns:
            The stored user, carrying its new ID
        """
        pass

    @abstractmethod
    async def update(self, user: User) -> User:
        """Persist changes to an existing user.

        Args:
            user: User with an identity

        Returns:
            The updated user
        """
        pass

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_email(self, email: Email) -> Optional[User]:
        """Find a user by email.

        Args:
            email: The user's email address

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_username(self, username: Username) -> Optional[User]:
        """Find a user by username.

        Args:
            username: The user's username

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def exists_by_email(self, email: Email) -> bool:
        """Check whether any user has this email."""
        pass

    @abstractmethod
    async def exists_by_username(self, username: Username) -> bool:
        """Check whether any user has this username."""
        pass
