"""User aggregate root.

Users register with an email, a username and a password, and own the
articles and comments they write.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from conduit.domain.model.common import ChangeSet, DomainModel, FieldState
from conduit.domain.value import Email, UserId, Username


class UserChanges(ChangeSet):
    """Partial update of the current user.

    Email, username and password keep their current value when unset or
    blank. Bio and image are cleared when supplied blank.
    """

    email: Optional[str] = None
    username: Optional[str] = None
    password: Optional[str] = None
    bio: Optional[str] = None
    image: Optional[str] = None


class User(DomainModel):
    """User aggregate root.

    The password hash is opaque to the domain and never leaves the
    persistence and authentication paths.
    """

    id: Optional[UserId] = None
    email: Email
    username: Username
    password_hash: str = Field(min_length=1, repr=False)
    bio: Optional[str] = None
    image: Optional[str] = None
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    def with_id(self, user_id: UserId) -> "User":
        """Return a copy carrying the identity assigned by the store."""
        return self.evolve(id=user_id)

    def update_profile(self, changes: UserChanges) -> "User":
        """Apply profile changes, returning a new user.

        Args:
            changes: Fields to change

        Returns:
            Updated user with a fresh updated_at
        """
        return self.evolve(
            email=changes.value_or("email", self.email),
            username=changes.value_or("username", self.username),
            bio=self._optional(changes, "bio", self.bio),
            image=self._optional(changes, "image", self.image),
            updated_at=datetime.now(),
        )

    def update_password(self, password_hash: str) -> "User":
        """Return a new user with the given password hash."""
        return self.evolve(password_hash=password_hash, updated_at=datetime.now())

    @staticmethod
    def _optional(
        changes: UserChanges, field: str, current: Optional[str]
    ) -> Optional[str]:
        state = changes.state(field)
        if state is FieldState.UNSET:
            return current
        if state is FieldState.BLANK:
            return None
        return getattr(changes, field)
