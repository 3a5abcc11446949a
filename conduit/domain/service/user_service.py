"""User domain service."""

import logfire
from pydantic import ValidationError as PydanticValidationError

from conduit.domain.error import UnauthorizedError, ValidationError
from conduit.domain.model import User, UserChanges
from conduit.domain.model.common import FieldState
from conduit.domain.repository import UserRepository
from conduit.domain.value import Email, UserId, Username

from .base import Service
from .password import PasswordHasher

TAKEN = "is already taken"
INVALID_CREDENTIALS = "Invalid email or password"


class UserService(Service):
    """Domain service for registration, authentication and account updates."""

    def __init__(
        self,
        user_repository: UserRepository,
        password_hasher: PasswordHasher,
        min_password_length: int = 8,
    ) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
            password_hasher: Password hashing adapter
            min_password_length: Shortest accepted password
        """
        self.user_repository = user_repository
        self.password_hasher = password_hasher
        self.min_password_length = min_password_length

    async def register(self, email: str, username: str, password: str) -> User:
        """Register a new user.

        Every problem with the input is collected before failing, so the
        caller sees all of them at once.

        Args:
            email: Email address (normalized to lowercase)
            username: Public username
            password: Plaintext password

        Returns:
            Created user

        Raises:
            ValidationError: If any field is invalid or already taken
        """
        with logfire.span("user_service.register", username=username):
            errors: dict[str, list[str]] = {}

            valid_email = self._parse(Email, "email", email, errors)
            if valid_email and await self.user_repository.exists_by_email(valid_email):
                errors.setdefault("email", []).append(TAKEN)

            valid_username = self._parse(Username, "username", username, errors)
            if valid_username and await self.user_repository.exists_by_username(
                valid_username
            ):
                errors.setdefault("username", []).append(TAKEN)

            self._check_password(password, errors)

            if errors:
                logfire.warn("Registration rejected", fields=sorted(errors))
                raise ValidationError(errors)

            user = User(
                email=valid_email,
                username=valid_username,
                password_hash=self.password_hasher.hash(password),
            )
            created = await self.user_repository.create(user)
            logfire.info(
                "User registered", user_id=str(created.id), username=username
            )
            return created

    async def login(self, email: str, password: str) -> User:
        """Authenticate with email and password.

        Args:
            email: Email address
            password: Plaintext password

        Returns:
            Authenticated user

        Raises:
            UnauthorizedError: If the email is unknown or the password is wrong
        """
        with logfire.span("user_service.login"):
            try:
                valid_email = Email(email)
            except PydanticValidationError:
                logfire.warn("Login with malformed email")
                raise UnauthorizedError(INVALID_CREDENTIALS)

            user = await self.user_repository.find_by_email(valid_email)
            if not user or not self.password_hasher.verify(
                user.password_hash, password
            ):
                logfire.warn("Login failed")
                raise UnauthorizedError(INVALID_CREDENTIALS)

            logfire.info("User logged in", user_id=str(user.id))
            return user

    async def get_current_user(self, user_id: UserId) -> User:
        """Load the authenticated user.

        Args:
            user_id: ID taken from the caller's credentials

        Returns:
            User entity

        Raises:
            UnauthorizedError: If the user no longer exists
        """
        with logfire.span("user_service.get_current_user", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("Authenticated user not found", user_id=str(user_id))
                raise UnauthorizedError("User not found")
            return user

    async def update_user(self, user_id: UserId, changes: UserChanges) -> User:
        """Update the authenticated user's account.

        Uniqueness is checked only for an email or username that actually
        changes; the password is re-hashed only when one is supplied.

        Args:
            user_id: ID of the user being updated
            changes: Fields to change

        Returns:
            Updated user

        Raises:
            UnauthorizedError: If the user no longer exists
            ValidationError: If a new value is invalid or already taken
        """
        with logfire.span("user_service.update_user", user_id=str(user_id)):
            user = await self.get_current_user(user_id)
            errors: dict[str, list[str]] = {}

            if changes.state("email") is FieldState.VALUE:
                new_email = self._parse(Email, "email", changes.email, errors)
                if (
                    new_email
                    and new_email != user.email
                    and await self.user_repository.exists_by_email(new_email)
                ):
                    errors.setdefault("email", []).append(TAKEN)

            if changes.state("username") is FieldState.VALUE:
                new_username = self._parse(
                    Username, "username", changes.username, errors
                )
                if (
                    new_username
                    and new_username != user.username
                    and await self.user_repository.exists_by_username(new_username)
                ):
                    errors.setdefault("username", []).append(TAKEN)

            if changes.state("password") is FieldState.VALUE:
                self._check_password(changes.password, errors)

            if errors:
                logfire.warn("User update rejected", fields=sorted(errors))
                raise ValidationError(errors)

            try:
                updated = user.update_profile(changes)
            except PydanticValidationError as e:
                raise ValidationError.from_pydantic(e)

            if changes.state("password") is FieldState.VALUE:
                updated = updated.update_password(
                    self.password_hasher.hash(changes.password)
                )

            saved = await self.user_repository.update(updated)
            logfire.info("User updated", user_id=str(user_id))
            return saved

    def _check_password(self, password: str, errors: dict[str, list[str]]) -> None:
        if len(password or "") < self.min_password_length:
            errors.setdefault("password", []).append(
                f"must be at least {self.min_password_length} characters"
            )

    @staticmethod
    def _parse(factory, field: str, value: str, errors: dict[str, list[str]]):
        """Build a value object, recording failures under ``field``."""
        try:
            return factory(value)
        except PydanticValidationError as e:
            translated = ValidationError.from_pydantic(e, field)
            for name, messages in translated.errors.items():
                errors.setdefault(name, []).extend(messages)
            return None
