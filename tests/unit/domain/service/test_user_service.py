"""Unit tests for UserService."""

from uuid import uuid4

import pytest

from conduit.adapter.password import BcryptPasswordHasher
from conduit.domain.error import UnauthorizedError, ValidationError
from conduit.domain.model import UserChanges
from conduit.domain.service import UserService
from conduit.domain.value import Email, UserId, Username
from conduit.persistence.repository.inmemory import InMemoryUserRepository


@pytest.fixture
def user_repo():
    return InMemoryUserRepository()


@pytest.fixture
def service(user_repo):
    return UserService(user_repo, BcryptPasswordHasher(rounds=4))


class TestRegister:
    """Tests for UserService.register()."""

    @pytest.mark.asyncio
    async def test_register_creates_user(self, service, user_repo):
        """Should store the user with a hashed password."""
        # Act
        user = await service.register("Jake@Jake.jake", "jake", "jakejake")

        # Assert
        assert user.id is not None
        assert user.email == Email("jake@jake.jake")
        assert user.username == Username("jake")
        assert user.password_hash != "jakejake"
        assert await user_repo.find_by_id(user.id) == user

    @pytest.mark.asyncio
    async def test_register_rejects_taken_email_and_username(self, service):
        """Should report both conflicts together."""
        # Arrange
        await service.register("jake@jake.jake", "jake", "jakejake")

        # Act
        with pytest.raises(ValidationError) as exc_info:
            await service.register("JAKE@jake.jake", "jake", "jakejake")

        # Assert
        assert exc_info.value.errors == {
            "email": ["is already taken"],
            "username": ["is already taken"],
        }

    @pytest.mark.asyncio
    async def test_register_collects_every_invalid_field(self, service):
        """Malformed email, username and short password are reported at once."""
        with pytest.raises(ValidationError) as exc_info:
            await service.register("not-an-email", "x", "short")

        errors = exc_info.value.errors
        assert errors["email"] == ["Email must be a valid email address"]
        assert "username" in errors
        assert errors["password"] == ["must be at least 8 characters"]

    @pytest.mark.asyncio
    async def test_register_rejects_blank_email(self, service):
        with pytest.raises(ValidationError) as exc_info:
            await service.register("", "jake", "jakejake")

        assert exc_info.value.errors == {"email": ["Email must not be blank"]}

    @pytest.mark.asyncio
    async def test_min_password_length_is_configurable(self, user_repo):
        service = UserService(
            user_repo, BcryptPasswordHasher(rounds=4), min_password_length=12
        )

        with pytest.raises(ValidationError) as exc_info:
            await service.register("jake@jake.jake", "jake", "jakejake")

        assert exc_info.value.errors == {
            "password": ["must be at least 12 characters"]
        }


class TestLogin:
    """Tests for UserService.login()."""

    @pytest.mark.asyncio
    async def test_login_with_valid_credentials(self, service):
        registered = await service.register("jake@jake.jake", "jake", "jakejake")

        user = await service.login("JAKE@jake.jake", "jakejake")

        assert user.id == registered.id

    @pytest.mark.asyncio
    async def test_login_with_wrong_password(self, service):
        await service.register("jake@jake.jake", "jake", "jakejake")

        with pytest.raises(UnauthorizedError, match="Invalid email or password"):
            await service.login("jake@jake.jake", "wrong-password")

    @pytest.mark.asyncio
    async def test_login_with_unknown_email(self, service):
        with pytest.raises(UnauthorizedError, match="Invalid email or password"):
            await service.login("nobody@jake.jake", "jakejake")

    @pytest.mark.asyncio
    async def test_login_with_malformed_email(self, service):
        with pytest.raises(UnauthorizedError):
            await service.login("nobody", "jakejake")


class TestUpdateUser:
    """Tests for UserService.update_user()."""

    @pytest.mark.asyncio
    async def test_update_bio_and_image(self, service):
        user = await service.register("jake@jake.jake", "jake", "jakejake")

        updated = await service.update_user(
            user.id, UserChanges(bio="I like to skateboard", image="https://x/y.png")
        )

        assert updated.bio == "I like to skateboard"
        assert updated.image == "https://x/y.png"
        assert updated.email == user.email

    @pytest.mark.asyncio
    async def test_keeping_own_email_is_not_a_conflict(self, service):
        user = await service.register("jake@jake.jake", "jake", "jakejake")

        updated = await service.update_user(
            user.id, UserChanges(email="jake@jake.jake", username="jake")
        )

        assert updated.username == Username("jake")

    @pytest.mark.asyncio
    async def test_taking_another_users_username_fails(self, service):
        await service.register("jane@jake.jake", "jane", "janejane")
        user = await service.register("jake@jake.jake", "jake", "jakejake")

        with pytest.raises(ValidationError) as exc_info:
            await service.update_user(user.id, UserChanges(username="jane"))

        assert exc_info.value.errors == {"username": ["is already taken"]}

    @pytest.mark.asyncio
    async def test_password_change_rehashes(self, service):
        user = await service.register("jake@jake.jake", "jake", "jakejake")

        await service.update_user(user.id, UserChanges(password="dragonrider"))

        assert (await service.login("jake@jake.jake", "dragonrider")).id == user.id
        with pytest.raises(UnauthorizedError):
            await service.login("jake@jake.jake", "jakejake")

    @pytest.mark.asyncio
    async def test_blank_password_keeps_current(self, service):
        user = await service.register("jake@jake.jake", "jake", "jakejake")

        await service.update_user(user.id, UserChanges(password=""))

        assert (await service.login("jake@jake.jake", "jakejake")).id == user.id

    @pytest.mark.asyncio
    async def test_short_password_is_rejected(self, service):
        user = await service.register("jake@jake.jake", "jake", "jakejake")

        with pytest.raises(ValidationError) as exc_info:
            await service.update_user(user.id, UserChanges(password="short"))

        assert "password" in exc_info.value.errors

    @pytest.mark.asyncio
    async def test_unknown_user_is_unauthorized(self, service):
        with pytest.raises(UnauthorizedError, match="User not found"):
            await service.update_user(UserId(uuid4()), UserChanges(bio="x"))
