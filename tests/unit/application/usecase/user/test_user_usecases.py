"""Unit tests for registration, login and account use cases."""

from uuid import uuid4

from dishka import AsyncContainer
import pytest

from conduit.application.security import SecurityContext
from conduit.application.usecase.user import (
    GetCurrentUserRequest,
    GetCurrentUserUseCase,
    LoginRequest,
    LoginUseCase,
    RegisterUserRequest,
    RegisterUserUseCase,
    UpdateUserRequest,
    UpdateUserUseCase,
)
from conduit.domain.error import UnauthorizedError, ValidationError
from conduit.domain.model import UserChanges
from conduit.domain.service import JWTService
from conduit.domain.value import UserId
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()

JAKE = RegisterUserRequest(
    email="jake@jake.jake", username="jake", password="jakejake"
)


class TestRegisterUserUseCase:
    """Tests for RegisterUserUseCase."""

    @pytest.mark.asyncio
    async def test_register_returns_account_with_token(self, unit_env: AsyncContainer):
        """Registration should sign the new user in."""
        # Arrange
        use_case = await unit_env.get(RegisterUserUseCase)
        jwt_service = await unit_env.get(JWTService)

        # Act
        response = await use_case.execute(JAKE)

        # Assert
        assert response.user.email == "jake@jake.jake"
        assert response.user.username == "jake"
        assert response.user.bio is None
        assert response.user.image is None
        assert jwt_service.verify_token(response.user.token).username == "jake"

    @pytest.mark.asyncio
    async def test_duplicate_registration_fails(self, unit_env: AsyncContainer):
        use_case = await unit_env.get(RegisterUserUseCase)
        await use_case.execute(JAKE)

        with pytest.raises(ValidationError) as exc_info:
            await use_case.execute(JAKE)

        assert set(exc_info.value.errors) == {"email", "username"}


class TestLoginUseCase:
    """Tests for LoginUseCase."""

    @pytest.mark.asyncio
    async def test_login_returns_token(self, unit_env: AsyncContainer):
        # Arrange
        await (await unit_env.get(RegisterUserUseCase)).execute(JAKE)
        use_case = await unit_env.get(LoginUseCase)

        # Act
        response = await use_case.execute(
            LoginRequest(email="jake@jake.jake", password="jakejake")
        )

        # Assert
        assert response.user.username == "jake"
        assert response.user.token

    @pytest.mark.asyncio
    async def test_login_with_wrong_password(self, unit_env: AsyncContainer):
        await (await unit_env.get(RegisterUserUseCase)).execute(JAKE)
        use_case = await unit_env.get(LoginUseCase)

        with pytest.raises(UnauthorizedError):
            await use_case.execute(
                LoginRequest(email="jake@jake.jake", password="wrongpass")
            )


class TestCurrentUserUseCases:
    """Tests for GetCurrentUserUseCase and UpdateUserUseCase."""

    @pytest.mark.asyncio
    async def test_get_current_user(self, unit_env: AsyncContainer):
        # Arrange
        registered = await (await unit_env.get(RegisterUserUseCase)).execute(JAKE)
        jwt_service = await unit_env.get(JWTService)
        user_id = jwt_service.get_user_id_from_token(registered.user.token)
        use_case = await unit_env.get(GetCurrentUserUseCase)

        # Act
        response = await use_case.execute(
            GetCurrentUserRequest(security=SecurityContext.for_user(user_id))
        )

        # Assert
        assert response.user.email == "jake@jake.jake"

    @pytest.mark.asyncio
    async def test_anonymous_caller_is_unauthorized(self, unit_env: AsyncContainer):
        use_case = await unit_env.get(GetCurrentUserUseCase)

        with pytest.raises(UnauthorizedError):
            await use_case.execute(
                GetCurrentUserRequest(security=SecurityContext.anonymous())
            )

    @pytest.mark.asyncio
    async def test_token_for_deleted_user_is_unauthorized(
        self, unit_env: AsyncContainer
    ):
        use_case = await unit_env.get(GetCurrentUserUseCase)

        with pytest.raises(UnauthorizedError):
            await use_case.execute(
                GetCurrentUserRequest(
                    security=SecurityContext.for_user(UserId(uuid4()))
                )
            )

    @pytest.mark.asyncio
    async def test_update_user_reissues_token(self, unit_env: AsyncContainer):
        # Arrange
        registered = await (await unit_env.get(RegisterUserUseCase)).execute(JAKE)
        jwt_service = await unit_env.get(JWTService)
        user_id = jwt_service.get_user_id_from_token(registered.user.token)
        use_case = await unit_env.get(UpdateUserUseCase)

        # Act
        response = await use_case.execute(
            UpdateUserRequest(
                security=SecurityContext.for_user(user_id),
                changes=UserChanges(username="jacob", bio="I like to skateboard"),
            )
        )

        # Assert
        assert response.user.username == "jacob"
        assert response.user.bio == "I like to skateboard"
        assert jwt_service.verify_token(response.user.token).username == "jacob"
