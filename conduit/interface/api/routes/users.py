"""User and authentication routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, status
from pydantic import BaseModel

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
    UserResponse,
)
from conduit.domain.model import UserChanges

router = APIRouter(tags=["users"], route_class=DishkaRoute)


class RegisterAPIRequest(BaseModel):
    """API request for registration."""

    user: RegisterUserRequest


class LoginAPIRequest(BaseModel):
    """API request for login."""

    user: LoginRequest


class UpdateUserAPIRequest(BaseModel):
    """API request for updating the current user."""

    user: UserChanges


@router.post("/users", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def register(
    request: RegisterAPIRequest, use_case: FromDishka[RegisterUserUseCase]
) -> UserResponse:
    """Create an account and return it with a token."""
    with logfire.span("api.register"):
        return await use_case.execute(request.user)


@router.post("/users/login", response_model=UserResponse)
async def login(
    request: LoginAPIRequest, use_case: FromDishka[LoginUseCase]
) -> UserResponse:
    """Exchange email and password for a token."""
    with logfire.span("api.login"):
        return await use_case.execute(request.user)


@router.get("/user", response_model=UserResponse)
async def get_current_user(
    security: FromDishka[SecurityContext],
    use_case: FromDishka[GetCurrentUserUseCase],
) -> UserResponse:
    """Return the authenticated caller's account."""
    return await use_case.execute(GetCurrentUserRequest(security=security))


@router.put("/user", response_model=UserResponse)
async def update_current_user(
    request: UpdateUserAPIRequest,
    security: FromDishka[SecurityContext],
    use_case: FromDishka[UpdateUserUseCase],
) -> UserResponse:
    """Update the authenticated caller's account.

    Only the fields present in the body are changed.
    """
    with logfire.span("api.update_user"):
        return await use_case.execute(
            UpdateUserRequest(security=security, changes=request.user)
        )
