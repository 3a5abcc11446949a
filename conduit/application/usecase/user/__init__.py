"""User use cases."""

from .common import AuthenticatedUser, UserResponse
from .get_current_user import GetCurrentUserRequest, GetCurrentUserUseCase
from .login import LoginRequest, LoginUseCase
from .register import RegisterUserRequest, RegisterUserUseCase
from .update_user import UpdateUserRequest, UpdateUserUseCase

__all__ = [
    "AuthenticatedUser",
    "GetCurrentUserRequest",
    "GetCurrentUserUseCase",
    "LoginRequest",
    "LoginUseCase",
    "RegisterUserRequest",
    "RegisterUserUseCase",
    "UpdateUserRequest",
    "UpdateUserUseCase",
    "UserResponse",
]
