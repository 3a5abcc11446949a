"""Profile routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from conduit.application.security import SecurityContext
from conduit.application.usecase.profile import (
    FollowUserUseCase,
    GetProfileUseCase,
    ProfileRequest,
    ProfileResponse,
    UnfollowUserUseCase,
)

router = APIRouter(prefix="/profiles", tags=["profiles"], route_class=DishkaRoute)


@router.get("/{username}", response_model=ProfileResponse)
async def get_profile(
    username: str,
    security: FromDishka[SecurityContext],
    use_case: FromDishka[GetProfileUseCase],
) -> ProfileResponse:
    """Get a public profile."""
    return await use_case.execute(ProfileRequest(security=security, username=username))


@router.post("/{username}/follow", response_model=ProfileResponse)
async def follow_user(
    username: str,
    security: FromDishka[SecurityContext],
    use_case: FromDishka[FollowUserUseCase],
) -> ProfileResponse:
    """Follow a user."""
    return await use_case.execute(ProfileRequest(security=security, username=username))


@router.delete("/{username}/follow", response_model=ProfileResponse)
async def unfollow_user(
    username: str,
    security: FromDishka[SecurityContext],
    use_case: FromDishka[UnfollowUserUseCase],
) -> ProfileResponse:
    """Stop following a user."""
    return await use_case.execute(ProfileRequest(security=security, username=username))
