"""Tag routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from conduit.application.usecase.tag import ListTagsResponse, ListTagsUseCase

router = APIRouter(prefix="/tags", tags=["tags"], route_class=DishkaRoute)


@router.get("", response_model=ListTagsResponse, summary="List all tags")
async def list_tags(use_case: FromDishka[ListTagsUseCase]) -> ListTagsResponse:
    """List every tag used by any article, sorted by name."""
    return await use_case.execute()
