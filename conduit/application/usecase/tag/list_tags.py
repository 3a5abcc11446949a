"""List tags use case."""

from pydantic import BaseModel

from conduit.domain.service import ArticleService

from ..base import BaseUseCase


class ListTagsResponse(BaseModel):
    """All known tags, sorted by name."""

    tags: list[str]


class ListTagsUseCase(BaseUseCase):
    """Use case for listing tags."""

    def __init__(self, article_service: ArticleService) -> None:
        self.article_service = article_service

    async def execute(self, request: None = None) -> ListTagsResponse:
        tags = await self.article_service.get_all_tags()
        return ListTagsResponse(tags=tags)
