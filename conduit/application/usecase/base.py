"""Base use case and shared request parsing."""

from abc import ABC, abstractmethod
from typing import Any
from uuid import UUID

from pydantic import ValidationError as PydanticValidationError

from conduit.domain.error import NotFoundError
from conduit.domain.value import CommentId, Slug


class BaseUseCase(ABC):
    """Base use case for orchestrating domain services."""

    @abstractmethod
    async def execute(self, request: Any) -> Any:
        pass


def parse_slug(value: str) -> Slug:
    """Parse a slug from a request; a malformed one cannot name an article."""
    try:
        return Slug(value)
    except PydanticValidationError:
        raise NotFoundError("Article", value)


def parse_comment_id(value: str) -> CommentId:
    """Parse a comment ID from a request; a malformed one names no comment."""
    try:
        return CommentId(UUID(value))
    except ValueError:
        raise NotFoundError("Comment", value)
