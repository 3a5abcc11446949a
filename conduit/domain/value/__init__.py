"""Domain value objects for Conduit."""

from conduit.domain.value.identifiers import (
    ArticleId,
    CommentId,
    UserId,
)
from conduit.domain.value.types import (
    Email,
    Slug,
    TagName,
    Username,
)

__all__ = [
    # Identifiers
    "UserId",
    "ArticleId",
    "CommentId",
    # Types
    "Email",
    "Username",
    "Slug",
    "TagName",
]
