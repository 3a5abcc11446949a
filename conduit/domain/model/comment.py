"""Comment entity.

Comments form their own aggregate: they are created and deleted without
touching the article they belong to, and go away with it.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from conduit.domain.model.common import DomainModel
from conduit.domain.value import ArticleId, CommentId, UserId


class Comment(DomainModel):
    """Comment on an article."""

    id: Optional[CommentId] = None
    article_id: ArticleId
    author_id: UserId
    body: str
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @field_validator("body")
    @classmethod
    def validate_body(cls, v: str) -> str:
        """Reject a blank body."""
        if not v.strip():
            raise ValueError("Body must not be blank")
        return v

    def with_id(self, comment_id: CommentId) -> "Comment":
        """Return a copy carrying the identity assigned by the store."""
        return self.evolve(id=comment_id)

    def belongs_to(self, article_id: ArticleId) -> bool:
        return self.article_id == article_id

    def can_be_deleted_by(self, user_id: UserId) -> bool:
        """Only the author may delete a comment."""
        return self.author_id == user_id
