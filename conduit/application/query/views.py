"""Read-side projections.

These are presentation-ready views assembled straight from storage; they
never pass through the domain entities. Field names serialize as camelCase.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class View(BaseModel):
    """Base for read projections."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class ProfileView(View):
    """Public profile, relative to the viewer."""

    username: str
    bio: Optional[str] = None
    image: Optional[str] = None
    following: bool = False


class ArticleView(View):
    """Article with author profile, tags and viewer-relative flags."""

    slug: str
    title: str
    description: str
    body: str
    tag_list: list[str] = []
    created_at: datetime
    updated_at: datetime
    favorited: bool = False
    favorites_count: int = 0
    author: ProfileView


class CommentView(View):
    """Comment with author profile."""

    id: str
    body: str
    created_at: datetime
    updated_at: datetime
    author: ProfileView


# Largest LIMIT/OFFSET a signed 64-bit SQL integer can carry
MAX_PAGE_VALUE = 2**63 - 1


class ArticleFilter(BaseModel):
    """Filters for article listings. All given filters must match."""

    model_config = ConfigDict(frozen=True)

    tag: Optional[str] = None
    author: Optional[str] = None  # Author's username
    favorited_by: Optional[str] = None  # Username of a user who favorited
    limit: int = Field(default=20, ge=1, le=MAX_PAGE_VALUE)
    offset: int = Field(default=0, ge=0, le=MAX_PAGE_VALUE)
