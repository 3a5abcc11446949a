"""Article aggregate root.

An article owns its tag set: tags change atomically with the article.
Favorites belong to the aggregate logically but are stored as a separate
relation, so loading an article never loads its favoriters.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, ValidationInfo, field_validator

from conduit.domain.model.common import ChangeSet, DomainModel
from conduit.domain.value import ArticleId, Slug, UserId
from conduit.domain.value.types import normalize_tag_name


class ArticleChanges(ChangeSet):
    """Partial update of an article.

    A field that is unset or blank keeps its current value, since title,
    description and body may never be blank.
    """

    title: Optional[str] = None
    description: Optional[str] = None
    body: Optional[str] = None


class Article(DomainModel):
    """Article aggregate root.

    Title, description and body are never blank. Tags are an unordered,
    de-duplicated set of trimmed names.
    """

    id: Optional[ArticleId] = None
    slug: Slug
    title: str
    description: str
    body: str
    author_id: UserId
    tags: frozenset[str] = frozenset()
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @field_validator("title", "description", "body")
    @classmethod
    def validate_not_blank(cls, v: str, info: ValidationInfo) -> str:
        """Reject blank text fields."""
        if not v.strip():
            raise ValueError(f"{info.field_name.capitalize()} must not be blank")
        return v

    @field_validator("tags", mode="before")
    @classmethod
    def normalize_tags(cls, v) -> frozenset[str]:
        """Trim tag names, dropping blanks and duplicates."""
        if v is None:
            return frozenset()
        if isinstance(v, str):
            raise ValueError("Tags must be a list of names")
        return frozenset(
            normalize_tag_name(name) for name in v if name and name.strip()
        )

    def with_id(self, article_id: ArticleId) -> "Article":
        """Return a copy carrying the identity assigned by the store."""
        return self.evolve(id=article_id)

    def update(
        self, *, slug: Slug, title: str, description: str, body: str
    ) -> "Article":
        """Return a new article with replaced content and a fresh updated_at."""
        return self.evolve(
            slug=slug,
            title=title,
            description=description,
            body=body,
            updated_at=datetime.now(),
        )

    def apply(self, changes: ArticleChanges, slug: Slug) -> "Article":
        """Apply a partial update, keeping fields that were not supplied."""
        return self.update(
            slug=slug,
            title=changes.value_or("title", self.title),
            description=changes.value_or("description", self.description),
            body=changes.value_or("body", self.body),
        )

    def title_changes(self, changes: ArticleChanges) -> bool:
        """True if applying ``changes`` would give the article a new title."""
        return changes.value_or("title", self.title) != self.title

    def can_be_modified_by(self, user_id: UserId) -> bool:
        """Only the author may update or delete an article."""
        return self.author_id == user_id
