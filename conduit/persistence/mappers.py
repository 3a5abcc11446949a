"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict, Iterable
from uuid import UUID

from conduit.domain.model import Article, Comment, User
from conduit.domain.value import ArticleId, CommentId, Email, Slug, UserId, Username


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(_uuid(row["id"])),
        email=Email(row["email"]),
        username=Username(row["username"]),
        password_hash=row["password_hash"],
        bio=row.get("bio"),
        image=row.get("image"),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict.

    Args:
        user: User domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return user.model_dump()


def row_to_article(row: Dict[str, Any], tag_names: Iterable[str] = ()) -> Article:
    """Convert database row to Article domain model.

    Args:
        row: Database row as dict
        tag_names: Names of the tags associated with the article

    Returns:
        Article domain model
    """
    return Article(
        id=ArticleId(_uuid(row["id"])),
        slug=Slug(row["slug"]),
        title=row["title"],
        description=row["description"],
        body=row["body"],
        author_id=UserId(_uuid(row["author_id"])),
        tags=frozenset(tag_names),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def article_to_dict(article: Article) -> Dict[str, Any]:
    """Convert Article domain model to an ``articles`` row.

    Tags live in their own tables and are excluded.

    Args:
        article: Article domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return article.model_dump(exclude={"tags"})


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    return Comment(
        id=CommentId(_uuid(row["id"])),
        article_id=ArticleId(_uuid(row["article_id"])),
        author_id=UserId(_uuid(row["author_id"])),
        body=row["body"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict.

    Args:
        comment: Comment domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return comment.model_dump()
