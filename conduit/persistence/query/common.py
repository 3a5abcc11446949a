"""Shared pieces of the read-side statements."""

from typing import Any, Mapping, Optional

from sqlalchemy import ColumnElement, exists, literal

from conduit.application.query import ProfileView
from conduit.domain.value import UserId
from conduit.persistence.tables import followers_table, users_table


def following_flag(
    viewer_id: Optional[UserId], author_id: ColumnElement[Any]
) -> ColumnElement[Any]:
    """``EXISTS`` test for a follow edge from the viewer to ``author_id``.

    Anonymous viewers get a constant false column.
    """
    if viewer_id is None:
        return literal(False).label("following")
    return (
        exists()
        .where(
            followers_table.c.follower_id == viewer_id,
            followers_table.c.followee_id == author_id,
        )
        .label("following")
    )


def author_columns() -> list[ColumnElement[Any]]:
    return [
        users_table.c.username.label("author_username"),
        users_table.c.bio.label("author_bio"),
        users_table.c.image.label("author_image"),
    ]


def row_to_author(row: Mapping[str, Any]) -> ProfileView:
    return ProfileView(
        username=row["author_username"],
        bio=row["author_bio"],
        image=row["author_image"],
        following=bool(row["following"]),
    )
