"""SQL implementation of profile queries."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from conduit.application.query import ProfileQueries, ProfileView
from conduit.domain.error import NotFoundError
from conduit.domain.value import UserId
from conduit.persistence.query.common import (
    author_columns,
    following_flag,
    row_to_author,
)
from conduit.persistence.tables import users_table


class SqlProfileQueries(ProfileQueries):
    """Profile projections assembled with SQLAlchemy Core."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get_profile_by_username(
        self, username: str, viewer_id: Optional[UserId] = None
    ) -> ProfileView:
        stmt = select(
            *author_columns(), following_flag(viewer_id, users_table.c.id)
        ).where(users_table.c.username == username)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        if not row:
            raise NotFoundError("Profile", username)
        return row_to_author(row)
