"""SQL implementation of Follow repository."""

import logfire
from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from conduit.domain.repository import FollowRepository
from conduit.domain.value import UserId
from conduit.persistence.statements import insert_ignore
from conduit.persistence.tables import followers_table


class SqlFollowRepository(FollowRepository):
    """SQLAlchemy Core implementation of FollowRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def follow(self, follower_id: UserId, followee_id: UserId) -> None:
        with logfire.span(
            "follow_repository.follow",
            follower_id=str(follower_id),
            followee_id=str(followee_id),
        ):
            await insert_ignore(
                self.session,
                followers_table,
                {"follower_id": follower_id, "followee_id": followee_id},
            )
            await self.session.flush()

    async def unfollow(self, follower_id: UserId, followee_id: UserId) -> None:
        await self.session.execute(
            delete(followers_table).where(
                followers_table.c.follower_id == follower_id,
                followers_table.c.followee_id == followee_id,
            )
        )
        await self.session.flush()

    async def is_following(self, follower_id: UserId, followee_id: UserId) -> bool:
        stmt = (
            select(func.count())
            .select_from(followers_table)
            .where(
                followers_table.c.follower_id == follower_id,
                followers_table.c.followee_id == followee_id,
            )
        )
        result = await self.session.execute(stmt)
        return (result.scalar() or 0) > 0
