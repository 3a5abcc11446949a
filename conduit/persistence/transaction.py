"""SQL unit of work."""

import logfire
from sqlalchemy.ext.asyncio import AsyncSession

from conduit.application.transaction import Transaction


class SqlTransaction(Transaction):
    """Commits or rolls back the request's database session."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__()
        self.session = session

    async def _commit(self) -> None:
        await self.session.commit()
        logfire.debug("Session committed")

    async def _rollback(self) -> None:
        await self.session.rollback()
        logfire.debug("Session rolled back")
