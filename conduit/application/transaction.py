"""Request-wide unit of work.

Every repository write made while serving one request belongs to a single
transaction. It is committed when the request completes and rolled back
when the request fails, whether the failure escapes as an exception or is
turned into an error response first.
"""

from abc import ABC, abstractmethod


class Transaction(ABC):
    """Unit of work shared by the repositories of one request."""

    def __init__(self) -> None:
        self.rolled_back = False

    @abstractmethod
    async def _commit(self) -> None:
        pass

    @abstractmethod
    async def _rollback(self) -> None:
        pass

    async def rollback(self) -> None:
        """Discard every write made so far; the request can no longer commit."""
        self.rolled_back = True
        await self._rollback()

    async def complete(self, failed: bool) -> None:
        """End the unit of work when its request scope closes.

        Args:
            failed: Whether the request raised an exception
        """
        if failed or self.rolled_back:
            await self.rollback()
        else:
            await self._commit()
